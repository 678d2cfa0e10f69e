from __future__ import annotations

from mvncmp.items import NumericItem, QualifierItem, SegmentItem


def test_null_items() -> None:
    assert NumericItem(0).is_null()
    assert not NumericItem(7).is_null()
    assert QualifierItem("").is_null()
    assert not QualifierItem("sp").is_null()
    assert not QualifierItem("alpha").is_null()
    assert SegmentItem().is_null()
    assert not SegmentItem([NumericItem(0)]).is_null()


def test_normalize_strips_trailing_nulls() -> None:
    seg = SegmentItem([NumericItem(1), NumericItem(0), QualifierItem(""), SegmentItem()])
    seg.normalize()
    assert seg == SegmentItem([NumericItem(1)])


def test_normalize_walks_past_non_empty_segments() -> None:
    nested = SegmentItem([QualifierItem("x")])
    seg = SegmentItem([NumericItem(1), NumericItem(0), nested, NumericItem(0)])
    seg.normalize()
    assert seg == SegmentItem([NumericItem(1), nested])


def test_normalize_stops_at_first_non_null_leaf() -> None:
    seg = SegmentItem([NumericItem(0), NumericItem(2), NumericItem(0)])
    seg.normalize()
    assert seg == SegmentItem([NumericItem(0), NumericItem(2)])


def test_canonical_text() -> None:
    seg = SegmentItem(
        [
            NumericItem(1),
            NumericItem(2),
            SegmentItem([QualifierItem("alpha"), SegmentItem([NumericItem(3)])]),
        ]
    )
    assert str(seg) == "1.2-alpha-3"
    assert str(SegmentItem()) == ""
