from __future__ import annotations

from itertools import zip_longest
from typing import Any

from mvncmp.errors import ItemComparisonError
from mvncmp.items import Item, NumericItem, QualifierItem, SegmentItem
from mvncmp.qualifiers import RELEASE_KEY, qualifier_key


def _cmp(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_items(left: Item | None, right: Item | None) -> int:
    """Three-way compare two items; ``None`` stands for a missing sibling.

    Returns -1, 0 or 1. Raises :class:`ItemComparisonError` for anything that
    is not an item, which the tokenizer never produces.
    """
    if left is None:
        if right is None:
            return 0
        return -compare_items(right, None)
    if isinstance(left, NumericItem):
        return _compare_numeric(left, right)
    if isinstance(left, QualifierItem):
        return _compare_qualifier(left, right)
    if isinstance(left, SegmentItem):
        return _compare_segment(left, right)
    raise ItemComparisonError(left, right)


def _compare_numeric(left: NumericItem, right: Item | None) -> int:
    if right is None:
        return 0 if left.value == 0 else 1  # 1.0 == 1, 1.1 > 1
    if isinstance(right, NumericItem):
        return _cmp(left.value, right.value)
    if isinstance(right, (QualifierItem, SegmentItem)):
        return 1  # 1.1 > 1-sp, 1.1 > 1-1
    raise ItemComparisonError(left, right)


def _compare_qualifier(left: QualifierItem, right: Item | None) -> int:
    if right is None:
        # 1-rc < 1 < 1-sp
        return _cmp(qualifier_key(left.value), RELEASE_KEY)
    if isinstance(right, QualifierItem):
        return _cmp(qualifier_key(left.value), qualifier_key(right.value))
    if isinstance(right, (NumericItem, SegmentItem)):
        return -1  # 1.x < 1.1, 1.x < 1-1
    raise ItemComparisonError(left, right)


def _compare_segment(left: SegmentItem, right: Item | None) -> int:
    if right is None:
        if not left.items:
            return 0
        return compare_items(left.items[0], None)
    if isinstance(right, NumericItem):
        return -1  # 1-1 < 1.1
    if isinstance(right, QualifierItem):
        return 1  # 1-1 > 1-sp
    if isinstance(right, SegmentItem):
        for l, r in zip_longest(left.items, right.items):
            result = compare_items(l, r)
            if result != 0:
                return result
        return 0
    raise ItemComparisonError(left, right)
