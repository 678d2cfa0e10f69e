from __future__ import annotations

import logging

from mvncmp.items import ZERO, Item, NumericItem, QualifierItem, SegmentItem
from mvncmp.qualifiers import normalize_qualifier

logger = logging.getLogger(__name__)

_DIGITS = frozenset("0123456789")


def _strip_leading_zeros(text: str) -> str:
    return text.lstrip("0") or "0"


def _parse_item(text: str, *, is_digit: bool) -> Item:
    if is_digit:
        return NumericItem(int(_strip_leading_zeros(text)))
    return QualifierItem(normalize_qualifier(text))


def tokenize(raw: str) -> SegmentItem:
    """Parse a version string into a normalized tree of items.

    Every string is accepted. ``.`` separates items inside a segment, ``-``
    and any digit/letter transition open a nested segment. An empty token
    between separators counts as ``0``.
    """
    version = raw.lower()
    root = SegmentItem()
    segment = root
    created: list[SegmentItem] = [root]
    inside_digit = False
    start = 0

    def descend() -> None:
        nonlocal segment
        child = SegmentItem()
        segment.append(child)
        created.append(child)
        segment = child

    for i, ch in enumerate(version):
        if ch == "." or ch == "-":
            if i == start:
                segment.append(ZERO)
            else:
                segment.append(_parse_item(version[start:i], is_digit=inside_digit))
            start = i + 1
            if ch == "-":
                descend()
        elif ch in _DIGITS:
            if not inside_digit and i > start:
                text = normalize_qualifier(version[start:i], followed_by_digit=True)
                segment.append(QualifierItem(text))
                start = i
                descend()
            inside_digit = True
        else:
            if inside_digit and i > start:
                segment.append(_parse_item(version[start:i], is_digit=True))
                start = i
                descend()
            inside_digit = False

    if len(version) > start:
        segment.append(_parse_item(version[start:], is_digit=inside_digit))

    # Children were created after their parents, so this is deepest first.
    for seg in reversed(created):
        seg.normalize()

    logger.debug("tokenized %r as %s", raw, root)
    return root
