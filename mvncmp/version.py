from __future__ import annotations

from dataclasses import dataclass, field

from mvncmp.compare import compare_items
from mvncmp.items import Item, NumericItem, QualifierItem, SegmentItem
from mvncmp.tokenizer import tokenize


@dataclass(frozen=True, slots=True, eq=False)
class ComparableVersion:
    """A version string paired with its parsed item tree.

    Worth keeping around when the same version is compared many times; the
    string is tokenized once.
    """

    raw: str
    items: SegmentItem = field(repr=False, compare=False)

    @classmethod
    def parse(cls, raw: str) -> "ComparableVersion":
        return parse_version(raw)

    @property
    def canonical(self) -> str:
        return str(self.items)

    def compare_to(self, other: ComparableVersion) -> int:
        return compare_items(self.items, other.items)

    def __str__(self) -> str:
        return self.raw

    def __hash__(self) -> int:
        return hash(_equality_key(self.items))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, ComparableVersion):
            return NotImplemented
        return self.compare_to(other) >= 0


def parse_version(raw: str) -> ComparableVersion:
    return ComparableVersion(raw=raw, items=tokenize(raw))


def _equality_key(item: Item) -> tuple:
    # Trailing children that compare equal to a missing item do not change
    # equality ("1-0.1" == "1"), so they must not change the hash either.
    if isinstance(item, NumericItem):
        return ("n", item.value)
    if isinstance(item, QualifierItem):
        return ("q", item.value)
    children = list(item.items)
    while children and compare_items(children[-1], None) == 0:
        children.pop()
    return ("s", tuple(_equality_key(child) for child in children))
