from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from mvncmp.qualifiers import RELEASE_KEY, qualifier_key


@dataclass(frozen=True, slots=True)
class NumericItem:
    value: int

    def is_null(self) -> bool:
        return self.value == 0

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, slots=True)
class QualifierItem:
    # Already resolved through shorthands and aliases.
    value: str

    def is_null(self) -> bool:
        return qualifier_key(self.value) == RELEASE_KEY

    def __str__(self) -> str:
        return self.value


@dataclass(slots=True)
class SegmentItem:
    """A run of items introduced by ``-`` or by a digit/letter transition.

    The root of a parsed version is also a segment. Children are appended while
    tokenizing and trimmed by :meth:`normalize`; the tree is not touched after
    that.
    """

    items: list[Item] = field(default_factory=list)

    def is_null(self) -> bool:
        return not self.items

    def append(self, item: Item) -> None:
        self.items.append(item)

    def normalize(self) -> None:
        # Trailing nulls go. A non-empty nested segment does not stop the walk,
        # so "1.0-x" and "1-x" end up the same.
        for i in range(len(self.items) - 1, -1, -1):
            item = self.items[i]
            if item.is_null():
                del self.items[i]
            elif not isinstance(item, SegmentItem):
                break

    def __str__(self) -> str:
        parts: list[str] = []
        for i, item in enumerate(self.items):
            if i > 0:
                parts.append("-" if isinstance(item, SegmentItem) else ".")
            parts.append(str(item))
        return "".join(parts)


Item = Union[NumericItem, QualifierItem, SegmentItem]

ZERO = NumericItem(0)
