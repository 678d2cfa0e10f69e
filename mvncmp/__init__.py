from __future__ import annotations

from mvncmp.api import compare_versions, max_version, sort_versions
from mvncmp.compare import compare_items
from mvncmp.errors import ItemComparisonError
from mvncmp.items import Item, NumericItem, QualifierItem, SegmentItem
from mvncmp.tokenizer import tokenize
from mvncmp.version import ComparableVersion, parse_version

__all__ = [
    "__version__",
    # Entry points
    "compare_versions",
    "sort_versions",
    "max_version",
    # Parsing
    "tokenize",
    "ComparableVersion",
    "parse_version",
    # Items
    "Item",
    "NumericItem",
    "QualifierItem",
    "SegmentItem",
    "compare_items",
    # Errors
    "ItemComparisonError",
]

__version__ = "0.1.0"
