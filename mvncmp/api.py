from __future__ import annotations

from collections.abc import Iterable
from functools import cmp_to_key

from mvncmp.compare import compare_items
from mvncmp.tokenizer import tokenize
from mvncmp.version import ComparableVersion, parse_version


def compare_versions(v1: str, v2: str) -> int:
    """Return -1 if ``v1`` is older than ``v2``, 0 if equal, 1 if newer.

    Ordering is case-insensitive and never fails, whatever the input.
    """
    return compare_items(tokenize(v1), tokenize(v2))


def sort_versions(versions: Iterable[str], *, reverse: bool = False) -> list[str]:
    # Parse once per string rather than once per comparison.
    parsed = [parse_version(v) for v in versions]
    parsed.sort(key=cmp_to_key(ComparableVersion.compare_to), reverse=reverse)
    return [p.raw for p in parsed]


def max_version(versions: Iterable[str]) -> str:
    newest: ComparableVersion | None = None
    for raw in versions:
        candidate = parse_version(raw)
        if newest is None or candidate > newest:
            newest = candidate
    if newest is None:
        raise ValueError("max_version() arg is an empty iterable")
    return newest.raw
