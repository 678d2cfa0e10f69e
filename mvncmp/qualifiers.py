from __future__ import annotations

from types import MappingProxyType
from typing import Final, Mapping

# Pre-releases first, then the plain release (""), then service packs.
QUALIFIERS: Final[tuple[str, ...]] = ("alpha", "beta", "milestone", "rc", "snapshot", "", "sp")

ALIASES: Final[Mapping[str, str]] = MappingProxyType(
    {
        "ga": "",
        "final": "",
        "release": "",
        "cr": "rc",
    }
)

# Only applied to a single letter directly followed by a digit, e.g. "1a1".
SHORTHANDS: Final[Mapping[str, str]] = MappingProxyType(
    {
        "a": "alpha",
        "b": "beta",
        "m": "milestone",
    }
)

_RANKS: Final[Mapping[str, int]] = MappingProxyType({q: i for i, q in enumerate(QUALIFIERS)})
_UNKNOWN_RANK: Final[int] = len(QUALIFIERS)


def normalize_qualifier(text: str, *, followed_by_digit: bool = False) -> str:
    if followed_by_digit and len(text) == 1:
        text = SHORTHANDS.get(text, text)
    return ALIASES.get(text, text)


def qualifier_key(value: str) -> tuple[int, str]:
    """Sort key for a normalized qualifier.

    Recognized qualifiers sort by their position in ``QUALIFIERS``. Anything
    else sorts after all of them, ordered by the raw string.
    """
    rank = _RANKS.get(value)
    if rank is None:
        return (_UNKNOWN_RANK, value)
    return (rank, "")


RELEASE_KEY: Final[tuple[int, str]] = qualifier_key("")
