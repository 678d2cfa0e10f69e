from __future__ import annotations

from mvncmp import compare_versions


def assert_same(v1: str, v2: str) -> None:
    assert compare_versions(v1, v2) == 0, f"{v1!r} == {v2!r}"
    assert compare_versions(v2, v1) == 0, f"{v2!r} == {v1!r}"


def assert_older(v1: str, v2: str) -> None:
    assert compare_versions(v1, v2) == -1, f"{v1!r} < {v2!r}"
    assert compare_versions(v2, v1) == 1, f"{v2!r} > {v1!r}"
