"""Check whether two iterables hold the same elements, ignoring order."""

from __future__ import annotations

from bisect import bisect_left
from itertools import zip_longest
from typing import Any, Callable, Iterable

_MISSING = object()


def _same_elements(
    a: Iterable[Any],
    b: Iterable[Any],
    update_count: Callable[[Any, int], None],
    is_empty: Callable[[], bool],
) -> bool:
    for x, y in zip_longest(a, b, fillvalue=_MISSING):
        if x is _MISSING or y is _MISSING:
            return False
        if x != y:
            update_count(x, 1)
            update_count(y, -1)
    return is_empty()


def same_elements_hash(a: Iterable[Any], b: Iterable[Any]) -> bool:
    """Compare multisets of hashable elements."""
    counts: dict[Any, int] = {}

    def update_count(key: Any, delta: int) -> None:
        count = counts.get(key, 0) + delta
        if count:
            counts[key] = count
        else:
            counts.pop(key, None)

    return _same_elements(a, b, update_count, lambda: not counts)


def same_elements_ord(a: Iterable[Any], b: Iterable[Any]) -> bool:
    """Compare multisets of totally ordered elements; they need not be hashable."""
    keys: list[Any] = []
    counts: list[int] = []

    def update_count(key: Any, delta: int) -> None:
        index = bisect_left(keys, key)
        if index < len(keys) and not (key < keys[index]):
            counts[index] += delta
            if counts[index] == 0:
                del keys[index]
                del counts[index]
        else:
            keys.insert(index, key)
            counts.insert(index, delta)

    return _same_elements(a, b, update_count, lambda: not keys)