"""Helpers for sorted, de-duplicated and mutually exclusive sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable
from typing import TypeVar

T = TypeVar("T", bound=Hashable)


def dedup(values: Iterable[T]) -> list[T]:
    """Return the distinct elements of ``values`` as a new sorted list."""
    return sorted(set(values))


def decommon(first: Iterable[T], second: Iterable[T]) -> tuple[list[T], list[T]]:
    """Remove the elements the two inputs share and return sorted copies of both.

    Each common occurrence is removed once from each side, so an element that
    appears three times in ``first`` and once in ``second`` survives twice in
    the first result and not at all in the second.
    """
    first_counts = Counter(first)
    second_counts = Counter(second)
    only_first = first_counts - second_counts
    only_second = second_counts - first_counts
    return sorted(only_first.elements()), sorted(only_second.elements())