"""Exercises on lists of integers: extremes and ranked values."""

import heapq
from collections.abc import Iterable


def _as_list(values: Iterable[int]) -> list[int]:
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    return items


def largest(values: Iterable[int]) -> int:
    """Return the largest value; raises ValueError when there are none."""
    return max(_as_list(values))


def smallest(values: Iterable[int]) -> int:
    """Return the smallest value; raises ValueError when there are none."""
    return min(_as_list(values))


def second_smallest(values: Iterable[int]) -> int | None:
    """Return the second smallest distinct value, or None if there is none."""
    distinct = heapq.nsmallest(2, set(values))
    return distinct[1] if len(distinct) == 2 else None


def top_three(values: Iterable[int]) -> tuple[int, int | None, int | None]:
    """Return the three largest distinct values, padded with None."""
    distinct = heapq.nlargest(3, set(_as_list(values)))
    first, second, third = distinct + [None] * (3 - len(distinct))
    return first, second, third


def third_smallest(values: Iterable[int]) -> int | None:
    """Return the third entry of a running three-slot minimum scan.

    A new minimum moves the old minimum into both the second and third
    slots. Raises ValueError for fewer than three values; returns None
    when the third slot is never filled.
    """
    items = list(values)
    if len(items) < 3:
        raise ValueError("at least three values are required")
    first = second = third = None
    for value in items:
        if first is None or value < first:
            second = third = first
            first = value
        elif value > first and (second is None or value < second):
            third = second
            second = value
        elif second is not None and value > second and (third is None or value < third):
            third = value
    return third