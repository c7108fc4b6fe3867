"""Searching and scanning: binary search, extremes, uniqueness and prime sieving."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def binary_search(items: Sequence[T], key: T) -> int:
    """Return the 1-based position of ``key`` in the ascending sequence ``items``.

    Raises ValueError if ``key`` is not present.
    """
    low, high = 0, len(items) - 1
    while low <= high:
        mid = (low + high) // 2
        if items[mid] == key:
            return mid + 1
        if items[mid] < key:
            low = mid + 1
        else:
            high = mid - 1
    raise ValueError(f"{key!r} not found")


def maximum(items: Sequence[T]) -> T:
    """Return the largest element of ``items``; raise ValueError if empty."""
    if not items:
        raise ValueError("maximum of an empty sequence")
    best = items[0]
    for item in items:
        if item > best:
            best = item
    return best


def _min_max(items: Sequence[Any], low: int, high: int) -> tuple[Any, Any]:
    if low == high:
        return items[low], items[low]
    if low + 1 == high:
        if items[low] > items[high]:
            return items[high], items[low]
        return items[low], items[high]
    mid = (low + high) // 2
    left_min, left_max = _min_max(items, low, mid)
    right_min, right_max = _min_max(items, mid + 1, high)
    smallest = right_min if left_min > right_min else left_min
    largest = left_max if left_max > right_max else right_max
    return smallest, largest


def min_max(items: Sequence[T]) -> tuple[T, T]:
    """Return ``(smallest, largest)`` of ``items`` by divide and conquer."""
    if not items:
        raise ValueError("min_max of an empty sequence")
    return _min_max(items, 0, len(items) - 1)


def all_unique(items: Sequence[Any]) -> bool:
    """Return True if no two elements of ``items`` are equal."""
    for i, item in enumerate(items):
        if item in items[i + 1 :]:
            return False
    return True


def primes_below(n: int) -> list[int]:
    """Return the primes strictly less than ``n``, using the sieve of Eratosthenes."""
    if n < 3:
        return []
    is_prime = [True] * n
    is_prime[0] = is_prime[1] = False
    for p in range(2, math.isqrt(n - 1) + 1):
        if is_prime[p]:
            for multiple in range(p * p, n, p):
                is_prime[multiple] = False
    return [p for p, flag in enumerate(is_prime) if flag]