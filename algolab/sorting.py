"""Comparison sorts: quicksort, bubble sort, merge sort and selection sort."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def _partition(a: list[Any], low: int, high: int) -> int:
    """Partition ``a[low..high]`` around ``a[low]`` and return the pivot's final index."""
    key = a[low]
    i = low + 1
    j = high
    while True:
        while i <= high and a[i] <= key:
            i += 1
        while a[j] > key:
            j -= 1
        if i < j:
            a[i], a[j] = a[j], a[i]
        else:
            a[low], a[j] = a[j], a[low]
            return j


def quicksort(items: Iterable[T]) -> list[T]:
    """Return a new list holding ``items`` in ascending order, sorted by quicksort."""
    a = list(items)
    pending = [(0, len(a) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            k = _partition(a, low, high)
            pending.append((low, k - 1))
            pending.append((k + 1, high))
    return a


def bubble_sort(items: Iterable[T]) -> list[T]:
    """Return a new list holding ``items`` in ascending order, sorted by bubble sort."""
    a = list(items)
    n = len(a)
    for passes in range(1, n):
        for i in range(n - passes):
            if a[i] > a[i + 1]:
                a[i], a[i + 1] = a[i + 1], a[i]
    return a


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    li = ri = 0
    while li < len(left) and ri < len(right):
        if left[li] < right[ri]:
            merged.append(left[li])
            li += 1
        else:
            merged.append(right[ri])
            ri += 1
    merged.extend(left[li:])
    merged.extend(right[ri:])
    return merged


def merge_sort(items: Iterable[T]) -> list[T]:
    """Return a new list holding ``items`` in ascending order, sorted by merge sort."""
    a = list(items)
    if len(a) < 2:
        return a
    split = (len(a) - 1) // 2 + 1
    return _merge(merge_sort(a[:split]), merge_sort(a[split:]))


def selection_sort(items: Iterable[T]) -> list[T]:
    """Return a new list holding ``items`` in ascending order, sorted by selection sort."""
    a = list(items)
    for j in range(len(a) - 1):
        pos = min(range(j, len(a)), key=a.__getitem__)
        a[j], a[pos] = a[pos], a[j]
    return a


def sort_word(word: str) -> str:
    """Return the characters of ``word`` rearranged in ascending order."""
    return "".join(quicksort(word))