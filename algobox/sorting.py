"""Classic comparison sorts and merging of sorted sequences."""

from __future__ import annotations

from typing import Iterable, List, Sequence, TypeVar

T = TypeVar("T")


def bubble_sort(values: Iterable[T]) -> List[T]:
    """Return a new list with the items sorted by repeated adjacent swaps."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(end):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def _sift_down(items: List[T], size: int, root: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[T]) -> List[T]:
    """Return a new list sorted with an in-place binary max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, root)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items


def insertion_sort(values: Iterable[T]) -> List[T]:
    """Return a new list sorted by inserting each item into the sorted prefix."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge_sorted(first: Sequence[T], second: Sequence[T]) -> List[T]:
    """Merge two sorted sequences into one sorted list.

    On equal items the one from ``second`` is taken first.
    """
    merged: List[T] = []
    i = j = 0
    while i < len(first) and j < len(second):
        if first[i] < second[j]:
            merged.append(first[i])
            i += 1
        else:
            merged.append(second[j])
            j += 1
    merged.extend(first[i:])
    merged.extend(second[j:])
    return merged


def merge_sort(values: Iterable[T]) -> List[T]:
    """Return a new list sorted by recursive halving and merging."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) + 1) // 2
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))