"""Searching in arrays and related array problems."""

from __future__ import annotations

from typing import Iterable, Optional, Sequence, Tuple


def binary_search(values: Sequence[int], target: int) -> Optional[int]:
    """Return the index of ``target`` in sorted ``values``, or None."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            low = mid + 1
        else:
            high = mid - 1
    return None


def search_rotated(values: Sequence[int], key: int) -> Optional[int]:
    """Return the index of ``key`` in a rotated sorted sequence of unique items, or None."""
    start, end = 0, len(values) - 1
    while start <= end:
        mid = start + (end - start) // 2
        if values[mid] == key:
            return mid
        if values[start] <= values[mid] and values[start] <= key <= values[mid]:
            end = mid - 1
        elif values[mid] <= values[end] and values[mid] <= key <= values[end]:
            start = mid + 1
        elif values[end] <= values[mid]:
            start = mid + 1
        elif values[start] >= values[mid]:
            end = mid - 1
        else:
            return None
    return None


def find_pivot(values: Sequence[int]) -> int:
    """Return the index of the smallest item of a rotated sorted sequence."""
    if not values:
        raise ValueError("pivot of an empty sequence")
    if values[0] <= values[-1]:
        return 0
    start, end = 0, len(values) - 1
    while start < end:
        mid = (start + end) // 2
        if values[mid] >= values[0]:
            start = mid + 1
        else:
            end = mid
    return start


def find_peak(values: Sequence[int]) -> int:
    """Return the index of an item not smaller than its neighbours."""
    n = len(values)
    if n == 0:
        raise ValueError("peak of an empty sequence")
    if n == 1 or values[0] >= values[1]:
        return 0
    if values[-1] >= values[-2]:
        return n - 1
    for i in range(1, n - 1):
        if values[i - 1] <= values[i] >= values[i + 1]:
            return i
    raise AssertionError("unreachable: an interior peak always exists")


def first_and_last(values: Iterable[int], target: int) -> Optional[Tuple[int, int]]:
    """Return the first and last index of ``target``, or None if absent."""
    positions = [i for i, value in enumerate(values) if value == target]
    if not positions:
        return None
    return positions[0], positions[-1]


def _fits(pages: Sequence[int], students: int, limit: int) -> bool:
    count = 1
    current = 0
    for page in pages:
        if page > limit:
            return False
        if current + page > limit:
            count += 1
            current = page
            if count > students:
                return False
        else:
            current += page
    return True


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Smallest possible maximum of pages given to one student.

    Books are handed out in order, each student taking a contiguous run.
    """
    pages = list(pages)
    if students < 1:
        raise ValueError("at least one student is needed")
    if len(pages) < students:
        raise ValueError("fewer books than students")
    low = max(1, max(pages))
    high = sum(pages)
    if low > high:
        raise ValueError("no allocation possible")
    while low < high:
        mid = (low + high) // 2
        if _fits(pages, students, mid):
            high = mid
        else:
            low = mid + 1
    return low


def max_subarray_sum(values: Iterable[int]) -> int:
    """Largest sum of a contiguous run; an empty run (sum 0) is allowed."""
    items = list(values)
    if not items:
        raise ValueError("max_subarray_sum of an empty sequence")
    current = 0
    best: Optional[int] = None
    for value in items:
        current = max(current + value, 0)
        best = current if best is None else max(best, current)
    return best