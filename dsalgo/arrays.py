"""Classic array exercises: sorting, rearranging and scanning integer sequences."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence


def _partition(items: list[int], start: int, end: int) -> int:
    """Lomuto partition of items[start:end + 1] around its last element."""
    pivot = items[end]
    boundary = start - 1
    for j in range(start, end):
        if items[j] < pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[end] = items[end], items[boundary + 1]
    return boundary + 1


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` sorted with quicksort."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = _partition(items, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return items


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return a new list holding ``values`` sorted with merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return merge_sorted(merge_sort(items[:mid]), merge_sort(items[mid:]))


def max_min_form(values: Sequence[int]) -> list[int]:
    """Rearrange a sorted sequence as largest, smallest, second largest, ..."""
    result: list[int] = []
    low, high = 0, len(values) - 1
    take_high = True
    while low <= high:
        if take_high:
            result.append(values[high])
            high -= 1
        else:
            result.append(values[low])
            low += 1
        take_high = not take_high
    return result


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous, non-empty run of ``values``."""
    best: int | None = None
    current = 0
    for value in values:
        current = max(current + value, value)
        best = current if best is None else max(best, current)
    if best is None:
        raise ValueError("max_subarray_sum() needs at least one value")
    return best


def remove_even(values: Iterable[int]) -> list[int]:
    """Return the odd values, in their original order."""
    return [value for value in values if value % 2 != 0]


def merge_sorted(first: Sequence[int], second: Sequence[int]) -> list[int]:
    """Merge two sorted sequences into one sorted list."""
    merged: list[int] = []
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


def find_pair_with_sum(values: Iterable[int], target: int) -> tuple[int, int] | None:
    """Return two values (smaller first) that add up to ``target``, or None."""
    items = sorted(values)
    low, high = 0, len(items) - 1
    while low < high:
        total = items[low] + items[high]
        if total < target:
            low += 1
        elif total > target:
            high -= 1
        else:
            return items[low], items[high]
    return None


def find_product(values: Sequence[int]) -> list[int]:
    """For each position, return the product of all the other values."""
    products: list[int] = []
    running = 1
    for value in values:
        products.append(running)
        running *= value
    running = 1
    for index in range(len(values) - 1, -1, -1):
        products[index] *= running
        running *= values[index]
    return products


def first_unique(values: Sequence[int]) -> int | None:
    """Return the first value that occurs exactly once, or None."""
    counts = Counter(values)
    return next((value for value in values if counts[value] == 1), None)


def second_maximum(values: Iterable[int]) -> int:
    """Return the second largest value; a repeated maximum counts twice."""
    largest: int | None = None
    second: int | None = None
    for value in values:
        if largest is None or value > largest:
            second, largest = largest, value
        elif second is None or value > second:
            second = value
    if second is None:
        raise ValueError("second_maximum() needs at least two values")
    return second


def right_rotate(values: Sequence[int]) -> list[int]:
    """Return the values rotated right by one position."""
    items = list(values)
    return items[-1:] + items[:-1]


def rearrange_negatives(values: Iterable[int]) -> list[int]:
    """Move all negative values to the front by swapping, as in-place partitioning does."""
    items = list(values)
    boundary = 0
    for index, value in enumerate(items):
        if value < 0:
            if index != boundary:
                items[index], items[boundary] = items[boundary], items[index]
            boundary += 1
    return items