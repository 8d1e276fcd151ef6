"""Classic comparison sorts driven by a two-argument "comes before" predicate."""

from __future__ import annotations

from typing import Any, Callable, Iterable

Compare = Callable[[Any, Any], bool]


def ascending(a: Any, b: Any) -> bool:
    """True when a should come before b in ascending order."""
    return a < b


def descending(a: Any, b: Any) -> bool:
    """True when a should come before b in descending order."""
    return a > b


def bubble_sort(items: Iterable[Any], compare: Compare) -> list[Any]:
    """Return a sorted copy using bubble sort."""
    result = list(items)
    n = len(result)
    for i in range(n):
        for j in range(n - 1, i, -1):
            if compare(result[j], result[j - 1]):
                result[j], result[j - 1] = result[j - 1], result[j]
    return result


def insertion_sort(items: Iterable[Any], compare: Compare) -> list[Any]:
    """Return a sorted copy using insertion sort."""
    result = list(items)
    for i in range(1, len(result)):
        current = result[i]
        j = i - 1
        while j >= 0 and compare(current, result[j]):
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = current
    return result


def selection_sort(items: Iterable[Any], compare: Compare) -> list[Any]:
    """Return a sorted copy using selection sort."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        best = i
        for j in range(i + 1, n):
            if compare(result[j], result[best]):
                best = j
        result[i], result[best] = result[best], result[i]
    return result


def quicksort(items: Iterable[Any], compare: Compare) -> list[Any]:
    """Return a sorted copy using quicksort with the first element as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low >= high:
            continue
        pivot = result[low]
        boundary = low
        for k in range(low + 1, high + 1):
            if not compare(pivot, result[k]):
                boundary += 1
                result[boundary], result[k] = result[k], result[boundary]
        result[low], result[boundary] = result[boundary], result[low]
        pending.append((low, boundary - 1))
        pending.append((boundary + 1, high))
    return result


def mergesort(items: Iterable[Any], compare: Compare) -> list[Any]:
    """Return a sorted copy using top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = len(result) // 2
    left = mergesort(result[:middle], compare)
    right = mergesort(result[middle:], compare)
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if compare(right[j], left[i]):
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged