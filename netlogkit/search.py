"""Sequential and binary search returning the position of a value."""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Optional, Sequence


def sequential_search(items: Sequence[Any], value: Any) -> Optional[int]:
    """Return the index of the first item equal to value, or None."""
    return next((i for i, item in enumerate(items) if item == value), None)


def binary_search(items: Sequence[Any], value: Any) -> Optional[int]:
    """Return an index of value in an ascending sequence, or None."""
    position = bisect_left(items, value)
    if position < len(items) and items[position] == value:
        return position
    return None