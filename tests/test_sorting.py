import random

import pytest

from netlogkit.sorting import (
    ascending,
    bubble_sort,
    descending,
    insertion_sort,
    mergesort,
    quicksort,
    selection_sort,
)


def _samples():
    rng = random.Random(1234)
    return [
        [],
        [7],
        [3, 1, 2],
        [5, 5, 5, 5],
        list(range(20)),
        list(range(20, 0, -1)),
        [rng.randint(-50, 50) for _ in range(60)],
    ]


def test_compare_functions():
    assert ascending(1, 2) is True
    assert ascending(2, 2) is False
    assert descending(3, 2) is True
    assert descending(2, 2) is False


@pytest.mark.parametrize("data", _samples())
def test_ascending_matches_sorted(data):
    expected = sorted(data)
    assert bubble_sort(data, ascending) == expected
    assert insertion_sort(data, ascending) == expected
    assert selection_sort(data, ascending) == expected
    assert quicksort(data, ascending) == expected
    assert mergesort(data, ascending) == expected


@pytest.mark.parametrize("data", _samples())
def test_descending_matches_reverse_sorted(data):
    expected = sorted(data, reverse=True)
    assert bubble_sort(data, descending) == expected
    assert insertion_sort(data, descending) == expected
    assert selection_sort(data, descending) == expected
    assert quicksort(data, descending) == expected
    assert mergesort(data, descending) == expected


def test_input_is_not_modified():
    data = [4, 2, 9, 1]
    assert bubble_sort(data, ascending) == [1, 2, 4, 9]
    assert insertion_sort(data, ascending) == [1, 2, 4, 9]
    assert selection_sort(data, ascending) == [1, 2, 4, 9]
    assert quicksort(data, ascending) == [1, 2, 4, 9]
    assert mergesort(data, ascending) == [1, 2, 4, 9]
    assert data == [4, 2, 9, 1]


def test_strings_and_iterables():
    words = ["pear", "apple", "fig", "apple"]
    up = ["apple", "apple", "fig", "pear"]
    down = ["pear", "fig", "apple", "apple"]
    assert bubble_sort(words, ascending) == up
    assert insertion_sort(words, ascending) == up
    assert selection_sort(words, ascending) == up
    assert quicksort(words, ascending) == up
    assert mergesort(words, ascending) == up
    assert bubble_sort(iter(words), descending) == down
    assert insertion_sort(iter(words), descending) == down
    assert selection_sort(iter(words), descending) == down
    assert quicksort(iter(words), descending) == down
    assert mergesort(iter(words), descending) == down


def test_quicksort_handles_long_sorted_input():
    data = list(range(5000))
    assert quicksort(data, ascending) == data