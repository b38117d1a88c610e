import pytest

from labkit.ordering import ascending, bubble_sort, descending


SAMPLES = [
    [5, 3, 9, 1, 3],
    [13, 11, 1000, 12],
    [32, 3542, 10, 32, 3, 6, 1, -1],
    [1, 2, 3, 4],
    [4, 3, 2, 1],
]


@pytest.mark.parametrize("values", SAMPLES)
def test_ascending_matches_sorted(values):
    assert bubble_sort(list(values), ascending) == sorted(values)


@pytest.mark.parametrize("values", SAMPLES)
def test_descending_matches_reverse_sorted(values):
    assert bubble_sort(list(values), descending) == sorted(values, reverse=True)


def test_sorts_in_place_and_returns_same_object():
    values = [9, 4, 7, 1]
    result = bubble_sort(values, ascending)
    assert result is values
    assert values == sorted([9, 4, 7, 1])


@pytest.mark.parametrize("values", [[], [7]])
def test_trivial_inputs_unchanged(values):
    assert bubble_sort(list(values), ascending) == values


def test_sort_is_stable():
    pairs = [(2, "a"), (1, "b"), (2, "c"), (1, "d")]
    result = bubble_sort(list(pairs), lambda a, b: a[0] > b[0])
    assert result == sorted(pairs, key=lambda p: p[0])


def test_ascending_predicate():
    assert ascending(2, 1) is True
    assert ascending(1, 2) is False
    assert ascending(1, 1) is False


def test_descending_predicate():
    assert descending(1, 2) is True
    assert descending(2, 1) is False
    assert descending(1, 1) is False