import pytest

from labkit.primes import main, non_divisor_pairs


@pytest.mark.parametrize("limit", [2, 5, 12])
def test_pairs_are_non_divisors_in_range(limit):
    for i, j in non_divisor_pairs(limit):
        assert 2 <= i <= limit
        assert 2 <= j <= limit
        assert i % j != 0


def test_no_pair_of_equal_numbers():
    assert all(i != j for i, j in non_divisor_pairs(20))


def test_pairs_are_ordered():
    pairs = list(non_divisor_pairs(10))
    assert pairs == sorted(pairs)


def test_known_pairs():
    pairs = set(non_divisor_pairs(5))
    assert (2, 3) in pairs
    assert (4, 2) not in pairs


def test_below_two_is_empty():
    assert list(non_divisor_pairs(1)) == []
    assert list(non_divisor_pairs(-3)) == []


def test_main_output(capsys):
    assert main(["5"]) == 0
    lines = capsys.readouterr().out.split("\n")
    assert lines[0] == "2=>3"
    assert lines[-2:] == ["", ""]
    assert len(lines) - 2 == len(list(non_divisor_pairs(5)))