import pytest

from labkit.circular_list import CircularList, main


def test_push_tail_order():
    items = CircularList()
    for value in (10, 20, 40):
        items.push_tail(value)
    assert list(items) == [10, 20, 40]
    assert len(items) == 3


def test_push_head_order():
    items = CircularList()
    for value in (1, 2, 3):
        items.push_head(value)
    assert list(items) == [3, 2, 1]


def test_mixed_pushes():
    items = CircularList([2])
    items.push_head(1)
    items.push_tail(3)
    assert list(items) == [1, 2, 3]


@pytest.mark.parametrize("value", [10, 20, 30])
def test_remove_each_position(value):
    values = [10, 20, 30]
    items = CircularList(values)
    items.remove(value)
    assert list(items) == [v for v in values if v != value]
    assert len(items) == 2


def test_push_tail_after_removing_tail():
    items = CircularList([1, 2, 3])
    items.remove(3)
    items.push_tail(4)
    assert list(items) == [1, 2, 4]


def test_remove_only_element():
    items = CircularList([5])
    items.remove(5)
    assert list(items) == []
    assert len(items) == 0
    items.push_head(6)
    assert list(items) == [6]


def test_remove_missing_raises():
    with pytest.raises(ValueError):
        CircularList([1, 2]).remove(3)


def test_remove_from_empty_raises():
    with pytest.raises(ValueError):
        CircularList().remove(1)


def test_remove_first_match_only():
    items = CircularList([7, 8, 7])
    items.remove(7)
    assert list(items) == [8, 7]


def test_render():
    assert CircularList([10, 20, 30]).render() == "[10, 20, 30]"
    assert CircularList().render() == "[]"


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.startswith("[10]\n")