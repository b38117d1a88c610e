import pytest

from labkit.linked_queue import LinkedQueue, QueueEmptyError, main


def test_fifo_order():
    queue = LinkedQueue()
    for value in (1, 2, 3):
        queue.enqueue(value)
    assert [queue.dequeue(), queue.dequeue(), queue.dequeue()] == [1, 2, 3]
    assert queue.is_empty()


def test_dequeue_empty_raises():
    with pytest.raises(QueueEmptyError):
        LinkedQueue().dequeue()


def test_empty_error_is_index_error():
    with pytest.raises(IndexError):
        LinkedQueue().front()


def test_front_and_rear():
    queue = LinkedQueue([10, 20, 30])
    assert queue.front() == 10
    assert queue.rear() == 30
    assert len(queue) == 3


def test_rear_empty_raises():
    with pytest.raises(QueueEmptyError):
        LinkedQueue().rear()


def test_reuse_after_emptying():
    queue = LinkedQueue([5])
    assert queue.dequeue() == 5
    queue.enqueue(6)
    assert queue.front() == 6
    assert queue.rear() == 6
    assert list(queue) == [6]


def test_clear():
    queue = LinkedQueue([1, 2])
    queue.clear()
    assert queue.is_empty()
    assert len(queue) == 0


def test_is_empty_false_when_filled():
    queue = LinkedQueue()
    queue.enqueue(1)
    assert queue.is_empty() is False


def test_render():
    assert LinkedQueue([10, 20]).render() == " [10] <=  [20] "


def test_render_empty_raises():
    with pytest.raises(QueueEmptyError):
        LinkedQueue().render()


def test_iteration_matches_dequeue_order():
    values = [4, 8, 15, 16]
    queue = LinkedQueue(values)
    assert list(queue) == values
    assert [queue.dequeue() for _ in values] == values


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "First Element of queue: 20" in out
    assert "Last Element of queue: 890" in out
    assert "Is empty? NO" in out