import threading
from collections import Counter

import pytest

from labkit.mpsc import AtomicRef, MPSCQueue, main, run_producers


def test_fifo_order_single_thread():
    queue = MPSCQueue()
    for item in ("a", "b", "c"):
        queue.enqueue(item)
    assert [queue.dequeue() for _ in range(3)] == ["a", "b", "c"]


def test_dequeue_empty_raises():
    queue = MPSCQueue()
    with pytest.raises(IndexError):
        queue.dequeue()


def test_dequeue_after_emptied_raises():
    queue = MPSCQueue()
    queue.enqueue(1)
    assert queue.dequeue() == 1
    with pytest.raises(IndexError):
        queue.dequeue()


def test_none_items_are_kept():
    queue = MPSCQueue()
    queue.enqueue(None)
    queue.enqueue(0)
    assert list(queue.drain()) == [None, 0]


def test_drain_empties_queue():
    queue = MPSCQueue()
    for value in range(5):
        queue.enqueue(value)
    assert list(queue.drain()) == list(range(5))
    assert list(queue.drain()) == []


def test_run_producers_enqueues_everything():
    queue = MPSCQueue()
    total = run_producers(queue, 4, 100)
    items = list(queue.drain())
    assert total == len(items) == 400
    assert Counter(items) == Counter({value: 4 for value in range(100)})


def test_run_producers_keeps_each_producer_order():
    queue = MPSCQueue()

    def produce(tag):
        for value in range(200):
            queue.enqueue((tag, value))

    threads = [threading.Thread(target=produce, args=(tag,)) for tag in range(3)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    items = list(queue.drain())
    for tag in range(3):
        assert [value for t, value in items if t == tag] == list(range(200))


def test_run_producers_rejects_negative():
    with pytest.raises(ValueError):
        run_producers(MPSCQueue(), -1, 3)


def test_atomic_ref_load_store():
    ref = AtomicRef()
    assert ref.load() is None
    ref.store(42)
    assert ref.load() == 42


def test_atomic_ref_exchange_returns_previous():
    ref = AtomicRef("first")
    assert ref.exchange("second") == "first"
    assert ref.load() == "second"


def test_main_atomic_demo(capsys):
    assert main(["atomic"]) == 0
    assert "Pointer updated to: 42" in capsys.readouterr().out