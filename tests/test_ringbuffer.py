import threading

import pytest

from dsp56k_tables.ringbuffer import RingBuffer

CAPACITY = 16


def test_basic_sequence():
    rb = RingBuffer(CAPACITY, False)
    assert len(rb) == 0
    assert rb.empty()
    assert rb.remaining() == CAPACITY

    for value in (3, 4, 5, 6):
        rb.push_back(value)

    assert len(rb) == 4
    assert not rb.empty()
    assert rb.remaining() == CAPACITY - 4
    assert rb[2] == 5

    assert rb.pop_front() == 3
    assert len(rb) == 3
    assert rb.remaining() == CAPACITY - 3
    assert rb[2] == 6
    assert rb[0] == 4
    assert rb.front() == 4

    rb.pop_front()
    rb.pop_front()
    rb.pop_front()
    assert len(rb) == 0
    assert rb.empty()
    assert rb.remaining() == CAPACITY

    rb.push_back(77)
    assert len(rb) == 1
    assert rb.remaining() == CAPACITY - 1
    assert rb.front() == 77
    assert rb[0] == 77


@pytest.mark.parametrize("capacity", [0, -4, 3, 10])
def test_capacity_must_be_power_of_two(capacity):
    with pytest.raises(ValueError):
        RingBuffer(capacity)


def test_fifo_order_across_wraparound():
    rb = RingBuffer(4)
    out = []
    for value in range(20):
        rb.push_back(value)
        if len(rb) == 3:
            out.append(rb.pop_front())
    while not rb.empty():
        out.append(rb.pop_front())
    assert out == list(range(20))


def test_full_and_capacity():
    rb = RingBuffer(4)
    for value in range(4):
        rb.push_back(value)
    assert rb.full()
    assert rb.capacity() == 4
    assert rb.remaining() == 0


def test_unlocked_push_on_full_raises():
    rb = RingBuffer(2)
    rb.push_back(1)
    rb.push_back(2)
    with pytest.raises(IndexError):
        rb.push_back(3)
    assert list(rb) == [1, 2]


def test_unlocked_pop_and_front_on_empty_raise():
    rb = RingBuffer(2)
    with pytest.raises(IndexError):
        rb.pop_front()
    with pytest.raises(IndexError):
        rb.front()


def test_index_bounds_and_negative_index():
    rb = RingBuffer(8)
    for value in (10, 20, 30):
        rb.push_back(value)
    assert rb[-1] == 30
    with pytest.raises(IndexError):
        rb[3]
    with pytest.raises(IndexError):
        rb[-4]


def test_setitem_updates_element():
    rb = RingBuffer(8)
    rb.push_back(1)
    rb.push_back(2)
    rb[0] = 99
    assert rb.front() == 99
    assert rb.pop_front() == 99


def test_remove_at_returns_element_and_keeps_others():
    values = [1, 2, 3, 4, 5]
    rb = RingBuffer(8)
    for value in values:
        rb.push_back(value)
    assert rb.remove_at(2) == 3
    assert len(rb) == len(values) - 1
    assert sorted(rb) == [v for v in values if v != 3]


def test_remove_at_front_pops():
    rb = RingBuffer(8)
    for value in (7, 8):
        rb.push_back(value)
    assert rb.remove_at(0) == 7
    assert list(rb) == [8]


def test_clear_empties_buffer():
    rb = RingBuffer(8)
    for value in range(5):
        rb.push_back(value)
    rb.clear()
    assert rb.empty()
    assert rb.remaining() == 8


def test_locked_producer_consumer_preserves_order():
    rb = RingBuffer(4, True)
    count = 200
    received = []

    def consumer():
        for _ in range(count):
            received.append(rb.pop_front())

    thread = threading.Thread(target=consumer, daemon=True)
    thread.start()
    for value in range(count):
        rb.push_back(value)
    thread.join(5)
    assert received == list(range(count))
    assert rb.empty()


def test_locked_push_blocks_while_full():
    rb = RingBuffer(2, True)
    rb.push_back("first")
    rb.push_back("second")
    pushed = threading.Event()

    def producer():
        rb.push_back("third")
        pushed.set()

    thread = threading.Thread(target=producer, daemon=True)
    thread.start()
    assert not pushed.wait(0.05)
    assert rb.pop_front() == "first"
    assert pushed.wait(2)
    thread.join(2)
    assert list(rb) == ["second", "third"]


def test_wait_not_empty_returns_after_push():
    rb = RingBuffer(4, True)
    seen = []

    def waiter():
        rb.wait_not_empty()
        seen.append(rb.front())

    thread = threading.Thread(target=waiter, daemon=True)
    thread.start()
    rb.push_back("item")
    thread.join(2)
    assert not thread.is_alive()
    assert seen == ["item"]
    assert rb.front() == "item"
    assert len(rb) == 1


def test_wait_not_full_returns_after_pop():
    rb = RingBuffer(2, True)
    rb.push_back(1)
    rb.push_back(2)
    done = threading.Event()

    def waiter():
        rb.wait_not_full()
        done.set()

    thread = threading.Thread(target=waiter, daemon=True)
    thread.start()
    assert not done.wait(0.05)
    assert rb.pop_front() == 1
    assert done.wait(2)
    thread.join(2)
    assert not rb.full()
    assert rb.remaining() == 1
    assert list(rb) == [2]