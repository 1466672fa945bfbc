import threading

import pytest

from dsp56k_tables.semaphore import NopSemaphore, Semaphore


def test_initial_count():
    assert Semaphore(3).value == 3
    assert Semaphore().value == 0


def test_notify_and_wait_balance():
    sem = Semaphore(1)
    sem.notify()
    assert sem.value == 2
    sem.wait()
    sem.wait()
    assert sem.value == 0


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Semaphore(-1)


def test_wait_blocks_until_notified():
    sem = Semaphore()
    done = threading.Event()

    def worker():
        sem.wait()
        done.set()

    thread = threading.Thread(target=worker, daemon=True)
    thread.start()
    assert not done.wait(0.05)
    sem.notify()
    assert done.wait(2)
    thread.join(2)
    assert sem.value == 0


def test_each_notify_releases_one_waiter():
    sem = Semaphore()
    released = []
    lock = threading.Lock()

    def worker(n):
        sem.wait()
        with lock:
            released.append(n)

    threads = [threading.Thread(target=worker, args=(n,), daemon=True) for n in range(3)]
    for thread in threads:
        thread.start()
    for _ in threads:
        sem.notify()
    for thread in threads:
        thread.join(2)
    assert sorted(released) == [0, 1, 2]
    assert sem.value == 0


def _count_waits(sem, waits, finished):
    completed = 0
    for _ in range(waits):
        sem.wait()
        completed += 1
    finished.append(completed)


def test_nop_semaphore_never_blocks():
    finished = []
    thread = threading.Thread(
        target=_count_waits, args=(NopSemaphore(0), 10, finished), daemon=True
    )
    thread.start()
    thread.join(2)
    assert not thread.is_alive()
    assert finished == [10]


def test_nop_semaphore_differs_from_blocking_semaphore():
    blocking = Semaphore(0)
    blocked_finished = []
    blocked = threading.Thread(
        target=_count_waits, args=(blocking, 1, blocked_finished), daemon=True
    )
    blocked.start()
    blocked.join(0.05)
    assert blocked.is_alive()
    assert blocked_finished == []

    nop_finished = []
    free = threading.Thread(
        target=_count_waits, args=(NopSemaphore(0), 1, nop_finished), daemon=True
    )
    free.start()
    free.join(2)
    assert nop_finished == [1]

    blocking.notify()
    blocked.join(2)
    assert blocked_finished == [1]
    assert blocking.value == 0


def test_nop_semaphore_ignores_count_unlike_blocking_semaphore():
    counting = Semaphore(5)
    nop = NopSemaphore(5)
    for _ in range(3):
        counting.notify()
        nop.notify()
    assert counting.value == 8

    counted = []
    counting_thread = threading.Thread(
        target=_count_waits, args=(counting, 8, counted), daemon=True
    )
    counting_thread.start()
    counting_thread.join(2)
    assert counted == [8]
    assert counting.value == 0

    finished = []
    thread = threading.Thread(target=_count_waits, args=(nop, 20, finished), daemon=True)
    thread.start()
    thread.join(2)
    assert not thread.is_alive()
    assert finished == [20]