"""Fixed-capacity FIFO ring buffer, optionally blocking for producer/consumer use."""

from __future__ import annotations

import threading
import time
from typing import Any, Generic, List, TypeVar

from .semaphore import NopSemaphore, Semaphore

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """A ring buffer whose capacity is a power of two.

    With ``lock`` set, ``push_back`` blocks while the buffer is full and
    ``pop_front`` blocks while it is empty. Without it both raise
    ``IndexError`` instead.
    """

    def __init__(self, capacity: int, lock: bool = False) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be greater than zero")
        if capacity & (capacity - 1):
            raise ValueError("capacity must be a power of two")
        self._capacity = capacity
        self._mask = capacity - 1
        self._data: List[Any] = [None] * capacity
        self._insert_pos = 0
        self._remove_pos = 0
        self._usage = 0
        self._usage_lock = threading.Lock()
        self._locking = lock
        semaphore = Semaphore if lock else NopSemaphore
        self._read_sem = semaphore(0)
        self._write_sem = semaphore(capacity)

    def capacity(self) -> int:
        return self._capacity

    def empty(self) -> bool:
        return self._usage == 0

    def full(self) -> bool:
        return self._usage == self._capacity

    def __len__(self) -> int:
        return self._usage

    def remaining(self) -> int:
        return self._capacity - self._usage

    def push_back(self, value: T) -> None:
        """Append ``value`` at the back."""
        if not self._locking and self.full():
            raise IndexError("ring buffer is full")
        self._write_sem.wait()
        self._data[self._insert_pos] = value
        self._insert_pos = (self._insert_pos + 1) & self._mask
        # the count goes up only after the slot is written
        with self._usage_lock:
            self._usage += 1
        self._read_sem.notify()

    def pop_front(self) -> T:
        """Remove and return the front element."""
        if not self._locking and self.empty():
            raise IndexError("ring buffer is empty")
        self._read_sem.wait()
        value = self._data[self._remove_pos]
        self._data[self._remove_pos] = None
        self._remove_pos = (self._remove_pos + 1) & self._mask
        with self._usage_lock:
            self._usage -= 1
        self._write_sem.notify()
        return value

    def remove_at(self, index: int) -> T:
        """Remove and return the element at ``index``.

        The front element takes the freed slot, so order is not preserved.
        """
        slot = self._slot(index)
        if slot != self._remove_pos:
            self._data[slot], self._data[self._remove_pos] = (
                self._data[self._remove_pos],
                self._data[slot],
            )
        return self.pop_front()

    def __getitem__(self, index: int) -> T:
        return self._data[self._slot(index)]

    def __setitem__(self, index: int, value: T) -> None:
        self._data[self._slot(index)] = value

    def front(self) -> T:
        if self.empty():
            raise IndexError("ring buffer is empty")
        return self._data[self._remove_pos]

    def clear(self) -> None:
        while not self.empty():
            self.pop_front()

    def wait_not_empty(self) -> None:
        """Spin, yielding the processor, until an element is available."""
        while self.empty():
            time.sleep(0)

    def wait_not_full(self) -> None:
        """Spin, yielding the processor, until a slot is free."""
        while self.full():
            time.sleep(0)

    def __repr__(self) -> str:
        items = ", ".join(repr(self[i]) for i in range(len(self)))
        return f"RingBuffer(capacity={self._capacity}, [{items}])"

    def _slot(self, index: int) -> int:
        size = self._usage
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("ring buffer index out of range")
        return (index + self._remove_pos) & self._mask