"""Counting semaphores with explicit notify and wait."""

from __future__ import annotations

import threading


class Semaphore:
    """A counting semaphore: ``wait`` blocks until the count is positive."""

    def __init__(self, count: int = 0) -> None:
        if count < 0:
            raise ValueError("semaphore count must not be negative")
        self._count = count
        self._condition = threading.Condition()

    @property
    def value(self) -> int:
        """The current count."""
        with self._condition:
            return self._count

    def notify(self) -> None:
        """Increase the count and wake one waiting thread."""
        with self._condition:
            self._count += 1
            self._condition.notify()

    def wait(self) -> None:
        """Block until the count is positive, then decrease it."""
        with self._condition:
            self._condition.wait_for(lambda: self._count > 0)
            self._count -= 1


class NopSemaphore:
    """A semaphore that never blocks and keeps no count."""

    def __init__(self, count: int = 0) -> None:
        pass

    def notify(self) -> None:
        """Do nothing."""

    def wait(self) -> None:
        """Return immediately."""