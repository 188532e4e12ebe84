from __future__ import annotations

import threading


class SlotPool:
    """Fixed-capacity admission gate for running commands.

    ``acquire`` blocks until one of ``capacity`` slots is free. No ordering
    between waiters is promised, only that each is eventually admitted.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"capacity must be at least 1, got {capacity}")
        self._capacity = capacity
        self._slots = threading.BoundedSemaphore(capacity)

    @property
    def capacity(self) -> int:
        return self._capacity

    def acquire(self) -> None:
        self._slots.acquire()

    def release(self) -> None:
        # BoundedSemaphore raises ValueError on a release without acquire
        self._slots.release()

    def __enter__(self) -> SlotPool:
        self.acquire()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()
