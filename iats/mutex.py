"""A binary-semaphore mutex whose lock attempt never waits."""

from __future__ import annotations

import threading
from types import TracebackType


class Mutex:
    """Created unlocked. :meth:`lock` takes it only if it is free."""

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def lock(self) -> bool:
        """Take the mutex without waiting; return whether it was taken."""
        return self._lock.acquire(blocking=False)

    def unlock(self) -> None:
        """Release the mutex; releasing a free mutex has no effect."""
        try:
            self._lock.release()
        except RuntimeError:
            pass

    def __enter__(self) -> Mutex:
        self._lock.acquire()
        return self

    def __exit__(
        self,
        *args: type[BaseException] | BaseException | TracebackType | None,
    ) -> None:
        self.unlock()