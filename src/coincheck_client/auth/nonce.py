from __future__ import annotations

import threading
import time
from typing import Callable, Optional


def _now_ms() -> int:
    """Get current timestamp in milliseconds."""
    return int(time.time() * 1000)


class NonceGenerator:
    """
    Strictly increasing nonces for one credential set.

    Clock-derived (milliseconds); if the clock has not moved past the last
    value (fast callers, clock skew) the last value is bumped by one instead.
    next() never awaits, so concurrent coroutines on one loop cannot interleave
    inside it; the lock covers callers on other threads.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None):
        self._clock = clock or _now_ms
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            candidate = int(self._clock())
            if candidate <= self._last:
                candidate = self._last + 1
            self._last = candidate
            return candidate

    @property
    def last(self) -> int:
        return self._last
