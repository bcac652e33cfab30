"""Default nonce source for private endpoints."""

from __future__ import annotations

import threading
import time


class NonceGenerator:
    """Strictly increasing nonces derived from the wall clock in microseconds.

    Two calls within the same microsecond still get distinct, increasing values.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last = 0

    def __call__(self) -> int:
        with self._lock:
            candidate = time.time_ns() // 1000
            self._last = max(candidate, self._last + 1)
            return self._last
