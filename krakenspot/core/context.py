"""Request context used for pre-send cancellation and deadlines."""

from __future__ import annotations

import time


class RequestContext:
    """Caller-owned cancellation handle.

    The pipeline checks ``done()`` once before sending. In-flight cancellation is
    left to the transport, which receives ``remaining()`` as its timeout.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._deadline = time.monotonic() + timeout if timeout is not None else None
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def remaining(self) -> float | None:
        """Seconds left before the deadline, or ``None`` without one."""
        if self._deadline is None:
            return None
        return max(0.0, self._deadline - time.monotonic())

    def done(self) -> bool:
        if self._cancelled:
            return True
        return self._deadline is not None and time.monotonic() >= self._deadline

    def reason(self) -> str | None:
        if self._cancelled:
            return "context canceled"
        if self.done():
            return "context deadline exceeded"
        return None
