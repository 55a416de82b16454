"""Run-scoped cancellation token."""

import threading
import time
from typing import Callable, Optional


class CancellationToken:
    """Write-once cancellation signal with an optional deadline.

    The token counts as cancelled once ``cancel()`` has been called or the
    deadline (in ``clock`` seconds) has passed. Only the first ``cancel()``
    call records a reason; later calls, and calls after the deadline, are
    no-ops. Reading the token never changes it.
    """

    DEADLINE_EXCEEDED = "deadline exceeded"
    INTERRUPTED = "interrupted"

    def __init__(self, deadline: Optional[float] = None, clock: Callable[[], float] = time.monotonic):
        self._deadline = deadline
        self._clock = clock
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._reason: Optional[str] = None

    @classmethod
    def with_timeout(cls, seconds: float, clock: Callable[[], float] = time.monotonic) -> "CancellationToken":
        """Create a token whose deadline is ``seconds`` from now."""
        return cls(deadline=clock() + max(seconds, 0.0), clock=clock)

    def cancel(self, reason: str = INTERRUPTED) -> None:
        with self._lock:
            if self._event.is_set() or self._deadline_passed():
                return
            self._reason = reason
            self._event.set()

    def _deadline_passed(self) -> bool:
        return self._deadline is not None and self._clock() >= self._deadline

    @property
    def cancelled(self) -> bool:
        return self._event.is_set() or self._deadline_passed()

    @property
    def reason(self) -> Optional[str]:
        if self._event.is_set():
            return self._reason
        if self._deadline_passed():
            return self.DEADLINE_EXCEEDED
        return None

    def remaining(self) -> Optional[float]:
        """Seconds left before the deadline, or None without a deadline."""
        if self._deadline is None:
            return None
        return max(self._deadline - self._clock(), 0.0)
