import threading
import time
from typing import Optional

from .models.errors import ContextCancelledError, ContextError, DeadlineExceededError


class Context:
    """Cancellation handle attached to a request with `with_context`.

    A context is cancelled explicitly with `cancel()` or implicitly once its
    deadline passes. It may be cancelled from another thread while a request
    is in flight.

    Example:
        ```python
        ctx = Context.with_timeout(2.5)
        request(t, client, "GET", url, with_context(ctx), expect_status(200))
        ```
    """

    def __init__(self, timeout: Optional[float] = None) -> None:
        self._cancelled = threading.Event()
        self._deadline: Optional[float] = None
        if timeout is not None:
            self._deadline = time.monotonic() + timeout

    @classmethod
    def with_timeout(cls, seconds: float) -> "Context":
        return cls(timeout=seconds)

    @property
    def deadline(self) -> Optional[float]:
        """Monotonic clock value after which the context expires."""
        return self._deadline

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        self._cancelled.set()

    def remaining(self) -> Optional[float]:
        """Seconds left until the deadline, never negative.

        Returns None when the context has no deadline.
        """
        if self._deadline is None:
            return None
        return max(self._deadline - time.monotonic(), 0.0)

    def expired(self) -> bool:
        return self._deadline is not None and time.monotonic() >= self._deadline

    def err(self) -> Optional[ContextError]:
        # Explicit cancellation wins over an expired deadline.
        if self.cancelled:
            return ContextCancelledError()
        if self.expired():
            return DeadlineExceededError()
        return None

    def __repr__(self) -> str:
        return (
            f"Context(cancelled={self.cancelled}, remaining={self.remaining()!r})"
        )
