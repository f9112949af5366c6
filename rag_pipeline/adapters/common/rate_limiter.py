"""Token-bucket rate limiter for outbound model calls."""

import threading
import time


class RateLimiter:
    """Blocking token bucket sized in requests per minute.

    Tokens refill continuously up to the per-minute capacity. ``None`` or a
    non-positive rate makes every ``acquire`` return immediately.
    """

    def __init__(self, requests_per_minute: int | None) -> None:
        if requests_per_minute is not None and requests_per_minute > 0:
            self.capacity: int | None = requests_per_minute
        else:
            self.capacity = None
        self.tokens = float(self.capacity or 0)
        self._seconds_per_token = 60.0 / self.capacity if self.capacity else 0.0
        self._updated = time.monotonic()
        self._lock = threading.Lock()

    @property
    def enabled(self) -> bool:
        return self.capacity is not None

    def _try_take(self) -> float:
        """Take a token, returning 0, or return the seconds until one is free."""
        now = time.monotonic()
        earned = (now - self._updated) / self._seconds_per_token
        self.tokens = min(float(self.capacity), self.tokens + earned)
        self._updated = now

        if self.tokens >= 1.0:
            self.tokens -= 1.0
            return 0.0
        return (1.0 - self.tokens) * self._seconds_per_token

    def acquire(self) -> None:
        """Block until a request may be sent."""
        if self.capacity is None:
            return

        while True:
            with self._lock:
                wait = self._try_take()
            if wait <= 0:
                return
            # Sleep without the lock so other callers can check the bucket
            time.sleep(wait)
