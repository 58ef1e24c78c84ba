from __future__ import annotations

import threading
import time
from typing import Callable, List, Tuple


class CircuitBreaker:
    """Opens after ``failure_threshold`` failures inside ``window_seconds``."""

    def __init__(
        self,
        *,
        failure_threshold: int = 5,
        window_seconds: int = 60,
        open_seconds: int = 120,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.failure_threshold = max(1, failure_threshold)
        self.window_seconds = max(0, window_seconds)
        self.open_seconds = max(0, open_seconds)
        self._clock = clock
        self._failures: List[float] = []
        self._open_until = 0.0
        self._lock = threading.Lock()

    def is_open(self) -> Tuple[bool, int | None]:
        now = self._clock()
        with self._lock:
            until = self._open_until
        if until > now:
            retry = int(max(1, until - now))
            return True, retry
        return False, None

    def record_failure(self) -> None:
        now = self._clock()
        window_start = now - self.window_seconds
        with self._lock:
            bucket = [ts for ts in self._failures if ts >= window_start]
            bucket.append(now)
            self._failures = bucket
            if len(bucket) >= self.failure_threshold:
                self._open_until = now + self.open_seconds

    def record_success(self) -> None:
        with self._lock:
            self._failures = []
            self._open_until = 0.0


__all__ = ["CircuitBreaker"]
