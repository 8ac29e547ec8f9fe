"""In-memory fixed-window rate limiter.

Counters are keyed by (action, identity), live in process memory and are
guarded by a single lock. They reset when their window elapses or when the
process restarts, and are not shared between server instances, so this is
advisory throttling rather than a security boundary.
"""

import math
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Self

from django.conf import settings

PURGE_INTERVAL_SECONDS = 5 * 60


@dataclass(frozen=True)
class RateLimitConfig:
    """Maximum attempts allowed per window of ``window_ms`` milliseconds."""

    max_attempts: int
    window_ms: int

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.window_ms <= 0:
            raise ValueError("window_ms must be positive")

    @classmethod
    def from_settings(cls, name: str) -> Self:
        """Build a config from the ``RATE_LIMITS`` preset called ``name``."""
        return cls(**settings.RATE_LIMITS[name])


@dataclass(frozen=True)
class RateLimitResult:
    success: bool
    reset_in: int
    remaining: int


@dataclass
class _Counter:
    count: int
    expires_at: float


class RateLimiter:
    """Process-wide attempt counter with lazy window reset."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.Lock()
        self._counters: dict[tuple[str, str], _Counter] = {}
        self._last_purge = clock()

    def attempt(self, identity: str, action: str, config: RateLimitConfig) -> RateLimitResult:
        """Record one attempt and report whether it is allowed."""
        window = config.window_ms / 1000
        key = (action, identity)

        with self._lock:
            now = self._clock()
            self._purge_expired(now)

            counter = self._counters.get(key)
            if counter is None or now >= counter.expires_at:
                self._counters[key] = _Counter(count=1, expires_at=now + window)
                return RateLimitResult(
                    success=True,
                    reset_in=math.ceil(window),
                    remaining=config.max_attempts - 1,
                )

            counter.count += 1
            reset_in = max(1, math.ceil(counter.expires_at - now))
            if counter.count > config.max_attempts:
                return RateLimitResult(success=False, reset_in=reset_in, remaining=0)
            return RateLimitResult(
                success=True,
                reset_in=reset_in,
                remaining=config.max_attempts - counter.count,
            )

    def reset(self) -> None:
        """Forget every counter."""
        with self._lock:
            self._counters.clear()

    def _purge_expired(self, now: float) -> None:
        # Caller holds the lock.
        if now - self._last_purge < PURGE_INTERVAL_SECONDS:
            return
        self._last_purge = now
        expired = [key for key, counter in self._counters.items() if now >= counter.expires_at]
        for key in expired:
            del self._counters[key]


limiter = RateLimiter()
