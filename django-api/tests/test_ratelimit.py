"""Tests for the in-memory rate limiter.

Run with: pytest tests/test_ratelimit.py -v
"""

import threading

import pytest

from core.ratelimit import RateLimitConfig, RateLimiter

CONFIG = RateLimitConfig(max_attempts=5, window_ms=60_000)


class FakeClock:
    def __init__(self, now: float = 1000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def limiter(clock: FakeClock) -> RateLimiter:
    return RateLimiter(clock=clock)


class TestRateLimiter:
    def test_first_attempt_opens_a_window(self, limiter: RateLimiter):
        result = limiter.attempt("1.2.3.4", "login", CONFIG)
        assert result.success
        assert result.remaining == 4
        assert result.reset_in == 60

    def test_attempt_after_max_is_rejected_with_reset_delay(self, limiter, clock):
        for _ in range(5):
            assert limiter.attempt("1.2.3.4", "login", CONFIG).success
        clock.advance(10.2)
        result = limiter.attempt("1.2.3.4", "login", CONFIG)
        assert not result.success
        assert result.remaining == 0
        assert result.reset_in == 50

    def test_window_expiry_resets_counter(self, limiter, clock):
        for _ in range(6):
            limiter.attempt("1.2.3.4", "login", CONFIG)
        clock.advance(60)
        result = limiter.attempt("1.2.3.4", "login", CONFIG)
        assert result.success
        assert result.remaining == 4

    def test_reset_in_is_never_zero_while_rejected(self, limiter, clock):
        for _ in range(5):
            limiter.attempt("a", "login", CONFIG)
        clock.advance(59.99)
        result = limiter.attempt("a", "login", CONFIG)
        assert not result.success
        assert result.reset_in == 1

    def test_identity_and_action_are_separate_keys(self, limiter):
        for _ in range(5):
            limiter.attempt("admin@example.com", "admin-login-email", CONFIG)
        assert not limiter.attempt("admin@example.com", "admin-login-email", CONFIG).success
        assert limiter.attempt("admin@example.com", "admin-login-ip", CONFIG).success
        assert limiter.attempt("other@example.com", "admin-login-email", CONFIG).success

    def test_reset_forgets_counters(self, limiter):
        for _ in range(6):
            limiter.attempt("a", "login", CONFIG)
        limiter.reset()
        assert limiter.attempt("a", "login", CONFIG).success

    def test_expired_counters_are_purged(self, limiter, clock):
        limiter.attempt("a", "login", CONFIG)
        clock.advance(10 * 60)
        limiter.attempt("b", "login", CONFIG)
        assert set(limiter._counters) == {("login", "b")}

    def test_concurrent_attempts_are_not_lost(self):
        limiter = RateLimiter()
        config = RateLimitConfig(max_attempts=1000, window_ms=60_000)
        results = []

        def worker():
            for _ in range(50):
                results.append(limiter.attempt("ip", "login", config))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(r.remaining for r in results) == list(range(1000 - 400, 1000))


class TestRateLimitConfig:
    def test_from_settings(self, settings):
        settings.RATE_LIMITS = {"login": {"max_attempts": 2, "window_ms": 500}}
        assert RateLimitConfig.from_settings("login") == RateLimitConfig(2, 500)

    @pytest.mark.parametrize("max_attempts,window_ms", [(0, 1000), (1, 0)])
    def test_rejects_invalid_values(self, max_attempts, window_ms):
        with pytest.raises(ValueError):
            RateLimitConfig(max_attempts=max_attempts, window_ms=window_ms)
