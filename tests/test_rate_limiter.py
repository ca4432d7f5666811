"""
Tests for the per-user rate limiter.
"""

from security import rate_limiter


class TestIsAllowed:
    """Tests for is_allowed()."""

    def test_blocks_after_limit(self, monkeypatch):
        monkeypatch.setattr(rate_limiter, "RATE_LIMIT_MESSAGES", 2)
        monkeypatch.setattr(rate_limiter, "RATE_LIMIT_WINDOW_SECONDS", 60)
        assert rate_limiter.is_allowed(1001, now=0)
        assert rate_limiter.is_allowed(1001, now=1)
        assert not rate_limiter.is_allowed(1001, now=2)

    def test_window_slides(self, monkeypatch):
        monkeypatch.setattr(rate_limiter, "RATE_LIMIT_MESSAGES", 1)
        monkeypatch.setattr(rate_limiter, "RATE_LIMIT_WINDOW_SECONDS", 10)
        assert rate_limiter.is_allowed(1002, now=100)
        assert not rate_limiter.is_allowed(1002, now=105)
        assert rate_limiter.is_allowed(1002, now=111)

    def test_users_are_independent(self, monkeypatch):
        monkeypatch.setattr(rate_limiter, "RATE_LIMIT_MESSAGES", 1)
        assert rate_limiter.is_allowed(1003, now=0)
        assert rate_limiter.is_allowed(1004, now=0)
