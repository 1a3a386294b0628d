"""
Tests for the 429 retry helpers.

Only rate limiting is retried; every other status is raised at once.
"""

from unittest.mock import MagicMock

import httpx
import pytest
import respx

from nextflix.adapters.api.retry import (
    RateLimitError,
    _parse_retry_after,
    request_with_retry,
    wait_retry_after,
    with_retry,
)


def _state_with(error: Exception) -> MagicMock:
    state = MagicMock()
    state.outcome.exception.return_value = error
    state.attempt_number = 1
    return state


class TestWaitRetryAfter:
    """Tests for the Retry-After wait strategy."""

    def test_uses_retry_after_header(self):
        wait = wait_retry_after(max_wait=10)
        assert wait(_state_with(RateLimitError(retry_after=3))) == 3.0

    def test_caps_retry_after(self):
        wait = wait_retry_after(max_wait=10)
        assert wait(_state_with(RateLimitError(retry_after=120))) == 10.0

    def test_fallback_is_bounded(self):
        """Without Retry-After, the jittered backoff stays within max_wait."""
        wait = wait_retry_after(max_wait=2)
        delay = wait(_state_with(RateLimitError()))
        assert 0 <= delay <= 2


class TestParseRetryAfter:
    def test_seconds(self):
        assert _parse_retry_after("5") == 5

    def test_missing(self):
        assert _parse_retry_after(None) is None

    def test_http_date_is_ignored(self):
        assert _parse_retry_after("Wed, 21 Oct 2015 07:28:00 GMT") is None


class TestWithRetry:
    """Tests for the with_retry decorator."""

    @pytest.mark.asyncio
    async def test_retries_rate_limit_then_succeeds(self):
        calls = []

        @with_retry(max_attempts=3, max_wait=1)
        async def flaky():
            calls.append(1)
            if len(calls) < 3:
                raise RateLimitError(retry_after=0)
            return "ok"

        assert await flaky() == "ok"
        assert len(calls) == 3

    @pytest.mark.asyncio
    async def test_reraises_after_max_attempts(self):
        calls = []

        @with_retry(max_attempts=2, max_wait=1)
        async def always_limited():
            calls.append(1)
            raise RateLimitError(retry_after=0)

        with pytest.raises(RateLimitError):
            await always_limited()
        assert len(calls) == 2

    @pytest.mark.asyncio
    async def test_other_errors_are_not_retried(self):
        calls = []

        @with_retry(max_attempts=3, max_wait=1)
        async def broken():
            calls.append(1)
            raise ValueError("boom")

        with pytest.raises(ValueError):
            await broken()
        assert len(calls) == 1


class TestRequestWithRetry:
    """Tests for request_with_retry over httpx."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_raised_immediately(self):
        route = respx.get("https://example.test/items").mock(
            return_value=httpx.Response(503)
        )

        async with httpx.AsyncClient() as client:
            with pytest.raises(httpx.HTTPStatusError):
                await request_with_retry(client, "GET", "https://example.test/items")

        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_then_success(self):
        route = respx.get("https://example.test/items").mock(
            side_effect=[
                httpx.Response(429, headers={"Retry-After": "0"}),
                httpx.Response(200, json={"ok": True}),
            ]
        )

        async with httpx.AsyncClient() as client:
            response = await request_with_retry(client, "GET", "https://example.test/items")

        assert response.json() == {"ok": True}
        assert route.call_count == 2
