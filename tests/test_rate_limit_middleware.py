"""Behavior-focused tests for rate limiting middleware."""

from unittest.mock import MagicMock

from starlette.applications import Starlette
from starlette.responses import PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from browser_probe.adapters.web.rate_limit_middleware import RateLimitMiddleware


async def _ok(_request: object) -> PlainTextResponse:
    return PlainTextResponse("ok")


def _client(requests_per_minute: int) -> TestClient:
    app = Starlette(routes=[Route("/", _ok)])
    return TestClient(RateLimitMiddleware(app, requests_per_minute=requests_per_minute))


class TestRateLimitMiddlewareDispatch:
    """Tests for request admission behavior."""

    def test_when_under_quota_then_requests_pass(self) -> None:
        """Given requests within the quota, when dispatching, then they reach the app."""
        client = _client(requests_per_minute=5)

        responses = [client.get("/") for _ in range(3)]

        assert [response.status_code for response in responses] == [200, 200, 200]

    def test_when_quota_exhausted_then_returns_429_with_retry_after(self) -> None:
        """Given more requests than the quota, when dispatching, then the excess gets 429."""
        client = _client(requests_per_minute=2)

        statuses = [client.get("/").status_code for _ in range(3)]
        limited = client.get("/")

        assert statuses[:2] == [200, 200]
        assert limited.status_code == 429
        assert int(limited.headers["Retry-After"]) >= 1

    def test_when_clients_differ_then_quotas_are_separate(self) -> None:
        """Given two forwarded origins, when one is limited, then the other still passes."""
        client = _client(requests_per_minute=1)

        first = client.get("/", headers={"X-Forwarded-For": "198.51.100.1"})
        limited = client.get("/", headers={"X-Forwarded-For": "198.51.100.1"})
        other = client.get("/", headers={"X-Forwarded-For": "198.51.100.2"})

        assert first.status_code == 200
        assert limited.status_code == 429
        assert other.status_code == 200


class TestRateLimitMiddlewareRetryAfterExtraction:
    """Tests for retry_after extraction from rate limit results."""

    def test_when_result_has_state_with_retry_after_then_extracts_it(self) -> None:
        """Given result with state.retry_after, when extracting, then returns that value."""
        middleware = RateLimitMiddleware(app=MagicMock(), requests_per_minute=100)
        result = MagicMock()
        result.state.retry_after = 45.5

        assert middleware._extract_retry_after(result) == 45.5

    def test_when_result_has_direct_retry_after_then_extracts_it(self) -> None:
        """Given result with direct retry_after, when extracting, then returns that value."""
        middleware = RateLimitMiddleware(app=MagicMock(), requests_per_minute=100)
        result = MagicMock(spec=["retry_after"])
        result.retry_after = 30.0

        assert middleware._extract_retry_after(result) == 30.0

    def test_when_result_has_no_retry_after_then_returns_default(self) -> None:
        """Given result without retry_after, when extracting, then returns 60 seconds default."""
        middleware = RateLimitMiddleware(app=MagicMock(), requests_per_minute=100)
        result = MagicMock(spec=[])

        assert middleware._extract_retry_after(result) == 60.0
