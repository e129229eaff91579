"""Per-client rate limiting middleware for Starlette using throttled-py."""

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response
from throttled import RateLimiterType, Throttled, rate_limiter, store

from .client_info import DEFAULT_FORWARDED_HEADER, extract_origin

logger = logging.getLogger(__name__)

DEFAULT_RETRY_AFTER_SECONDS = 60.0


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Token-bucket rate limit keyed on the same origin that records are stored under."""

    def __init__(
        self,
        app: Callable,
        requests_per_minute: int = 600,
        forwarded_header: str = DEFAULT_FORWARDED_HEADER,
    ) -> None:
        """Initialize rate limiting middleware.

        Args:
            app: The ASGI application to wrap.
            requests_per_minute: Maximum number of requests allowed per client per minute.
            forwarded_header: Header consulted before the peer address to identify a client.
        """
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.forwarded_header = forwarded_header
        self.quota = rate_limiter.per_min(requests_per_minute, burst=requests_per_minute)
        self.rate_limiter_store = store.MemoryStore()
        logger.info(f"Rate limiting enabled: {requests_per_minute} requests per minute per client")

    def _client_key(self, request: Request) -> str:
        origin = extract_origin(request, self.forwarded_header)
        if not origin:
            logger.warning("Could not determine client origin, using 'unknown'")
            return "unknown"
        return origin

    def _extract_retry_after(self, result: Any) -> float:
        """Extract retry_after value from rate limit result."""
        state = getattr(result, "state", None)
        if state is not None and hasattr(state, "retry_after"):
            return float(state.retry_after)
        if hasattr(result, "retry_after"):
            return float(result.retry_after)
        return DEFAULT_RETRY_AFTER_SECONDS

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Reject the request with 429 when the client's quota is used up."""
        client_key = self._client_key(request)
        throttle = Throttled(
            key=client_key,
            using=RateLimiterType.TOKEN_BUCKET.value,
            quota=self.quota,
            store=self.rate_limiter_store,
        )

        result = throttle.limit()
        if result.limited:
            retry_after = self._extract_retry_after(result)
            logger.warning(
                f"Rate limit exceeded for {client_key}, retry after {retry_after} seconds"
            )
            return PlainTextResponse(
                "Rate limit exceeded. Please try again later.",
                status_code=429,
                headers={"Retry-After": str(max(1, int(retry_after)))},
            )

        response: Response = await call_next(request)
        return response
