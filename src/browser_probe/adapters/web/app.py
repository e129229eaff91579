"""Starlette web adapter for the collection server."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from starlette.applications import Starlette
from starlette.routing import Route

from browser_probe.adapters.config import AppConfig
from browser_probe.adapters.store import InMemoryRecordStore
from browser_probe.application.services import CollectionService

from .frontend import FrontendPages
from .handlers import CollectionHandlers
from .rate_limit_middleware import RateLimitMiddleware

if TYPE_CHECKING:
    from starlette.types import ASGIApp

    from browser_probe.domain.contracts import RecordStoreProtocol

logger = logging.getLogger(__name__)

ANY_METHOD = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]


def create_app(
    config: AppConfig,
    record_store: RecordStoreProtocol | None = None,
) -> ASGIApp:
    """Build the ASGI application.

    Args:
        config: Application configuration.
        record_store: Store shared by every request; a fresh in-memory store
            is created when omitted.

    Returns:
        The Starlette app, wrapped in rate limiting only when a quota is set.
    """
    store = record_store if record_store is not None else InMemoryRecordStore()
    service = CollectionService(store)
    handlers = CollectionHandlers(service, forwarded_header=config.forwarded_header)
    pages = FrontendPages(config)

    routes = [
        Route("/", pages.index, methods=["GET"]),
        Route("/next", pages.next_page, methods=["GET"]),
        # Method is checked by the handler so the rejection carries its own body.
        Route("/collect", handlers.collect, methods=ANY_METHOD),
        Route("/data", handlers.list_records, methods=ANY_METHOD),
        Route("/clear", handlers.clear_records, methods=ANY_METHOD),
        Route("/healthz", handlers.healthz, methods=["GET"]),
    ]
    app = Starlette(routes=routes)

    if config.rate_limit_per_minute <= 0:
        logger.info("Rate limiting disabled")
        return app

    return RateLimitMiddleware(
        app,
        requests_per_minute=config.rate_limit_per_minute,
        forwarded_header=config.forwarded_header,
    )


class StarletteWebAdapter:
    """Runs the collection app under uvicorn."""

    def __init__(self, config: AppConfig, record_store: RecordStoreProtocol | None = None) -> None:
        """Initialize the web adapter.

        Args:
            config: Application configuration.
            record_store: Optional store to serve; defaults to a new in-memory store.
        """
        if not isinstance(config, AppConfig):
            raise TypeError("config must be an AppConfig instance")
        self.config = config
        self.record_store = record_store if record_store is not None else InMemoryRecordStore()
        self._server: Any | None = None

    def build_app(self) -> ASGIApp:
        """Build the ASGI application bound to this adapter's store."""
        return create_app(self.config, self.record_store)

    async def start(self) -> None:
        """Start the web server and serve until stopped."""
        import uvicorn

        server_config = uvicorn.Config(
            self.build_app(),
            host=self.config.host,
            port=self.config.port,
            log_level=self.config.log_level.lower(),
        )
        self._server = uvicorn.Server(server_config)
        await self._server.serve()

    async def stop(self) -> None:
        """Ask the web server to exit."""
        if self._server:
            self._server.should_exit = True
