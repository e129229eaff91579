"""Collection page and post-collection redirect."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from markupsafe import escape
from pyview.vendor import ibis
from starlette.responses import HTMLResponse, RedirectResponse, Response

if TYPE_CHECKING:
    from browser_probe.adapters.config import AppConfig

logger = logging.getLogger(__name__)

TEMPLATE_PATH = Path(__file__).parent / "static" / "index.html"


def render_collection_page(page_title: str, redirect_delay_ms: int) -> str:
    """Render the instrumented collection page.

    Args:
        page_title: Text for the page's ``<title>``; HTML-escaped here.
        redirect_delay_ms: Delay before the page navigates to ``/next``.

    Returns:
        The rendered HTML document.
    """
    with open(TEMPLATE_PATH, encoding="utf-8") as f:
        template_content = f.read()

    template = ibis.Template(template_content)
    return str(
        template.render(
            {
                "page_title": str(escape(page_title)),
                "redirect_delay_ms": int(redirect_delay_ms),
            }
        )
    )


class FrontendPages:
    """Serves the collection page and the redirect that follows it."""

    def __init__(self, config: AppConfig) -> None:
        """Render the page once from configuration.

        Args:
            config: Application configuration.
        """
        self.redirect_url = config.redirect_url
        self._page_html = render_collection_page(config.page_title, config.redirect_delay_ms)
        logger.info(f"Collection page rendered from {TEMPLATE_PATH}")

    async def index(self, _request: Any) -> Response:
        """Serve the collection page."""
        return HTMLResponse(self._page_html, media_type="text/html; charset=utf-8")

    async def next_page(self, _request: Any) -> Response:
        """Send the browser on to the configured external URL."""
        return RedirectResponse(self.redirect_url, status_code=303)
