"""Main entry point for the browser probe server."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from browser_probe.adapters.config import AppConfig
from browser_probe.adapters.store import InMemoryRecordStore
from browser_probe.adapters.web import StarletteWebAdapter

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stderr,
)

logger = logging.getLogger(__name__)


async def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logging.getLogger().setLevel(config.log_level)

    web_adapter = StarletteWebAdapter(config, InMemoryRecordStore())

    logger.info(f"Server starting on http://{config.host}:{config.port}")
    logger.info("Educational demo - this collects user data for learning purposes")

    try:
        await web_adapter.start()
    except KeyboardInterrupt:
        logger.info("Shutting down...")
        await web_adapter.stop()


def run() -> None:
    """Console script entry point."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
