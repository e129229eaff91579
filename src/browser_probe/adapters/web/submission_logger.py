"""Operational log output for collected records."""

import logging

from browser_probe.domain.models import CollectedRecord

logger = logging.getLogger(__name__)

MAX_LOGGED_AGENT_LENGTH = 200


def _shorten(value: str, limit: int) -> str:
    """Cut a value to ``limit`` characters, marking the cut with an ellipsis."""
    if len(value) <= limit:
        return value
    return f"{value[: limit - 3]}..."


def format_record_lines(record: CollectedRecord) -> list[str]:
    """Build the human-readable lines logged for a collected record."""
    locales = ", ".join(record.locales) if record.locales else "-"
    return [
        "=== COLLECTED USER DATA ===",
        f"IP: {record.origin}",
        f"User Agent: {_shorten(record.agent, MAX_LOGGED_AGENT_LENGTH)}",
        f"Languages: [{locales}]",
        f"Platform: {record.platform}",
        f"Screen: {record.screen_width}x{record.screen_height}",
        f"Referrer: {record.referrer}",
        "===========================",
    ]


def log_collected_record(record: CollectedRecord) -> None:
    """Log a collected record at INFO level."""
    logger.info("Collected record:\n" + "\n".join(format_record_lines(record)))
