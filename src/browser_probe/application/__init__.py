"""Application layer - collection use cases."""

from browser_probe.application.services import CollectionService

__all__ = ["CollectionService"]
