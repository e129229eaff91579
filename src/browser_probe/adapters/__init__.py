"""Adapters layer - configuration, storage and HTTP integrations."""

from browser_probe.adapters.config import AppConfig
from browser_probe.adapters.store import InMemoryRecordStore

__all__ = ["AppConfig", "InMemoryRecordStore"]
