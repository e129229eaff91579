"""Protocols the application layer depends on."""

from browser_probe.domain.contracts.record_store import RecordStoreProtocol

__all__ = ["RecordStoreProtocol"]
