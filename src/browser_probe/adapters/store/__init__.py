"""Record store adapters."""

from browser_probe.adapters.store.in_memory_record_store import InMemoryRecordStore

__all__ = ["InMemoryRecordStore"]
