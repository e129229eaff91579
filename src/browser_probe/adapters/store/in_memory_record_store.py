"""In-memory record store implementation."""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from browser_probe.domain.contracts.record_store import RecordStoreProtocol

if TYPE_CHECKING:
    from browser_probe.domain.models.collected_record import CollectedRecord

logger = logging.getLogger(__name__)


class InMemoryRecordStore(RecordStoreProtocol):
    """Lock-guarded list of records that lives as long as the process.

    Every operation holds the same lock for a pure in-memory list operation,
    so the lock is safe to take from the event loop as well as from worker
    threads.
    """

    def __init__(self) -> None:
        """Initialize an empty store."""
        self._lock = threading.Lock()
        self._records: list[CollectedRecord] = []

    def append(self, record: CollectedRecord) -> None:
        """Add a record as the new last element.

        Args:
            record: The record to add.
        """
        with self._lock:
            self._records.append(record)

    def snapshot(self) -> tuple[CollectedRecord, ...]:
        """Return an independent copy of all records in insertion order.

        Returns:
            Tuple of records; later appends or clears do not affect it.
        """
        with self._lock:
            return tuple(self._records)

    def clear(self) -> int:
        """Remove all records.

        Returns:
            Number of records that were dropped.
        """
        with self._lock:
            dropped = len(self._records)
            self._records = []
        logger.debug(f"Cleared {dropped} record(s) from store")
        return dropped

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
