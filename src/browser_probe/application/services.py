"""Application services (use cases) for collected browser data."""

import logging
from typing import TYPE_CHECKING

from browser_probe.domain.models import ClientInfo, CollectedRecord, decode_submission

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from browser_probe.domain.contracts import RecordStoreProtocol


class CollectionService:
    """Service for recording, listing and clearing collected submissions."""

    def __init__(self, record_store: "RecordStoreProtocol") -> None:
        """Initialize with a record store."""
        self._record_store = record_store

    def record_submission(self, body: bytes | str, client_info: ClientInfo) -> CollectedRecord:
        """Decode a submission body, enrich it and append it to the store.

        The body is fully decoded before the store is touched, so a failed
        decode never leaves a partial record behind.

        Raises:
            SubmissionDecodeError: If the body cannot be decoded.
        """
        submission = decode_submission(body)
        record = CollectedRecord.from_submission(submission, client_info)
        self._record_store.append(record)
        logger.debug("Stored record from %s", record.origin)
        return record

    def list_records(self) -> tuple[CollectedRecord, ...]:
        """Return a snapshot of every record collected so far."""
        return self._record_store.snapshot()

    def clear_records(self) -> int:
        """Drop every collected record and return how many were dropped."""
        dropped = self._record_store.clear()
        logger.info(f"Cleared {dropped} collected record(s)")
        return dropped
