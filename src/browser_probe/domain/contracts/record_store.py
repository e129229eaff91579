"""Protocol for the collected record store."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from browser_probe.domain.models.collected_record import CollectedRecord


class RecordStoreProtocol(Protocol):
    """Ordered, process-wide collection of records.

    Implementations must make every operation atomic with respect to every
    other operation, since handlers call them from concurrent requests.
    """

    def append(self, record: "CollectedRecord") -> None:
        """Add a record as the new last element.

        Args:
            record: The record to add.
        """
        ...

    def snapshot(self) -> tuple["CollectedRecord", ...]:
        """Return an independent copy of all records in insertion order."""
        ...

    def clear(self) -> int:
        """Remove all records.

        Returns:
            Number of records that were dropped.
        """
        ...

    def __len__(self) -> int:
        """Return the number of records currently held."""
        ...
