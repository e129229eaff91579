"""Domain layer - records, submissions and store contracts."""

from browser_probe.domain.contracts import RecordStoreProtocol
from browser_probe.domain.errors import SubmissionDecodeError
from browser_probe.domain.models import (
    ClientInfo,
    CollectedRecord,
    ErrorDetails,
    Submission,
)

__all__ = [
    "ClientInfo",
    "CollectedRecord",
    "ErrorDetails",
    "RecordStoreProtocol",
    "Submission",
    "SubmissionDecodeError",
]
