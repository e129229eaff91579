"""Domain models for collected browser data."""

from browser_probe.domain.models.client_info import ClientInfo
from browser_probe.domain.models.collected_record import CollectedRecord
from browser_probe.domain.models.error_details import ErrorDetails
from browser_probe.domain.models.submission import Submission, decode_submission

__all__ = [
    "ClientInfo",
    "CollectedRecord",
    "ErrorDetails",
    "Submission",
    "decode_submission",
]
