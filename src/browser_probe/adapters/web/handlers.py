"""HTTP handlers for submitting, inspecting and clearing collected records."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from starlette.requests import ClientDisconnect, Request
from starlette.responses import JSONResponse, PlainTextResponse, Response

from browser_probe.domain.errors import SubmissionDecodeError
from browser_probe.domain.models import ErrorDetails

from .client_info import DEFAULT_FORWARDED_HEADER, get_client_info
from .submission_logger import log_collected_record

if TYPE_CHECKING:
    from browser_probe.application.services import CollectionService

logger = logging.getLogger(__name__)

COLLECTED_MESSAGE = "Data collected (for educational purposes)"
CLEARED_MESSAGE = "Data cleared"


def error_response(details: ErrorDetails, headers: dict[str, str] | None = None) -> Response:
    """Build a plain text response for a rejected request."""
    return PlainTextResponse(details.reason, status_code=details.status_code, headers=headers)


class CollectionHandlers:
    """Request handlers bound to a single collection service."""

    def __init__(
        self,
        service: CollectionService,
        forwarded_header: str = DEFAULT_FORWARDED_HEADER,
    ) -> None:
        """Initialize the handlers.

        Args:
            service: Service owning the shared record store.
            forwarded_header: Header whose value, when present, becomes the record origin.
        """
        self.service = service
        self.forwarded_header = forwarded_header

    async def collect(self, request: Request) -> Response:
        """Record one submission posted by the collection page.

        The whole body is read and decoded before the store is touched, so a
        rejected or aborted request never adds a record.
        """
        if request.method != "POST":
            return error_response(
                ErrorDetails(status_code=405, reason="Method not allowed"),
                headers={"Allow": "POST"},
            )

        try:
            body = await request.body()
        except ClientDisconnect:
            logger.info("Client disconnected before the submission body was read, dropping it")
            return error_response(ErrorDetails(status_code=400, reason="Client disconnected"))

        client_info = get_client_info(request, self.forwarded_header)
        try:
            record = self.service.record_submission(body, client_info)
        except SubmissionDecodeError as e:
            logger.warning(f"Rejected submission from {client_info.origin}: {e}")
            return error_response(ErrorDetails(status_code=400, reason=str(e)))

        log_collected_record(record)
        return PlainTextResponse(COLLECTED_MESSAGE)

    async def list_records(self, _request: Request) -> Response:
        """Return every collected record as a JSON array."""
        records = self.service.list_records()
        return JSONResponse([record.to_json_dict() for record in records])

    async def clear_records(self, _request: Request) -> Response:
        """Drop every collected record."""
        self.service.clear_records()
        return PlainTextResponse(CLEARED_MESSAGE)

    async def healthz(self, _request: Request) -> Response:
        """Health check endpoint for load balancers and monitoring."""
        return PlainTextResponse("Ok")
