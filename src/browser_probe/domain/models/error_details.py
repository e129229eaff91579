"""Error details domain model."""

from pydantic import BaseModel, ConfigDict


class ErrorDetails(BaseModel):
    """Details about a rejected request, including the HTTP status code to report."""

    model_config = ConfigDict(frozen=True)

    status_code: int
    reason: str
