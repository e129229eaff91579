"""Client information domain model."""

from pydantic import BaseModel, ConfigDict


class ClientInfo(BaseModel):
    """Request metadata observed by the server rather than declared by the page."""

    model_config = ConfigDict(frozen=True)

    origin: str = ""
    agent: str = ""
    referrer: str = ""
