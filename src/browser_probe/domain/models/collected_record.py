"""Collected record domain model."""

from pydantic import BaseModel, ConfigDict, Field

from browser_probe.domain.models.client_info import ClientInfo
from browser_probe.domain.models.submission import Submission


class CollectedRecord(BaseModel):
    """One captured submission: declared browser attributes plus server-observed metadata.

    Attribute names are the Python-side names; the aliases are the JSON keys
    used when records are listed over HTTP.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    origin: str = Field(default="", alias="ip")
    agent: str = Field(default="", alias="user_agent")
    locales: tuple[str, ...] = Field(default=(), alias="languages")
    platform: str = ""
    screen_width: int = 0
    screen_height: int = 0
    color_depth: int = 0
    timezone: str = ""
    cookies_state: str = Field(default="", alias="cookies_enabled")
    online: bool = False
    referrer: str = ""

    @classmethod
    def from_submission(cls, submission: Submission, client_info: ClientInfo) -> "CollectedRecord":
        """Combine a decoded submission with the request's client info."""
        return cls(
            origin=client_info.origin,
            agent=client_info.agent,
            locales=tuple(submission.languages),
            platform=submission.platform,
            screen_width=submission.screen_width,
            screen_height=submission.screen_height,
            color_depth=submission.color_depth,
            timezone=submission.timezone,
            cookies_state=submission.cookies,
            online=submission.online,
            referrer=client_info.referrer,
        )

    def to_json_dict(self) -> dict[str, object]:
        """Return the record as a JSON-ready dict keyed by wire names."""
        return self.model_dump(mode="json", by_alias=True)
