"""Submission payload posted by the collection page."""

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from browser_probe.domain.errors import SubmissionDecodeError

_JSON_TYPE_NAMES: dict[type, str] = {
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
}


class Submission(BaseModel):
    """Attributes declared by the browser.

    Every field is optional. Absent fields take the defaults below instead of
    failing, but present fields must have the right JSON type.
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore", populate_by_name=True)

    languages: list[str] = Field(default_factory=list)
    platform: str = ""
    screen_width: int = Field(default=0, alias="screenWidth")
    screen_height: int = Field(default=0, alias="screenHeight")
    color_depth: int = Field(default=0, alias="colorDepth")
    timezone: str = ""
    cookies: str = ""
    online: bool = False


def _format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into a single line such as ``screenWidth: Input should be...``."""
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"])
        parts.append(f"{location}: {error['msg']}" if location else error["msg"])
    return "; ".join(parts)


def decode_submission(body: bytes | str) -> Submission:
    """Decode a raw request body into a Submission.

    A JSON ``null`` (for the whole body or for a single field) counts as absent
    and falls back to the field default; a ``null`` language entry becomes ``""``.

    Raises:
        SubmissionDecodeError: If the body is not JSON, not an object, or a
            present field has the wrong type.
    """
    try:
        payload: Any = json.loads(body)
    except ValueError as e:
        raise SubmissionDecodeError(str(e)) from e

    if payload is None:
        payload = {}
    if not isinstance(payload, dict):
        type_name = _JSON_TYPE_NAMES.get(type(payload), type(payload).__name__)
        raise SubmissionDecodeError(f"payload must be a JSON object, got {type_name}")

    present = {key: value for key, value in payload.items() if value is not None}
    languages = present.get("languages")
    if isinstance(languages, list):
        present["languages"] = ["" if item is None else item for item in languages]
    try:
        return Submission.model_validate(present)
    except ValidationError as e:
        raise SubmissionDecodeError(_format_validation_error(e)) from e
