"""Tests for the operator CLI."""

import json
from typing import Any

import aiohttp
import pytest

from browser_probe.cli import (
    EXIT_CONNECTION_ERROR,
    EXIT_HTTP_ERROR,
    EXIT_OK,
    AdminRequestError,
    build_parser,
    clear_records,
    fetch_records,
    format_table,
    run_command,
)
from browser_probe.domain.models import CollectedRecord


class FakeResponse:
    """Minimal stand-in for an aiohttp response used as an async context manager."""

    def __init__(self, status: int, text: str) -> None:
        self.status = status
        self._text = text

    async def text(self) -> str:
        return self._text

    async def __aenter__(self) -> "FakeResponse":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None


class FakeSession:
    """Records requested URLs and answers with canned responses."""

    def __init__(self, responses: dict[str, tuple[int, str]]) -> None:
        self.responses = responses
        self.requested: list[str] = []

    def get(self, url: str) -> FakeResponse:
        self.requested.append(url)
        status, text = self.responses[url]
        return FakeResponse(status, text)


class FailingSession:
    """Session whose requests always fail to connect."""

    def get(self, url: str) -> FakeResponse:
        raise aiohttp.ClientConnectionError(f"cannot connect to {url}")


SAMPLE_LISTING = json.dumps(
    [
        {
            "ip": "203.0.113.5",
            "user_agent": "TestBrowser/1.0",
            "languages": ["en-US"],
            "platform": "TestOS",
            "screen_width": 1920,
            "screen_height": 1080,
            "color_depth": 24,
            "timezone": "UTC",
            "cookies_enabled": "Enabled",
            "online": True,
            "referrer": "",
        }
    ]
)


@pytest.mark.asyncio
async def test_fetch_records_parses_listing() -> None:
    """Given a listing response, when fetching, then records are parsed from wire names."""
    session = FakeSession({"http://probe.test/data": (200, SAMPLE_LISTING)})

    records = await fetch_records(session, "http://probe.test/")  # type: ignore[arg-type]

    assert session.requested == ["http://probe.test/data"]
    assert len(records) == 1
    assert records[0].origin == "203.0.113.5"
    assert records[0].locales == ("en-US",)
    assert records[0].cookies_state == "Enabled"


@pytest.mark.asyncio
async def test_fetch_records_accepts_null_listing() -> None:
    """Given a null listing body, when fetching, then no records are returned."""
    session = FakeSession({"http://probe.test/data": (200, "null")})

    assert await fetch_records(session, "http://probe.test") == []  # type: ignore[arg-type]


@pytest.mark.asyncio
async def test_fetch_records_raises_on_http_error() -> None:
    """Given a non-2xx response, when fetching, then AdminRequestError carries the status."""
    session = FakeSession({"http://probe.test/data": (503, "unavailable")})

    with pytest.raises(AdminRequestError) as exc_info:
        await fetch_records(session, "http://probe.test")  # type: ignore[arg-type]

    assert exc_info.value.status == 503
    assert "unavailable" in str(exc_info.value)


@pytest.mark.asyncio
async def test_clear_records_returns_server_reply() -> None:
    """Given a clear response, when clearing, then the reply text is returned."""
    session = FakeSession({"http://probe.test/clear": (200, "Data cleared")})

    assert await clear_records(session, "http://probe.test") == "Data cleared"  # type: ignore[arg-type]


def test_format_table_with_no_records() -> None:
    """Given no records, when formatting, then a placeholder line is returned."""
    assert format_table([]) == "No records collected."


def test_format_table_aligns_columns() -> None:
    """Given records, when formatting, then a header and one row per record are produced."""
    records = [
        CollectedRecord(
            origin="203.0.113.5", platform="TestOS", screen_width=1920, screen_height=1080
        ),
        CollectedRecord(origin="192.0.2.1", platform="X", locales=("de", "en")),
    ]

    lines = format_table(records).splitlines()

    assert len(lines) == 3
    assert lines[0].split() == ["#", "IP", "PLATFORM", "SCREEN", "TIMEZONE", "LANGUAGES"]
    assert lines[1].split()[:4] == ["1", "203.0.113.5", "TestOS", "1920x1080"]
    assert lines[2].split() == ["2", "192.0.2.1", "X", "0x0", "de,en"]
    assert lines[1].index("TestOS") == lines[2].index("X")


def test_parser_requires_command() -> None:
    """Given no sub-command, when parsing, then argparse exits."""
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_parser_defaults() -> None:
    """Given only a command, when parsing, then the default URL is used."""
    args = build_parser().parse_args(["list"])

    assert args.url == "http://localhost:8080"
    assert args.command == "list"
    assert args.json is False


@pytest.mark.asyncio
async def test_run_command_list_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Given list --json, when running, then records are printed as JSON."""
    args = build_parser().parse_args(["--url", "http://probe.test", "list", "--json"])
    session = FakeSession({"http://probe.test/data": (200, SAMPLE_LISTING)})

    exit_code = await run_command(args, session)  # type: ignore[arg-type]

    assert exit_code == EXIT_OK
    assert json.loads(capsys.readouterr().out) == json.loads(SAMPLE_LISTING)


@pytest.mark.asyncio
async def test_run_command_clear(capsys: pytest.CaptureFixture[str]) -> None:
    """Given clear, when running, then the server reply is printed."""
    args = build_parser().parse_args(["--url", "http://probe.test", "clear"])
    session = FakeSession({"http://probe.test/clear": (200, "Data cleared")})

    exit_code = await run_command(args, session)  # type: ignore[arg-type]

    assert exit_code == EXIT_OK
    assert capsys.readouterr().out.strip() == "Data cleared"


@pytest.mark.asyncio
async def test_run_command_http_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a server error, when running, then exit code 1 and an error message."""
    args = build_parser().parse_args(["--url", "http://probe.test", "list"])
    session = FakeSession({"http://probe.test/data": (500, "boom")})

    exit_code = await run_command(args, session)  # type: ignore[arg-type]

    assert exit_code == EXIT_HTTP_ERROR
    assert "HTTP 500" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_run_command_connection_error_exit_code(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an unreachable server, when running, then exit code 2."""
    args = build_parser().parse_args(["--url", "http://probe.test", "clear"])

    exit_code = await run_command(args, FailingSession())  # type: ignore[arg-type]

    assert exit_code == EXIT_CONNECTION_ERROR
    assert "could not reach http://probe.test" in capsys.readouterr().err
