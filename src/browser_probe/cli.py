"""Operator CLI for listing and clearing records on a running server."""

import argparse
import asyncio
import json
import sys
from collections.abc import Sequence
from typing import Any

import aiohttp

from browser_probe.domain.models import CollectedRecord

DEFAULT_SERVER_URL = "http://localhost:8080"
REQUEST_TIMEOUT_SECONDS = 10

EXIT_OK = 0
EXIT_HTTP_ERROR = 1
EXIT_CONNECTION_ERROR = 2


class AdminRequestError(Exception):
    """Raised when the server answers an admin request with a non-2xx status."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(f"server responded with HTTP {status}: {body.strip()}")
        self.status = status
        self.body = body


async def _get(session: aiohttp.ClientSession, url: str) -> tuple[int, str]:
    async with session.get(url) as response:
        return response.status, await response.text()


async def fetch_records(session: aiohttp.ClientSession, base_url: str) -> list[CollectedRecord]:
    """Fetch every record held by the server."""
    status, text = await _get(session, f"{base_url.rstrip('/')}/data")
    if not 200 <= status < 300:
        raise AdminRequestError(status, text)
    payload = json.loads(text) or []
    return [CollectedRecord.model_validate(item) for item in payload]


async def clear_records(session: aiohttp.ClientSession, base_url: str) -> str:
    """Ask the server to drop every record and return its reply."""
    status, text = await _get(session, f"{base_url.rstrip('/')}/clear")
    if not 200 <= status < 300:
        raise AdminRequestError(status, text)
    return text


def format_table(records: Sequence[CollectedRecord]) -> str:
    """Render records as a fixed-width table, one row per record."""
    if not records:
        return "No records collected."

    header = ("#", "IP", "PLATFORM", "SCREEN", "TIMEZONE", "LANGUAGES")
    rows = [
        (
            str(index),
            record.origin,
            record.platform,
            f"{record.screen_width}x{record.screen_height}",
            record.timezone,
            ",".join(record.locales),
        )
        for index, record in enumerate(records, start=1)
    ]
    table = [header, *rows]
    widths = [max(len(row[col]) for row in table) for col in range(len(header))]
    lines = ["  ".join(cell.ljust(widths[col]) for col, cell in enumerate(row)) for row in table]
    return "\n".join(line.rstrip() for line in lines)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="browser-probe-admin",
        description="List or clear the records collected by a browser-probe server.",
    )
    parser.add_argument(
        "--url",
        default=DEFAULT_SERVER_URL,
        help=f"Base URL of the server (default: {DEFAULT_SERVER_URL})",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    list_parser = subparsers.add_parser("list", help="Show collected records")
    list_parser.add_argument(
        "--json",
        action="store_true",
        help="Print records as JSON instead of a table",
    )

    subparsers.add_parser("clear", help="Drop all collected records")
    return parser


async def run_command(args: argparse.Namespace, session: aiohttp.ClientSession) -> int:
    """Execute the parsed command against the server and return the exit code."""
    try:
        if args.command == "list":
            records = await fetch_records(session, args.url)
            if args.json:
                output: Any = [record.to_json_dict() for record in records]
                print(json.dumps(output, indent=2, ensure_ascii=False))
            else:
                print(format_table(records))
        else:
            print(await clear_records(session, args.url))
    except AdminRequestError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_HTTP_ERROR
    except aiohttp.ClientError as e:
        print(f"Error: could not reach {args.url}: {e}", file=sys.stderr)
        return EXIT_CONNECTION_ERROR
    return EXIT_OK


async def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and run the requested command."""
    args = build_parser().parse_args(argv)
    timeout = aiohttp.ClientTimeout(total=REQUEST_TIMEOUT_SECONDS)
    async with aiohttp.ClientSession(timeout=timeout) as session:
        return await run_command(args, session)


def run() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    run()
