"""Utilities for extracting server-observed client information from requests.

These helpers only read ``headers`` and ``client`` from the request, so tests
can pass any object exposing those two attributes.
"""

from __future__ import annotations

from typing import Any

from browser_probe.domain.models import ClientInfo

DEFAULT_FORWARDED_HEADER = "X-Forwarded-For"


def strip_port(address: str) -> str:
    """Drop a trailing ``:port`` from a peer address.

    Handles ``host:port``, ``[ipv6]:port`` and bare IPv6 addresses, which are
    returned unchanged because their colons are not port separators.
    """
    if address.startswith("["):
        end = address.find("]")
        return address[1:end] if end != -1 else address
    if address.count(":") == 1:
        return address.split(":", 1)[0]
    return address


def extract_origin(request: Any, forwarded_header: str = DEFAULT_FORWARDED_HEADER) -> str:
    """Return the best-effort client address for a request.

    The forwarding header is used verbatim when present. Otherwise the
    transport peer address is used with any port removed. Returns an empty
    string when neither is available.
    """
    forwarded = request.headers.get(forwarded_header)
    if forwarded:
        return str(forwarded)

    client = request.client
    if client and client.host:
        return strip_port(str(client.host))
    return ""


def get_client_info(request: Any, forwarded_header: str = DEFAULT_FORWARDED_HEADER) -> ClientInfo:
    """Extract origin, user agent and referrer from a request.

    Missing headers become empty strings.
    """
    return ClientInfo(
        origin=extract_origin(request, forwarded_header),
        agent=request.headers.get("User-Agent") or "",
        referrer=request.headers.get("Referer") or "",
    )
