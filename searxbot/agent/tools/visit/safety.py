"""URL checks for the visit tool."""

from __future__ import annotations

import ipaddress
from urllib.parse import urlparse

import httpx

_LOCAL_HOSTNAMES = {
    "localhost",
    "localhost.localdomain",
    "host.docker.internal",
}


class BlockedHostError(Exception):
    """Raised when a request, including a redirect hop, targets a blocked host."""


async def block_private_hosts(request: httpx.Request) -> None:
    """httpx request hook rejecting private/local targets."""
    host = request.url.host
    if not host or is_private_or_local_host(host):
        raise BlockedHostError(f"Private/local host blocked: {host or 'none'}")


def validate_visit_url(url: str, *, allow_private_network: bool) -> tuple[bool, str]:
    """Validate a URL passed to the visit tool."""
    if not url or not url.strip():
        return False, "url must not be empty"

    try:
        parsed = urlparse(url.strip())
        host = parsed.hostname
    except ValueError as e:
        return False, f"Malformed URL: {e}"

    scheme = (parsed.scheme or "").lower()
    if scheme == "file":
        return False, "file:// URLs are blocked"

    if scheme not in {"http", "https"}:
        return False, f"Only http/https URLs are allowed, got '{scheme or 'none'}'"

    if not host:
        return False, "URL host is required"

    if not allow_private_network and is_private_or_local_host(host):
        return False, f"Private/local host blocked: {host}"

    return True, ""


def is_private_or_local_host(host: str) -> bool:
    """Check whether a host is local/private based on hostname or literal IP."""
    normalized = host.rstrip(".").lower()

    if normalized in _LOCAL_HOSTNAMES or normalized.endswith(".local"):
        return True

    try:
        ip = ipaddress.ip_address(normalized)
    except ValueError:
        return False

    return (
        ip.is_private
        or ip.is_loopback
        or ip.is_link_local
        or ip.is_reserved
        or ip.is_multicast
        or ip.is_unspecified
    )
