"""Shared HTTP fetch helper for web tools."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import httpx
from loguru import logger


@dataclass(slots=True)
class FetchedPage:
    """Status and body of a single GET request."""

    url: str
    status_code: int
    reason_phrase: str
    text: str = ""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def status_text(self) -> str:
        return f"{self.status_code} {self.reason_phrase}".strip()


def request_failed_message(page: FetchedPage) -> str:
    """Human-readable failure for a non-2xx response."""
    return f"Failed to make request: {page.status_text}"


async def fetch(
    url: str,
    *,
    timeout: float,
    headers: dict[str, str] | None = None,
    on_request: Callable[[httpx.Request], Awaitable[None]] | None = None,
) -> FetchedPage:
    """Issue one GET and return status plus body. Network errors propagate.

    ``on_request`` runs before every request, redirect hops included, and may
    raise to abort the fetch.
    """
    async with httpx.AsyncClient(
        follow_redirects=True,
        timeout=timeout,
        headers=headers or {},
        event_hooks={"request": [on_request]} if on_request else None,
    ) as client:
        response = await client.get(url)

    page = FetchedPage(
        url=str(url),
        status_code=response.status_code,
        reason_phrase=response.reason_phrase,
    )
    if not page.ok:
        logger.warning("GET {} -> {}", url, page.status_text)
        return page

    page.text = response.text
    logger.debug("GET {} -> {} ({} chars)", url, page.status_code, len(page.text))
    return page
