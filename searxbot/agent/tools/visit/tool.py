"""Page visit tool: fetch a URL and return its readable text."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx

from searxbot.agent.tools.base import Tool
from searxbot.agent.tools.http import fetch, request_failed_message
from searxbot.agent.tools.visit.extract import EXTRACTION_FAILED, extract_article
from searxbot.agent.tools.visit.models import VisitOutcome
from searxbot.agent.tools.visit.safety import (
    BlockedHostError,
    block_private_hosts,
    validate_visit_url,
)
from searxbot.config.schema import VisitConfig


async def visit_page(url: str, *, return_raw: bool, config: VisitConfig) -> VisitOutcome:
    """Fetch one page and return its raw body or extracted article."""
    page = await fetch(
        url,
        timeout=config.timeout,
        headers={"User-Agent": config.user_agent},
        on_request=block_private_hosts if config.block_private_network else None,
    )
    if not page.ok:
        return VisitOutcome.failure(request_failed_message(page))

    if return_raw or config.force_raw:
        return VisitOutcome.from_raw(page.text)

    article = extract_article(
        page.text,
        url=url,
        max_content_length=config.max_content_length,
    )
    if article is None:
        return VisitOutcome.failure(EXTRACTION_FAILED)
    return VisitOutcome.from_article(article)


class VisitTool(Tool):
    """Visit a URL and return the main text content of the page."""

    name = "visit"
    description = (
        "Visits a URL and returns the main text content of the page.\n\n"
        "Parameters:\n"
        "- url: The URL of the website to visit.\n"
        "- returnRaw (optional): Return the raw HTML of the page instead of the main text. "
        "Only use this when the tool misidentifies the main content."
    )
    parameters = {
        "type": "object",
        "properties": {
            "url": {"type": "string", "minLength": 1, "description": "URL to visit"},
            "returnRaw": {
                "type": "boolean",
                "description": "Return the raw page body instead of extracted text",
            },
        },
        "required": ["url"],
    }

    def __init__(
        self,
        visit_config: VisitConfig | Callable[[], VisitConfig] | None = None,
    ):
        self._config_source = visit_config if visit_config is not None else VisitConfig()

    def current_config(self) -> VisitConfig:
        """Read the host configuration; callables are re-evaluated on every call."""
        source = self._config_source
        return source() if callable(source) else source

    async def execute(self, url: str, returnRaw: bool = False, **kwargs: Any) -> str:
        config = self.current_config()
        ok, reason = validate_visit_url(
            url,
            allow_private_network=not config.block_private_network,
        )
        if not ok:
            return f"Error: {reason}"

        try:
            outcome = await visit_page(url.strip(), return_raw=bool(returnRaw), config=config)
        except BlockedHostError as e:
            return f"Error: {e}"
        except httpx.HTTPError as e:
            return f"Error: visit request failed: {e}"
        return outcome.render()
