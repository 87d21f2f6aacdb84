"""Web search tool backed by SearXNG."""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any

import httpx

from searxbot.agent.tools.base import Tool
from searxbot.agent.tools.websearch.client import WebSearchClient, WebSearchError
from searxbot.config.schema import SearchConfig


class WebSearchTool(Tool):
    """Search the web and return title, summary and URL for each hit."""

    name = "search"
    description = (
        "Searches the web using SearXNG and returns a list of results with title, "
        "summary and url.\n\n"
        "Suggestions:\n"
        "- IMPORTANT: After searching do not respond just based on the summary; use the "
        "visit tool to get the full content of the page.\n"
        "- If the first search does not yield the desired results, try several searches "
        "with different queries."
    )
    parameters = {
        "type": "object",
        "properties": {
            "query": {"type": "string", "minLength": 1, "description": "Search query"},
        },
        "required": ["query"],
    }

    def __init__(
        self,
        search_config: SearchConfig | Callable[[], SearchConfig] | None = None,
    ):
        self._config_source = search_config if search_config is not None else SearchConfig()

    def current_config(self) -> SearchConfig:
        """Read the host configuration; callables are re-evaluated on every call."""
        source = self._config_source
        return source() if callable(source) else source

    async def execute(self, query: str, **kwargs: Any) -> str:
        client = WebSearchClient(self.current_config())
        try:
            outcome = await client.search(query)
        except WebSearchError as e:
            return f"Error: {e}"
        except httpx.HTTPError as e:
            return f"Error: search request failed: {e}"

        if not outcome.ok:
            return outcome.error or "Failed to make request"
        return json.dumps(outcome.to_dict(), ensure_ascii=False)
