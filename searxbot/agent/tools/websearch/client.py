"""Web search client driven by the host search configuration."""

from loguru import logger

from searxbot.agent.tools.websearch.models import SearchOutcome, SearchQuery
from searxbot.agent.tools.websearch.searxng import build_search_url, search_searxng
from searxbot.config.schema import SearchConfig


class WebSearchError(Exception):
    """Raised when the search request cannot be built from configuration."""


class WebSearchClient:
    """Build a SearXNG query from configuration and run it."""

    def __init__(self, config: SearchConfig | None = None):
        self.config = config or SearchConfig()

    async def search(self, query: str) -> SearchOutcome:
        """Search the configured endpoint. Malformed response JSON propagates."""
        search_query = SearchQuery.from_config(query, self.config)
        try:
            url = build_search_url(self.config.base_url, search_query)
        except ValueError as e:
            raise WebSearchError(str(e)) from e

        logger.debug("Searching: {}", url)
        outcome = await search_searxng(
            url=url,
            max_results=search_query.max_results,
            timeout=self.config.timeout,
        )
        if outcome.ok:
            logger.debug("Search '{}' returned {} results", query, len(outcome.hits))
        return outcome
