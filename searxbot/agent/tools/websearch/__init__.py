"""Web search package."""

from searxbot.agent.tools.websearch.client import WebSearchClient, WebSearchError
from searxbot.agent.tools.websearch.models import SearchHit, SearchOutcome, SearchQuery
from searxbot.agent.tools.websearch.tool import WebSearchTool

__all__ = [
    "SearchHit",
    "SearchOutcome",
    "SearchQuery",
    "WebSearchClient",
    "WebSearchError",
    "WebSearchTool",
]
