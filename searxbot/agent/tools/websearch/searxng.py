"""SearXNG search API adapter."""

import json
from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from searxbot.agent.tools.http import fetch, request_failed_message
from searxbot.agent.tools.websearch.models import SearchHit, SearchOutcome, SearchQuery


def build_search_url(base_url: str, search_query: SearchQuery) -> str:
    """Append query parameters to the configured endpoint, keeping its own query string."""
    parts = urlsplit(base_url.strip())
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"invalid search base URL: {base_url!r}")

    params = urlencode(
        [
            ("q", search_query.query),
            ("engines", ",".join(search_query.engines)),
            ("language", search_query.language),
            ("format", "json"),
            ("safesearch", str(search_query.safe_search.level)),
        ],
        quote_via=quote,
    )
    query = f"{parts.query}&{params}" if parts.query else params
    return urlunsplit((parts.scheme, parts.netloc, parts.path, query, parts.fragment))


def parse_results(body: str, max_results: int) -> list[SearchHit]:
    """Map SearXNG JSON results to hits. Malformed JSON raises."""
    results = json.loads(body).get("results") or []
    if max_results > 0:
        results = results[:max_results]
    return [
        SearchHit(
            title=item.get("title", ""),
            url=item.get("url", ""),
            summary=item.get("content", ""),
        )
        for item in results
    ]


async def search_searxng(
    *,
    url: str,
    max_results: int,
    timeout: float,
) -> SearchOutcome:
    """Search with a SearXNG instance and normalize results."""
    page = await fetch(url, timeout=timeout, headers={"Accept": "application/json"})
    if not page.ok:
        return SearchOutcome.failure(request_failed_message(page))
    return SearchOutcome.success(parse_results(page.text, max_results))
