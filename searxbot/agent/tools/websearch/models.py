"""Shared web search models."""

from dataclasses import dataclass, field
from typing import Any

from searxbot.config.schema import SafeSearch, SearchConfig


@dataclass(slots=True)
class SearchHit:
    """Normalized search result item."""

    title: str
    url: str
    summary: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {"title": self.title, "summary": self.summary, "url": self.url}


@dataclass(slots=True)
class SearchQuery:
    """Per-call search request built from the host configuration."""

    query: str
    language: str
    engines: list[str] = field(default_factory=list)
    safe_search: SafeSearch = SafeSearch.OFF
    max_results: int = 0

    @classmethod
    def from_config(cls, query: str, config: SearchConfig) -> "SearchQuery":
        return cls(
            query=query,
            language=config.language,
            engines=list(config.engines),
            safe_search=config.safe_search,
            max_results=config.max_results,
        )


@dataclass(slots=True)
class SearchOutcome:
    """Either a list of hits or the reason the request failed."""

    ok: bool
    hits: list[SearchHit] = field(default_factory=list)
    error: str | None = None

    @classmethod
    def success(cls, hits: list[SearchHit]) -> "SearchOutcome":
        return cls(ok=True, hits=hits)

    @classmethod
    def failure(cls, error: str) -> "SearchOutcome":
        return cls(ok=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        return {"results": [hit.to_dict() for hit in self.hits]}
