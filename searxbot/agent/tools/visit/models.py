"""Data models for page visits."""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Literal

VisitOutcomeKind = Literal["article", "raw", "failure"]


@dataclass(slots=True)
class ExtractedArticle:
    """Readable article extracted from an HTML document."""

    title: str | None = None
    content: str | None = None
    excerpt: str | None = None
    byline: str | None = None
    site_name: str | None = None
    lang: str | None = None
    published_time: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "excerpt": self.excerpt,
            "byline": self.byline,
            "siteName": self.site_name,
            "lang": self.lang,
            "publishedTime": self.published_time,
        }


@dataclass(slots=True)
class VisitOutcome:
    """Result of a visit: an article, the raw body, or a failure reason."""

    kind: VisitOutcomeKind
    article: ExtractedArticle | None = None
    raw: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.kind != "failure"

    @classmethod
    def from_article(cls, article: ExtractedArticle) -> VisitOutcome:
        return cls(kind="article", article=article)

    @classmethod
    def from_raw(cls, body: str) -> VisitOutcome:
        return cls(kind="raw", raw=body)

    @classmethod
    def failure(cls, error: str) -> VisitOutcome:
        return cls(kind="failure", error=error)

    def render(self) -> str:
        """Tool result text handed back to the host."""
        if self.kind == "raw":
            return self.raw or ""
        if self.kind == "article" and self.article is not None:
            return json.dumps(self.article.to_dict(), ensure_ascii=False)
        return self.error or ""
