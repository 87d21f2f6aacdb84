"""Readable article extraction built on readability-lxml."""

from __future__ import annotations

import re

from bs4 import BeautifulSoup
from loguru import logger
from lxml.etree import ParserError
from readability import Document
from readability.readability import Unparseable

from searxbot.agent.tools.visit.models import ExtractedArticle

EXTRACTION_FAILED = "Failed to extract readable content."
TRUNCATION_MARKER = "\n[Content truncated]"

_BLANK_LINES_RE = re.compile(r"\n\s*\n")
_HORIZONTAL_WS_RE = re.compile(r"[^\S\n]+")

_BLOCK_TAGS = (
    "p",
    "div",
    "section",
    "article",
    "li",
    "tr",
    "pre",
    "blockquote",
    "h1",
    "h2",
    "h3",
    "h4",
    "h5",
    "h6",
)

_TITLE_KEYS = ("og:title", "twitter:title", "dc:title", "dcterm:title", "parsely-title")
_EXCERPT_KEYS = ("description", "og:description", "twitter:description", "dc:description")
_BYLINE_KEYS = ("author", "dc:creator", "dcterm:creator", "parsely-author", "article:author")
_SITE_NAME_KEYS = ("og:site_name",)
_PUBLISHED_KEYS = ("article:published_time", "parsely-pub-date", "date", "dc:date")


def normalize_text(text: str) -> str:
    """Collapse blank-line runs to one newline and horizontal whitespace to one space."""
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _BLANK_LINES_RE.sub("\n", text)
    text = _HORIZONTAL_WS_RE.sub(" ", text)
    return text.strip()


def truncate_text(text: str, max_length: int) -> str:
    """Cut to max_length characters and append the marker; 0 means unlimited."""
    if max_length <= 0 or len(text) <= max_length:
        return text
    return text[:max_length] + TRUNCATION_MARKER


def html_to_text(fragment: str | BeautifulSoup) -> str:
    """Text of an HTML fragment with block elements on their own lines. Mutates a passed soup."""
    soup = fragment if isinstance(fragment, BeautifulSoup) else BeautifulSoup(fragment, "lxml")
    for br in soup.find_all("br"):
        br.replace_with("\n")
    for tag in soup.find_all(_BLOCK_TAGS):
        tag.append("\n")
    return soup.get_text()


def _collect_meta(soup: BeautifulSoup) -> dict[str, str]:
    values: dict[str, str] = {}
    for meta in soup.find_all("meta"):
        content = meta.get("content")
        if not content or not content.strip():
            continue
        for attr in ("property", "name", "itemprop"):
            key = meta.get(attr)
            if key:
                values.setdefault(key.strip().lower(), content.strip())
    return values


def _first(values: dict[str, str], keys: tuple[str, ...]) -> str | None:
    for key in keys:
        value = values.get(key)
        if value:
            return value
    return None


def _first_paragraph(soup: BeautifulSoup) -> str | None:
    for p in soup.find_all("p"):
        text = normalize_text(p.get_text())
        if text:
            return text
    return None


def extract_article(
    html: str,
    *,
    url: str | None = None,
    max_content_length: int = 0,
) -> ExtractedArticle | None:
    """Run readability over the document. Returns None when no article is found."""
    try:
        doc = Document(html, url=url)
        summary = doc.summary(html_partial=True)
        fallback_title = doc.short_title()
    except (Unparseable, ParserError) as e:
        logger.warning("Readability could not parse {}: {}", url or "document", e)
        return None

    summary_soup = BeautifulSoup(summary, "lxml")
    first_paragraph = _first_paragraph(summary_soup)
    text = normalize_text(html_to_text(summary_soup))
    if not text:
        logger.warning("No readable content found in {}", url or "document")
        return None

    page = BeautifulSoup(html, "lxml")
    meta = _collect_meta(page)
    lang = page.html.get("lang") if page.html else None

    article = ExtractedArticle(
        title=_first(meta, _TITLE_KEYS) or fallback_title or None,
        content=truncate_text(text, max_content_length),
        excerpt=_first(meta, _EXCERPT_KEYS) or first_paragraph,
        byline=_first(meta, _BYLINE_KEYS),
        site_name=_first(meta, _SITE_NAME_KEYS),
        lang=lang.strip() if lang else None,
        published_time=_first(meta, _PUBLISHED_KEYS),
    )
    logger.debug("Extracted {} chars from {}", len(text), url or "document")
    return article
