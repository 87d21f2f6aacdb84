"""Page visit package."""

from searxbot.agent.tools.visit.extract import (
    EXTRACTION_FAILED,
    TRUNCATION_MARKER,
    extract_article,
    normalize_text,
    truncate_text,
)
from searxbot.agent.tools.visit.models import ExtractedArticle, VisitOutcome
from searxbot.agent.tools.visit.tool import VisitTool, visit_page

__all__ = [
    "EXTRACTION_FAILED",
    "TRUNCATION_MARKER",
    "ExtractedArticle",
    "VisitOutcome",
    "VisitTool",
    "extract_article",
    "normalize_text",
    "truncate_text",
    "visit_page",
]
