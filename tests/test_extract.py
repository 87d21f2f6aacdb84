from searxbot.agent.tools.visit.extract import (
    TRUNCATION_MARKER,
    extract_article,
    html_to_text,
    normalize_text,
    truncate_text,
)


def test_normalize_text_collapses_blank_lines_and_spaces() -> None:
    raw = "  a  \t b\n\n\n c\n \n d\t\t\n"

    assert normalize_text(raw) == "a b\n c\n d"


def test_normalize_text_handles_crlf_blank_lines() -> None:
    assert normalize_text("first\r\n\r\nsecond") == "first\nsecond"


def test_truncate_text_appends_marker_only_when_longer() -> None:
    assert truncate_text("abcdef", 3) == "abc" + TRUNCATION_MARKER
    assert truncate_text("abc", 3) == "abc"
    assert truncate_text("abcdef", 0) == "abcdef"


def test_html_to_text_separates_blocks() -> None:
    text = normalize_text(html_to_text("<div><p>One</p><p>Two<br>Three</p></div>"))

    assert text.splitlines() == ["One", "Two", "Three"]


def test_extract_article_returns_none_for_empty_document() -> None:
    assert extract_article("") is None


def test_extract_article_returns_none_without_text() -> None:
    assert extract_article("<html><body><div>   </div></body></html>") is None


def test_extract_article_falls_back_to_document_title_and_first_paragraph() -> None:
    html = (
        "<html><head><title>Plain Page</title></head><body><div class='entry-content'>"
        "<p>" + "Readable sentence about gardening and soil. " * 12 + "</p>"
        "<p>" + "Second paragraph on watering schedules for herbs. " * 8 + "</p>"
        "</div></body></html>"
    )

    article = extract_article(html, url="https://garden.example.com/post")

    assert article is not None
    assert article.title == "Plain Page"
    assert article.excerpt is not None
    assert article.excerpt.startswith("Readable sentence about gardening and soil.")
    assert article.byline is None
    assert article.site_name is None
    assert article.lang is None
    assert "watering schedules" in (article.content or "")


def test_extract_article_parses_each_document_once(monkeypatch) -> None:
    from searxbot.agent.tools.visit import extract

    parsed: list[str] = []

    class CountingSoup(extract.BeautifulSoup):
        def __init__(self, markup="", *args, **kwargs):
            parsed.append(markup)
            super().__init__(markup, *args, **kwargs)

    monkeypatch.setattr(extract, "BeautifulSoup", CountingSoup)

    html = (
        "<html><head><title>Soil</title></head><body><div class='entry-content'>"
        "<p>" + "Compost improves soil structure and water retention. " * 10 + "</p>"
        "</div></body></html>"
    )
    article = extract_article(html)

    assert article is not None
    assert article.excerpt is not None
    assert article.excerpt.startswith("Compost improves soil structure")
    assert len(parsed) == 2


def test_extract_article_trims_meta_values() -> None:
    html = (
        "<html lang=' de '><head>"
        "<meta name='author' content='  Max Muster \n'>"
        "<meta property='og:site_name' content='\tGarten Blog '>"
        "</head><body><div class='entry-content'>"
        "<p>" + "Kompost verbessert die Bodenstruktur deutlich. " * 10 + "</p>"
        "</div></body></html>"
    )

    article = extract_article(html)

    assert article is not None
    assert article.byline == "Max Muster"
    assert article.site_name == "Garten Blog"
    assert article.lang == "de"
