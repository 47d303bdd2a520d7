"""
Unit tests for the selector-based fallback extractor.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from wordcounter.extractor.fallback import FallbackExtractor, document_root

LONG_PARAGRAPH = "Fallback extraction keeps the readable body of an article. " * 3


@pytest.mark.unit
class TestDocumentRoot:
    def test_prefers_body(self, make_soup):
        soup = make_soup("<html><body><p>x</p></body></html>")
        assert document_root(soup) is soup.body

    def test_document_without_body(self, make_soup):
        soup = make_soup("<p>x</p>")
        assert document_root(soup) is soup


@pytest.mark.unit
class TestFallbackExtractor:
    """Content selectors, clone cleanup and the whole-body fallback."""

    def test_config_defaults(self):
        extractor = FallbackExtractor()

        assert extractor.name == "fallback"
        assert extractor.config["content_selectors"][:3] == ["article", "main", '[role="main"]']
        assert extractor.config["min_content_chars"] == 100

    def test_uses_first_qualifying_selector(self, make_soup):
        soup = make_soup(
            f"""
            <body>
              <div class="sidebar">Sidebar words</div>
              <article><p>{LONG_PARAGRAPH}</p></article>
            </body>
            """
        )

        text = FallbackExtractor().extract(soup)

        assert "readable body" in text
        assert "Sidebar" not in text

    def test_strips_non_content_descendants(self, make_soup):
        soup = make_soup(
            f"""
            <main>
              <header>Site header</header>
              <nav>Menu</nav>
              <p>{LONG_PARAGRAPH}</p>
              <span class="sr-only">Skip link</span>
              <button>Subscribe</button>
              <footer>Copyright</footer>
            </main>
            """
        )

        text = FallbackExtractor().extract(soup)

        for unwanted in ("Site header", "Menu", "Skip link", "Subscribe", "Copyright"):
            assert unwanted not in text
        assert "readable body" in text

    def test_source_document_is_not_modified(self, make_soup):
        soup = make_soup(f"<article><nav>Menu</nav><p>{LONG_PARAGRAPH}</p></article>")

        FallbackExtractor().extract(soup)

        assert soup.find("nav") is not None
        assert soup.nav.get_text() == "Menu"

    def test_combines_every_match_of_a_selector(self, make_soup):
        half = "x" * 60
        soup = make_soup(f"<article>{half}</article><article>{half}</article>")

        text = FallbackExtractor().extract(soup)

        assert text.count(half) == 2

    def test_short_content_falls_back_to_body(self, make_soup):
        soup = make_soup("<body><article>Too short</article><p>Other text</p></body>")

        text = FallbackExtractor().extract(soup)

        assert text == "Too short\n\nOther text"

    def test_threshold_is_configurable(self, make_soup):
        soup = make_soup("<body><article>Short article</article><p>Other text</p></body>")

        assert FallbackExtractor(min_content_chars=5).extract(soup).strip() == "Short article"

    def test_failure_uses_plain_document_text(self, make_soup):
        soup = make_soup("<body><article>Broken article</article></body>")

        with patch.object(FallbackExtractor, "inner_text", side_effect=RuntimeError("boom")):
            text = FallbackExtractor().extract(soup)

        assert text == "Broken article"
