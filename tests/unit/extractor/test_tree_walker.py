"""
Unit tests for the depth-first visible-text walk.
"""

from __future__ import annotations

from unittest.mock import patch

import pytest

from wordcounter.extractor.style import RuleStyleResolver
from wordcounter.extractor.tree_walker import EXCLUDED_TAGS, TreeWalker


class ExplodingResolver:
    def computed_style(self, element):
        raise RuntimeError("no layout")


@pytest.mark.unit
class TestTreeWalker:
    """Traversal rules of the primary extraction strategy."""

    def test_extracts_visible_article_text(self, make_soup, article_html):
        extracted = TreeWalker().extract_text(make_soup(article_html))

        assert extracted.strategy == "tree_walker"
        assert extracted.text == (
            "Counting Words Readers skim pages quickly. Counting visible words helps estimate reading time."
        )
        assert extracted.fragments == 3

    def test_fragments_are_joined_with_single_spaces(self, make_soup):
        soup = make_soup("<body><p>  One  </p><div><span>Two</span>Three</div></body>")
        assert TreeWalker().extract(soup) == "One Two Three"

    def test_display_none_hides_whole_subtree(self, make_soup):
        soup = make_soup(
            """
            <body>
              <p>Shown</p>
              <div style="display:none"><p style="display:block">Inner <b>bold</b></p></div>
            </body>
            """
        )
        assert TreeWalker().extract(soup) == "Shown"

    @pytest.mark.parametrize("tag", ["script", "style", "textarea", "button", "select", "svg", "template", "noscript"])
    def test_excluded_tags(self, make_soup, tag):
        soup = make_soup(f"<body><p>Kept</p><{tag}>Dropped</{tag}></body>")
        assert TreeWalker().extract(soup) == "Kept"

    def test_excluded_tag_list_is_closed(self):
        assert len(EXCLUDED_TAGS) == 44
        assert {"script", "title", "ruby", "rt", "rp"} <= EXCLUDED_TAGS
        assert "a" not in EXCLUDED_TAGS

    def test_comments_are_ignored(self, make_soup):
        soup = make_soup("<body><p>Text<!-- hidden comment --></p></body>")
        assert TreeWalker().extract(soup) == "Text"

    def test_rule_styles_are_honoured(self, make_soup):
        walker = TreeWalker(resolver=RuleStyleResolver([(".modal", "visibility: hidden")]))
        soup = make_soup('<body><p>Page</p><div class="modal"><p>Popup</p></div></body>')

        assert walker.extract(soup) == "Page"

    def test_style_failure_fails_open(self, make_soup):
        walker = TreeWalker(resolver=ExplodingResolver())
        assert walker.extract(make_soup("<body><p>Still counted</p></body>")) == "Still counted"

    def test_deeply_nested_document(self, make_soup):
        depth = 1500
        soup = make_soup("<body>" + "<div>" * depth + "deep" + "</div>" * depth + "</body>")

        assert TreeWalker().extract(soup) == "deep"


@pytest.mark.unit
class TestLinks:
    HTML = """
        <body>
          <p>Read <a href="https://example.com/a">external <b>link</b></a> text.</p>
          <p><a href="www.example.org">www link</a></p>
          <p><a href="//cdn.example.net/x">protocol relative</a></p>
          <p><a href="/about">About us</a> <a href="#top">Top</a> <a>Anchor</a></p>
        </body>
    """

    def test_links_to_other_pages_are_skipped(self, make_soup):
        text = TreeWalker().extract(make_soup(self.HTML))

        assert text == "Read text. About us Top Anchor"

    def test_links_counted_when_enabled(self, make_soup):
        text = TreeWalker(include_links=True).extract(make_soup(self.HTML))

        assert "external link" in text
        assert "www link" in text
        assert "protocol relative" in text

    def test_is_link_text(self, make_soup):
        soup = make_soup('<a href="HTTPS://EXAMPLE.COM"><span>x</span></a><a href="/local"><span>y</span></a>')
        walker = TreeWalker()
        external, local = soup.find_all("span")

        assert walker.is_link_text(external)
        assert not walker.is_link_text(local)
        assert not walker.is_link_text(None)


@pytest.mark.unit
class TestFallbackUse:
    def test_empty_walk_uses_fallback(self, make_soup):
        soup = make_soup("<body><dialog open>Cookie notice text</dialog></body>")

        extracted = TreeWalker().extract_text(soup)

        assert extracted.strategy == "fallback"
        assert extracted.text == "Cookie notice text"

    def test_walk_failure_uses_fallback(self, make_soup):
        soup = make_soup("<body><main><p>Main content</p></main></body>")
        walker = TreeWalker()

        with patch.object(walker, "collect_fragments", side_effect=RuntimeError("broken tree")):
            extracted = walker.extract_text(soup)

        assert extracted.strategy == "fallback"
        assert extracted.text == "Main content"

    def test_nothing_anywhere_gives_blank_text(self, make_soup):
        extracted = TreeWalker().extract_text(make_soup("<body>   </body>"))

        assert extracted.strategy == "fallback"
        assert extracted.is_blank
