"""
End-to-end tests: HTML document through extraction, normalization and
statistics.
"""

from __future__ import annotations

import html

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from wordcounter import ExtractionOptions, WordCounter
from wordcounter.extractor import RuleStyleResolver

WORDS = st.text(alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789", min_size=1, max_size=12)


@pytest.mark.integration
class TestExtractionPipeline:
    @settings(max_examples=50, deadline=None)
    @given(st.lists(st.lists(WORDS, min_size=1, max_size=8), min_size=1, max_size=6))
    def test_visible_ascii_words_are_counted_exactly(self, paragraphs):
        body = "".join(f"<p>{html.escape(' '.join(words))}</p>" for words in paragraphs)

        outcome = WordCounter().count_page(f"<html><body>{body}</body></html>")

        assert outcome.success
        assert outcome.data.words == sum(len(words) for words in paragraphs)

    def test_realistic_page(self):
        page = """
        <html>
          <head><title>News</title><script>track()</script></head>
          <body>
            <header><a href="https://example.com/">Example News</a></header>
            <main>
              <h1>Local library opens new wing</h1>
              <p>The library's new wing adds reading rooms and a café.</p>
              <p class="visually-hidden">Skip to navigation</p>
              <figure><img src="wing.jpg" alt="New wing"><figcaption>Photo by staff</figcaption></figure>
              <div class="cookie-banner"><p>We use cookies</p><button>Accept</button></div>
              <p>Read more at <a href="https://example.com/library">the library site</a>.</p>
            </main>
            <footer><a href="/privacy">Privacy</a></footer>
          </body>
        </html>
        """
        counter = WordCounter(
            ExtractionOptions(compute_frequency=True, frequency_top_n=3),
            resolver=RuleStyleResolver([(".cookie-banner", "display: none")]),
        )

        outcome = counter.count_page(page)

        assert outcome.strategy == "tree_walker"
        stats = outcome.data
        # Local library opens new wing / The library s new wing adds reading rooms and a café
        # Photo by staff / Read more at / Privacy
        assert stats.words == 5 + 11 + 3 + 3 + 1
        assert stats.longest_word == "library"
        assert [entry.word for entry in stats.word_frequency] == ["library", "new", "wing"]
        assert stats.word_frequency[0].count == 2

    def test_selection_and_page_agree_on_plain_text(self):
        counter = WordCounter()
        text = "Plain words in one paragraph."

        page = counter.count_page(f"<body><p>{text}</p></body>").data
        selection = counter.count_selection(text)

        assert page == selection
