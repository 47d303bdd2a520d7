"""
Unit tests for the word tokenizer.
"""

from __future__ import annotations

import pytest

from wordcounter.analysis.models import URL_TOKEN, Token
from wordcounter.analysis.normalizer import URL_SENTINEL, clean_text
from wordcounter.analysis.tokenizer import tokenize


@pytest.mark.unit
class TestTokenize:
    def test_empty_text(self):
        assert tokenize("") == []

    def test_splits_on_whitespace(self):
        assert [t.text for t in tokenize("one two  three")] == ["one", "two", "three"]

    def test_sentinel_kept_as_url_token_with_links(self):
        tokens = tokenize(f"see {URL_SENTINEL} here", include_links=True)

        assert tokens[1] == Token(URL_TOKEN, is_url_placeholder=True)
        assert [t.is_url_placeholder for t in tokens] == [False, True, False]

    def test_sentinel_dropped_without_links(self):
        assert [t.text for t in tokenize(f"see {URL_SENTINEL} here")] == ["see", "here"]

    def test_residue_tokens_are_dropped(self):
        assert [t.text for t in tokenize("Hello --- ... world")] == ["Hello", "world"]

    def test_non_latin_words(self):
        tokens = tokenize(clean_text("Привет, мир!"))
        assert [t.text for t in tokens] == ["Привет", "мир"]
        assert not any(t.is_url_placeholder for t in tokens)
