"""
Word-frequency ranking over content words.
"""

from __future__ import annotations

import re
from collections import Counter
from typing import AbstractSet, Iterable, List

from .models import FrequencyEntry, Token
from .stopwords import STOP_WORDS

MIN_WORD_LENGTH = 3
DIGITS_ONLY = re.compile(r"[0-9]+")


class FrequencyRanker:
    """Ranks the most frequent content words of a token stream."""

    def __init__(self, stop_words: AbstractSet[str] = STOP_WORDS) -> None:
        self.stop_words = stop_words

    def is_content_word(self, word: str) -> bool:
        if len(word) < MIN_WORD_LENGTH:
            return False
        if DIGITS_ONLY.fullmatch(word):
            return False
        return word not in self.stop_words

    def rank(self, tokens: Iterable[Token], top_n: int = 5) -> List[FrequencyEntry]:
        """
        Count lowercased content words and return the ``top_n`` most frequent.

        Ties keep first-seen order: ``Counter`` preserves insertion order and
        ``sorted`` is stable even with ``reverse=True``.
        """
        counts: Counter[str] = Counter()
        for token in tokens:
            if token.is_url_placeholder:
                continue
            word = token.text.lower()
            if self.is_content_word(word):
                counts[word] += 1

        ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
        return [FrequencyEntry(word=word, count=count) for word, count in ranked[:top_n]]
