"""
Statistics Engine - word, character, sentence and timing metrics.

Consumes raw text (page extraction output or a user selection), runs it
through normalization and tokenization and computes the full statistics
bundle. Analysis never raises: unexpected failures are logged and turned into
the all-zero result so callers always receive the same shape.
"""

from __future__ import annotations

import re
from typing import Any, List, Optional

import structlog

from ..observability.metrics import increment
from .frequency import FrequencyRanker
from .models import ExtractionOptions, StatisticsResult, Token
from .normalizer import clean_text
from .tokenizer import tokenize

logger = structlog.get_logger(__name__)

# Terminal punctuation followed by whitespace or the end of the text.
SENTENCE_END_PATTERN = re.compile(r"[.!?。！？]+(?:\s+|\Z)")
PARAGRAPH_BREAK_PATTERN = re.compile(r"\n\s*\n")
WHITESPACE_PATTERN = re.compile(r"\s")


def count_sentences(text: str) -> int:
    if not text:
        return 0
    matches = SENTENCE_END_PATTERN.findall(text)
    if matches:
        return len(matches)
    return 1 if text.strip() else 0


def count_paragraphs(text: str) -> int:
    if not text:
        return 0
    paragraphs = [p for p in PARAGRAPH_BREAK_PATTERN.split(text) if p.strip()]
    return max(len(paragraphs), 1 if text.strip() else 0)


class StatisticsEngine:
    """
    Computes text statistics with a fixed set of options.

    The engine only holds immutable configuration, so a single instance can
    serve any number of calls.
    """

    def __init__(
        self,
        options: Optional[ExtractionOptions] = None,
        ranker: Optional[FrequencyRanker] = None,
    ) -> None:
        self.options = options or ExtractionOptions()
        self.ranker = ranker or FrequencyRanker()

    def tokenize(self, text: str) -> List[Token]:
        return tokenize(clean_text(text, self.options.include_links), self.options.include_links)

    def analyze(self, text: Any) -> StatisticsResult:
        """
        Analyze raw text.

        Args:
            text: Raw text; anything that is not a non-empty string yields the
                all-zero result.

        Returns:
            StatisticsResult for the text
        """
        if not text or not isinstance(text, str):
            return self.empty_result()

        try:
            return self._analyze(text)
        except Exception as e:
            logger.error("Text analysis failed", error=str(e), text_length=len(text))
            increment("analysis_failures")
            return self.empty_result()

    def empty_result(self) -> StatisticsResult:
        return StatisticsResult.empty(with_frequency=self.options.compute_frequency)

    def _analyze(self, text: str) -> StatisticsResult:
        options = self.options
        tokens = self.tokenize(text)
        word_count = len(tokens)

        characters_with_spaces = len(text)
        characters_no_spaces = len(WHITESPACE_PATTERN.sub("", text))

        unique: set[str] = set()
        total_length = 0
        longest_word = ""
        for token in tokens:
            if token.is_url_placeholder:
                continue
            unique.add(token.text.lower())
            total_length += len(token.text)
            if len(token.text) > len(longest_word):
                longest_word = token.text

        avg_word_length = total_length / word_count if word_count > 0 else 0.0
        density = word_count / characters_no_spaces * 100 if characters_no_spaces > 0 else 0.0

        word_frequency = None
        if options.compute_frequency:
            word_frequency = tuple(self.ranker.rank(tokens, options.frequency_top_n))

        return StatisticsResult(
            words=word_count,
            characters_with_spaces=characters_with_spaces,
            characters_no_spaces=characters_no_spaces,
            sentences=count_sentences(text),
            paragraphs=count_paragraphs(text),
            unique_words=len(unique),
            avg_word_length=avg_word_length,
            longest_word=longest_word,
            longest_word_length=len(longest_word),
            reading_time_seconds=word_count / options.reading_speed * 60,
            speaking_time_seconds=word_count / options.speaking_speed * 60,
            density_percent=density,
            word_frequency=word_frequency,
        )
