"""
Data models for the text analysis pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

URL_TOKEN = "[URL]"


@dataclass(slots=True, frozen=True)
class ExtractionOptions:
    """Per-call options for extraction and analysis."""

    include_links: bool = False
    reading_speed: int = 200  # words per minute
    speaking_speed: int = 150  # words per minute
    compute_frequency: bool = False
    frequency_top_n: int = 5

    def __post_init__(self) -> None:
        """Validate the options."""
        if self.reading_speed <= 0 or self.speaking_speed <= 0:
            raise ValueError("Reading and speaking speeds must be positive")
        if self.frequency_top_n <= 0:
            raise ValueError("frequency_top_n must be positive")


@dataclass(slots=True, frozen=True)
class Token:
    """A single word token."""

    text: str
    is_url_placeholder: bool = False


@dataclass(slots=True, frozen=True)
class FrequencyEntry:
    word: str
    count: int


@dataclass(slots=True, frozen=True)
class StatisticsResult:
    """Statistics computed for one piece of text."""

    words: int = 0
    characters_with_spaces: int = 0
    characters_no_spaces: int = 0
    sentences: int = 0
    paragraphs: int = 0
    unique_words: int = 0
    avg_word_length: float = 0.0
    longest_word: str = ""
    longest_word_length: int = 0
    reading_time_seconds: float = 0.0
    speaking_time_seconds: float = 0.0
    density_percent: float = 0.0
    word_frequency: tuple[FrequencyEntry, ...] | None = None

    @classmethod
    def empty(cls, *, with_frequency: bool = False) -> StatisticsResult:
        """Return the all-zero result, with an empty frequency list if requested."""
        return cls(word_frequency=() if with_frequency else None)

    def to_dict(self) -> dict[str, Any]:
        """Render the result in the camelCase shape used by exports."""
        data: dict[str, Any] = {
            "words": self.words,
            "charactersWithSpaces": self.characters_with_spaces,
            "charactersNoSpaces": self.characters_no_spaces,
            "sentences": self.sentences,
            "paragraphs": self.paragraphs,
            "uniqueWords": self.unique_words,
            "avgWordLength": self.avg_word_length,
            "longestWord": self.longest_word,
            "longestWordLength": self.longest_word_length,
            "readingTime": self.reading_time_seconds,
            "speakingTime": self.speaking_time_seconds,
            "density": self.density_percent,
        }
        if self.word_frequency is not None:
            data["wordFrequency"] = [{"word": e.word, "count": e.count} for e in self.word_frequency]
        return data


@dataclass(slots=True, frozen=True)
class AnalysisOutcome:
    """Result of a counting call: statistics, or a single "no content" failure."""

    success: bool
    data: StatisticsResult | None = None
    error: str | None = None
    strategy: str = "none"

    @classmethod
    def ok(cls, data: StatisticsResult, strategy: str) -> AnalysisOutcome:
        return cls(success=True, data=data, strategy=strategy)

    @classmethod
    def failure(cls, error: str) -> AnalysisOutcome:
        return cls(success=False, error=error)

    def to_dict(self) -> dict[str, Any]:
        if self.success and self.data is not None:
            return {"success": True, "strategy": self.strategy, "data": self.data.to_dict()}
        return {"success": False, "error": self.error}
