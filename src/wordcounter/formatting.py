"""
Human-readable rendering of statistics: numbers, durations, badge labels and
the plain-text report.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, List, Optional

from .analysis.models import StatisticsResult

if TYPE_CHECKING:
    from .config.config import DisplayConfig


def format_number(value: object) -> str:
    """Format a count with thousands separators; non-numbers render as ``0``."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return "0"
    if isinstance(value, float) and not value.is_integer():
        return f"{value:,}"
    return f"{int(value):,}"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_time(seconds: object) -> str:
    """
    Format a duration in seconds.

    Examples:
        >>> format_time(45.4)
        '45 seconds'
        >>> format_time(120)
        '2 minutes'
        >>> format_time(90)
        '1 minutes 30 seconds'
    """
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)) or seconds < 0:
        return "0 seconds"

    if seconds < 60:
        return f"{_round_half_up(seconds)} seconds"

    minutes = int(seconds // 60)
    remaining = _round_half_up(seconds % 60)
    if remaining == 60:
        minutes += 1
        remaining = 0
    if remaining == 0:
        return f"{minutes} minutes"
    return f"{minutes} minutes {remaining} seconds"


def format_badge_number(value: int) -> str:
    """Short badge label: ``999``, ``12K``, ``3M``."""
    if value >= 1_000_000:
        return f"{value // 1_000_000}M"
    if value >= 1000:
        return f"{value // 1000}K"
    return str(value)


def render_report(stats: StatisticsResult, display: Optional[DisplayConfig] = None) -> str:
    """Render statistics as the plain-text report, honouring display toggles."""
    show_sentences = display.show_sentences if display else False
    show_paragraphs = display.show_paragraphs if display else False
    show_unique = display.show_unique_words if display else False
    show_avg = display.show_avg_word_length if display else True
    show_longest = display.show_longest_word if display else True
    show_reading = display.show_reading_time if display else True
    show_speaking = display.show_speaking_time if display else False
    show_density = display.show_density if display else False

    lines: List[str] = [
        f"Words: {format_number(stats.words)}",
        f"Characters (with spaces): {format_number(stats.characters_with_spaces)}",
        f"Characters (no spaces): {format_number(stats.characters_no_spaces)}",
    ]
    if show_sentences:
        lines.append(f"Sentences: {format_number(stats.sentences)}")
    if show_paragraphs:
        lines.append(f"Paragraphs: {format_number(stats.paragraphs)}")
    if show_unique:
        lines.append(f"Unique words: {format_number(stats.unique_words)}")
    if show_avg:
        lines.append(f"Average word length: {stats.avg_word_length:.1f}")
    if show_longest:
        lines.append(f"Longest word: {stats.longest_word} ({stats.longest_word_length})")
    if show_reading:
        lines.append(f"Reading time: {format_time(stats.reading_time_seconds)}")
    if show_speaking:
        lines.append(f"Speaking time: {format_time(stats.speaking_time_seconds)}")
    if show_density:
        lines.append(f"Word density: {stats.density_percent:.1f}%")

    if stats.word_frequency:
        lines.append("")
        lines.append("Most Frequent Words:")
        for index, entry in enumerate(stats.word_frequency, start=1):
            lines.append(f"  {index}. {entry.word}: {entry.count}")

    return "\n".join(lines)
