"""
Text normalization applied before tokenization.

Cleaning is deterministic and idempotent: running ``clean`` on its own output
returns the same string.
"""

from __future__ import annotations

import re

URL_SENTINEL = "URLPLACEHOLDER"

# Latin-1 letters and Latin Extended, Cyrillic, Arabic, Bengali, CJK unified
# ideographs, Hiragana, Katakana and Hangul syllables.
SCRIPT_RANGES = (
    "\u00C0-\u024F"
    "\u0400-\u04FF"
    "\u0100-\u017F"
    "\u0600-\u06FF"
    "\u0980-\u09FF"
    "\u4E00-\u9FFF"
    "\u3040-\u309F"
    "\u30A0-\u30FF"
    "\uAC00-\uD7AF"
)

# Word characters are ASCII only; everything else must come from SCRIPT_RANGES.
WORD_CHARS = "A-Za-z0-9_" + SCRIPT_RANGES

WORD_CHAR_PATTERN = re.compile(f"[{WORD_CHARS}]")

DASH_PATTERN = re.compile("[\u2010-\u2014]")
ZERO_WIDTH_PATTERN = re.compile("[\u200B-\u200D\uFEFF]")
HTTP_URL_PATTERN = re.compile(r"https?://\S+", re.IGNORECASE)
WWW_URL_PATTERN = re.compile(r"www\.\S+", re.IGNORECASE)
DISALLOWED_PATTERN = re.compile(f"[^{WORD_CHARS}\\s]")
WHITESPACE_PATTERN = re.compile(r"\s+")


class TextNormalizer:
    """Cleans raw extracted text for tokenization."""

    def __init__(self, include_links: bool = False) -> None:
        self.include_links = include_links

    def clean(self, text: str) -> str:
        return clean_text(text, self.include_links)


def clean_text(text: str, include_links: bool = False) -> str:
    """
    Normalize raw text.

    Dash variants and non-breaking spaces become spaces, zero-width characters
    are dropped, URLs are removed (or replaced by a single sentinel word when
    ``include_links`` is set), punctuation outside the allowed scripts becomes
    whitespace and whitespace runs collapse to one space.
    """
    if not text:
        return ""

    cleaned = DASH_PATTERN.sub(" ", text)
    cleaned = ZERO_WIDTH_PATTERN.sub("", cleaned)
    cleaned = cleaned.replace("\u00A0", " ")

    replacement = f" {URL_SENTINEL} " if include_links else ""
    cleaned = HTTP_URL_PATTERN.sub(replacement, cleaned)
    cleaned = WWW_URL_PATTERN.sub(replacement, cleaned)

    cleaned = DISALLOWED_PATTERN.sub(" ", cleaned)
    return WHITESPACE_PATTERN.sub(" ", cleaned).strip()
