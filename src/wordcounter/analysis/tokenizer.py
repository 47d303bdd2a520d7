"""
Whitespace tokenizer for normalized text.
"""

from __future__ import annotations

from typing import List

from .models import URL_TOKEN, Token
from .normalizer import URL_SENTINEL, WORD_CHAR_PATTERN


def tokenize(cleaned_text: str, include_links: bool = False) -> List[Token]:
    """Split cleaned text into word tokens.

    The URL sentinel survives only when links are counted, and is emitted as
    a ``[URL]`` placeholder token.
    """
    tokens: List[Token] = []
    if not cleaned_text:
        return tokens

    for word in cleaned_text.split():
        if word == URL_SENTINEL:
            if include_links:
                tokens.append(Token(URL_TOKEN, is_url_placeholder=True))
            continue
        if WORD_CHAR_PATTERN.search(word):
            tokens.append(Token(word))
    return tokens
