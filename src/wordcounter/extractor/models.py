"""
Data models for extraction results.
"""

from __future__ import annotations

from dataclasses import dataclass

STRATEGIES = ("tree_walker", "fallback", "document_text", "selection", "none")


@dataclass(slots=True, frozen=True)
class ExtractedText:
    """Raw text pulled from a document, with the strategy that produced it."""

    text: str
    strategy: str
    fragments: int = 0

    def __post_init__(self) -> None:
        """Validate the result."""
        if self.strategy not in STRATEGIES:
            raise ValueError(f"Unknown extraction strategy: {self.strategy}")

    @property
    def is_blank(self) -> bool:
        return not self.text or not self.text.strip()
