"""
Selector-based fallback extractor.

Used when the tree walk fails or finds nothing: looks for common main-content
containers and returns their rendered text with navigation, hidden and
form-control descendants stripped.
"""

from __future__ import annotations

import copy
from typing import Any, Dict

import structlog
from bs4.element import Tag

from .text import inner_text

logger = structlog.get_logger(__name__)


def document_root(document: Tag) -> Tag:
    """Return the ``<body>`` of a document, or the document itself when it has none."""
    body = document.find("body")
    return body if isinstance(body, Tag) else document


class FallbackExtractor:
    """Main-content extractor used as a last resort."""

    name = "fallback"

    def __init__(self, min_content_chars: int = 100) -> None:
        self.config: Dict[str, Any] = {
            "content_selectors": [
                "article",
                "main",
                '[role="main"]',
                ".content",
                ".post-content",
                ".article-content",
                ".entry-content",
                ".post-body",
                "#content",
                "#main-content",
                ".main-content",
            ],
            "remove_selector": (
                "script, style, noscript, iframe, svg, canvas, video, audio, "
                'nav, header, footer, aside, [role="navigation"], [role="banner"], '
                '[role="complementary"], [aria-hidden="true"], .hidden, .hide, '
                ".sr-only, .visually-hidden, button, input, select, textarea"
            ),
            "min_content_chars": min_content_chars,
        }

    def extract(self, document: Tag) -> str:
        """Extract text from the first content container with enough text.

        Every element matching a selector contributes; the first selector whose
        combined text is longer than ``min_content_chars`` wins. Otherwise the
        rendered text of the whole body is returned.

        Args:
            document: Parsed document (or any subtree) to extract from

        Returns:
            Extracted text, possibly empty
        """
        root = document_root(document)
        try:
            for selector in self.config["content_selectors"]:
                elements = document.select(selector)
                if not elements:
                    continue
                text = "".join(" " + self.inner_text(element) for element in elements)
                if len(text.strip()) > self.config["min_content_chars"]:
                    logger.debug("Fallback selector matched", selector=selector, elements=len(elements))
                    return text

            return self.inner_text(root)
        except Exception as e:
            logger.warning("Fallback extraction failed", error=str(e))
            return root.get_text() or ""

    def inner_text(self, element: Tag) -> str:
        """Rendered text of a throwaway clone with non-content descendants removed."""
        try:
            clone = copy.copy(element)
            for unwanted in clone.select(self.config["remove_selector"]):
                if not unwanted.decomposed:
                    unwanted.decompose()
            return inner_text(clone)
        except Exception as e:
            logger.debug("Clone cleanup failed, using element text", tag=element.name, error=str(e))
            return inner_text(element)
