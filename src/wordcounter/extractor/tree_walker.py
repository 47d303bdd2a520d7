"""
Depth-first visible-text extraction.

Walks the document in pre-order, skipping non-content elements, hidden
subtrees and (unless links are counted) hyperlinks to other pages. The walk
is iterative so deeply nested documents cannot exhaust the interpreter stack.
"""

from __future__ import annotations

from typing import List, Optional

import structlog
from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from ..urls import is_url
from .fallback import FallbackExtractor, document_root
from .models import ExtractedText
from .style import StyleResolver
from .visibility import VisibilityPredicate

logger = structlog.get_logger(__name__)

# Elements whose text never counts, whatever their visibility.
EXCLUDED_TAGS = frozenset(
    {
        "script",
        "style",
        "noscript",
        "iframe",
        "svg",
        "math",
        "canvas",
        "video",
        "audio",
        "object",
        "embed",
        "applet",
        "map",
        "area",
        "base",
        "basefont",
        "bgsound",
        "blink",
        "button",
        "command",
        "datalist",
        "dialog",
        "frame",
        "frameset",
        "head",
        "input",
        "keygen",
        "link",
        "meta",
        "meter",
        "noframes",
        "optgroup",
        "option",
        "param",
        "progress",
        "rp",
        "rt",
        "ruby",
        "select",
        "source",
        "template",
        "textarea",
        "title",
        "track",
    }
)


class TreeWalker:
    """Collects visible text fragments from a parsed document."""

    name = "tree_walker"

    def __init__(
        self,
        include_links: bool = False,
        resolver: Optional[StyleResolver] = None,
        fallback: Optional[FallbackExtractor] = None,
    ) -> None:
        self.include_links = include_links
        self.visibility = VisibilityPredicate(resolver)
        self.fallback = fallback or FallbackExtractor()

    def extract(self, document: Tag) -> str:
        return self.extract_text(document).text

    def extract_text(self, document: Tag) -> ExtractedText:
        """
        Extract visible text, falling back to content selectors if needed.

        Args:
            document: Parsed document; the walk starts at its ``<body>``

        Returns:
            ExtractedText naming the strategy that produced the text
        """
        root = document_root(document)
        try:
            fragments = self.collect_fragments(root)
        except Exception as e:
            logger.warning("Tree walk failed, using fallback extraction", error=str(e))
            return ExtractedText(self.fallback.extract(document), strategy=self.fallback.name)

        if not fragments:
            logger.debug("Tree walk found no text, using fallback extraction")
            return ExtractedText(self.fallback.extract(document), strategy=self.fallback.name)

        return ExtractedText(" ".join(fragments), strategy=self.name, fragments=len(fragments))

    def collect_fragments(self, root: Tag) -> List[str]:
        fragments: List[str] = []
        stack: List[PageElement] = [root]

        while stack:
            node = stack.pop()

            if isinstance(node, PreformattedString):
                continue
            if isinstance(node, NavigableString):
                text = node.strip()
                if text and self._counts_text_of(node.parent, root):
                    fragments.append(text)
                continue
            if not isinstance(node, Tag):
                continue

            if node.name in EXCLUDED_TAGS:
                continue
            if not self.visibility.is_visible(node):
                continue
            if self._is_excluded_link(node):
                continue

            stack.extend(reversed(node.contents))

        return fragments

    def _counts_text_of(self, parent: Optional[Tag], root: Tag) -> bool:
        if parent is None or not self.visibility.is_visible(parent):
            return False
        return self.include_links or not self.is_link_text(parent, root)

    def _is_excluded_link(self, element: Tag) -> bool:
        return not self.include_links and element.name == "a" and is_url(element.get("href"))

    def is_link_text(self, element: Optional[Tag], root: Optional[Tag] = None) -> bool:
        """True if ``element`` sits inside a hyperlink to another page, up to ``root``."""
        current = element
        while current is not None and current is not root:
            if current.name == "a" and is_url(current.get("href")):
                return True
            current = current.parent
        return False

