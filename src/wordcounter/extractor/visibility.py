"""
Visibility check for document elements.

An element is hidden when its attributes, class names or style say a reader
cannot see it. Anything that cannot be decided counts as visible.
"""

from __future__ import annotations

import re
from typing import Mapping, Optional

import structlog
from bs4.element import Tag

from .style import InlineStyleResolver, StyleResolver, parse_inline_style, parse_length

logger = structlog.get_logger(__name__)

# Matched as case-insensitive substrings of the element's class attribute.
HIDDEN_CLASSES = (
    "sr-only",
    "visually-hidden",
    "hidden",
    "hide",
    "invisible",
    "screen-reader-text",
    "screen-reader-only",
    "aria-hidden",
)

CLIP_RECT = re.compile(r"^rect\((.*)\)$")
CLIP_SEPARATOR = re.compile(r"[\s,]+")
ZERO_CLIP_PATHS = frozenset({"inset(100%)", "circle(0)"})


def _compact(value: Optional[str]) -> str:
    return "".join((value or "").split())


def _zero_clip(value: Optional[str]) -> bool:
    # rect(0, 0, 0, 0) and the legacy space-separated rect(0 0 0 0) both clip everything.
    match = CLIP_RECT.match((value or "").strip())
    if not match:
        return False
    edges = [edge for edge in CLIP_SEPARATOR.split(match.group(1)) if edge]
    return len(edges) == 4 and all(parse_length(edge) == 0 for edge in edges)


def _hides(style: Mapping[str, str]) -> bool:
    if style.get("display") == "none":
        return True
    if style.get("visibility") == "hidden":
        return True
    opacity = parse_length(style.get("opacity"))
    return opacity is not None and opacity == 0


def _collapsed(style: Mapping[str, str]) -> bool:
    width = parse_length(style.get("width"))
    height = parse_length(style.get("height"))
    if width == 0 and height == 0:
        return True
    if _zero_clip(style.get("clip")):
        return True
    return _compact(style.get("clip-path")) in ZERO_CLIP_PATHS


class VisibilityPredicate:
    """
    Decides whether an element's text is visible to a human reader.

    Evaluated fresh on every call; nothing is cached because the style of a
    live document may change between calls.
    """

    def __init__(self, resolver: Optional[StyleResolver] = None) -> None:
        self.resolver = resolver or InlineStyleResolver()

    def __call__(self, element: Tag) -> bool:
        return self.is_visible(element)

    def is_visible(self, element: Optional[Tag]) -> bool:
        if element is None:
            return False
        try:
            return self._check(element)
        except Exception as e:
            logger.debug("Visibility check failed, treating element as visible", tag=element.name, error=str(e))
            return True

    def _check(self, element: Tag) -> bool:
        if element.has_attr("hidden"):
            return False
        if element.get("aria-hidden") == "true":
            return False

        classes = element.get("class")
        if classes:
            class_name = (" ".join(classes) if isinstance(classes, list) else str(classes)).lower()
            if any(hidden in class_name for hidden in HIDDEN_CLASSES):
                return False

        if _hides(parse_inline_style(element.get("style"))):
            return False

        try:
            computed = self.resolver.computed_style(element)
        except Exception:
            return True

        if _hides(computed):
            return False
        return not _collapsed(computed)


def is_visible(element: Optional[Tag], resolver: Optional[StyleResolver] = None) -> bool:
    """Convenience wrapper around ``VisibilityPredicate``."""
    return VisibilityPredicate(resolver).is_visible(element)
