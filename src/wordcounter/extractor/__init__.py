"""
Visible-text extraction from parsed HTML documents.

Two strategies, tried in order:
1. TreeWalker - depth-first walk keeping only visible, non-link content text
2. FallbackExtractor - main-content selectors with rendered-text approximation

Visibility is decided by VisibilityPredicate from attributes, class names and
a style snapshot supplied by a StyleResolver.
"""

from .fallback import FallbackExtractor, document_root
from .models import ExtractedText
from .style import InlineStyleResolver, RuleStyleResolver, StyleResolver, parse_inline_style
from .text import inner_text
from .tree_walker import EXCLUDED_TAGS, TreeWalker
from .visibility import HIDDEN_CLASSES, VisibilityPredicate, is_visible

__all__ = [
    "EXCLUDED_TAGS",
    "ExtractedText",
    "FallbackExtractor",
    "HIDDEN_CLASSES",
    "InlineStyleResolver",
    "RuleStyleResolver",
    "StyleResolver",
    "TreeWalker",
    "VisibilityPredicate",
    "document_root",
    "inner_text",
    "is_visible",
    "parse_inline_style",
]
