"""
Rendered-text approximation for parsed HTML.

``inner_text`` mimics what a browser's ``innerText`` returns: block elements
start new lines, paragraphs and headings are separated by a blank line,
``<br>`` breaks a line, inline whitespace collapses to single spaces and
elements hidden with ``display: none`` (or ``hidden``) are skipped.
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple, Union

from bs4.element import NavigableString, PageElement, PreformattedString, Tag

from .style import parse_inline_style

BLOCK_TAGS = frozenset(
    {
        "address",
        "article",
        "aside",
        "blockquote",
        "body",
        "caption",
        "dd",
        "details",
        "dialog",
        "div",
        "dl",
        "dt",
        "fieldset",
        "figcaption",
        "figure",
        "footer",
        "form",
        "header",
        "hr",
        "html",
        "li",
        "main",
        "nav",
        "ol",
        "pre",
        "section",
        "summary",
        "table",
        "tbody",
        "tfoot",
        "thead",
        "tr",
        "ul",
    }
)
PARAGRAPH_TAGS = frozenset({"p", "h1", "h2", "h3", "h4", "h5", "h6"})
CELL_TAGS = frozenset({"td", "th"})

# Never rendered as text.
UNRENDERED_TAGS = frozenset({"head", "script", "style", "noscript", "template", "title", "meta", "link"})

LINE_BREAK = "\n"
WHITESPACE_RUN = re.compile(r"\s+")

Chunk = Union[str, int]


def _required_breaks(name: str) -> int:
    if name in PARAGRAPH_TAGS:
        return 2
    if name in BLOCK_TAGS:
        return 1
    return 0


def _not_rendered(element: Tag) -> bool:
    # innerText skips display:none boxes; the hidden attribute implies one.
    if element.has_attr("hidden"):
        return True
    return parse_inline_style(element.get("style")).get("display") == "none"


def _collect(element: Tag) -> List[Chunk]:
    chunks: List[Chunk] = []
    stack: List[Tuple[PageElement, bool]] = [(element, False)]

    while stack:
        node, closing = stack.pop()
        if closing:
            if not isinstance(node, Tag):
                continue
            if node.name in CELL_TAGS:
                chunks.append(" ")
            else:
                chunks.append(_required_breaks(node.name))
            continue

        if isinstance(node, PreformattedString):
            continue
        if isinstance(node, NavigableString):
            chunks.append(WHITESPACE_RUN.sub(" ", str(node)))
            continue
        if not isinstance(node, Tag) or node.name in UNRENDERED_TAGS:
            continue
        if _not_rendered(node):
            continue
        if node.name == "br":
            chunks.append(LINE_BREAK)
            continue

        breaks = _required_breaks(node.name)
        if breaks:
            chunks.append(breaks)
        stack.append((node, True))
        stack.extend((child, False) for child in reversed(node.contents))

    return chunks


def _assemble(chunks: List[Chunk]) -> str:
    out: List[str] = []
    pending = 0
    for chunk in chunks:
        if isinstance(chunk, int):
            if out:
                pending = max(pending, chunk)
            continue
        if chunk == LINE_BREAK:
            out.append(LINE_BREAK * max(pending, 1))
            pending = 0
            continue
        if not chunk.strip():
            if pending or not out or out[-1].endswith((" ", LINE_BREAK)):
                continue
            out.append(" ")
            continue
        if pending:
            out.append(LINE_BREAK * pending)
            pending = 0
        out.append(chunk)

    lines = [" ".join(line.split()) for line in "".join(out).split(LINE_BREAK)]
    return LINE_BREAK.join(lines).strip()


def inner_text(element: Optional[Tag]) -> str:
    """Return the rendered text of ``element``, or "" for a missing element."""
    if element is None:
        return ""
    return _assemble(_collect(element))
