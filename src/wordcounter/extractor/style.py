"""
Style snapshots used by the visibility check.

Parsed HTML carries no layout engine, so "computed style" comes from a
pluggable resolver. The default resolver reads the inline ``style``
attribute; ``RuleStyleResolver`` layers selector-based declarations (for
example captured from a rendered page) underneath the inline style.
"""

from __future__ import annotations

import re
from typing import Dict, Mapping, Optional, Protocol, Sequence, Tuple, runtime_checkable

import soupsieve
from bs4.element import Tag

IMPORTANT_SUFFIX = re.compile(r"\s*!\s*important\s*$", re.IGNORECASE)
LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+))")


def parse_inline_style(style: Optional[str]) -> Dict[str, str]:
    """
    Parse a CSS declaration list into a lowercase property map.

    Later declarations override earlier ones and ``!important`` markers are
    dropped.

    Examples:
        >>> parse_inline_style("display: NONE; width:0px")
        {'display': 'none', 'width': '0px'}
    """
    declarations: Dict[str, str] = {}
    if not style:
        return declarations

    for declaration in style.split(";"):
        name, sep, value = declaration.partition(":")
        if not sep:
            continue
        name = name.strip().lower()
        value = IMPORTANT_SUFFIX.sub("", value).strip().lower()
        if name and value:
            declarations[name] = value
    return declarations


def parse_length(value: Optional[str]) -> Optional[float]:
    """Parse the leading number of a CSS length; None for keywords like ``auto``."""
    if not value:
        return None
    match = LEADING_NUMBER.match(value)
    if not match:
        return None
    return float(match.group(1))


@runtime_checkable
class StyleResolver(Protocol):
    """Supplies the computed style of an element."""

    def computed_style(self, element: Tag) -> Mapping[str, str]:
        """Return lowercase CSS property names mapped to lowercase values."""
        ...


class InlineStyleResolver:
    """Uses the element's inline ``style`` attribute as its computed style."""

    def computed_style(self, element: Tag) -> Mapping[str, str]:
        return parse_inline_style(element.get("style"))


class RuleStyleResolver:
    """
    Resolves style from ``(selector, declarations)`` rules plus inline style.

    Rules are applied in order, so later rules win; inline declarations win
    over every rule.
    """

    def __init__(self, rules: Sequence[Tuple[str, str | Mapping[str, str]]]) -> None:
        self.rules = []
        for selector, declarations in rules:
            if isinstance(declarations, str):
                parsed = parse_inline_style(declarations)
            else:
                parsed = {k.lower(): v.strip().lower() for k, v in declarations.items()}
            self.rules.append((soupsieve.compile(selector), parsed))

    def computed_style(self, element: Tag) -> Mapping[str, str]:
        style: Dict[str, str] = {}
        for pattern, declarations in self.rules:
            if pattern.match(element):
                style.update(declarations)
        style.update(parse_inline_style(element.get("style")))
        return style
