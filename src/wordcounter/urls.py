"""
URL classification helpers.
"""

from __future__ import annotations

import re
from typing import Optional

# Link destinations that point somewhere on the web rather than in-page.
URL_PATTERN = re.compile(r"^(https?://|www\.|//)", re.IGNORECASE)

RESTRICTED_PREFIXES = (
    "chrome://",
    "chrome-extension://",
    "moz-extension://",
    "edge://",
    "about:",
    "file://",
    "view-source:",
    "data:",
    "blob:",
)

RESTRICTED_HOSTS = (
    "chrome.google.com/webstore",
    "addons.mozilla.org",
    "microsoftedge.microsoft.com/addons",
)


def is_url(text: Optional[str]) -> bool:
    """Return True if ``text`` looks like an absolute or protocol-relative URL."""
    if not text:
        return False
    return bool(URL_PATTERN.match(text.strip()))


def is_restricted_url(url: Optional[str]) -> bool:
    """
    Return True for pages the counter must not read.

    Browser-internal schemes, local files, inline data and extension stores
    are all refused. A missing URL is treated as restricted.
    """
    if not url:
        return True
    if url.startswith(RESTRICTED_PREFIXES):
        return True
    return any(host in url for host in RESTRICTED_HOSTS)
