"""
HTTP retrieval of documents for the command line.
"""

from __future__ import annotations

from typing import Optional

import httpx
import structlog

from .exceptions import FetchError, RestrictedUrlError
from .urls import is_restricted_url

logger = structlog.get_logger(__name__)

DEFAULT_USER_AGENT = "wordcounter/0.1 (+text statistics)"


def fetch_html(
    url: str,
    *,
    timeout: float = 30.0,
    user_agent: str = DEFAULT_USER_AGENT,
    client: Optional[httpx.Client] = None,
) -> str:
    """
    Fetch a page and return its decoded body.

    Args:
        url: http(s) URL to read
        timeout: Request timeout in seconds
        user_agent: User-Agent header value
        client: Optional client to reuse (tests inject a mock transport here)

    Raises:
        RestrictedUrlError: If the URL is one the counter refuses to read
        FetchError: On timeouts, transport errors or non-2xx responses
    """
    if is_restricted_url(url) or not url.lower().startswith(("http://", "https://")):
        raise RestrictedUrlError(f"Cannot count words on this page: {url}")

    owns_client = client is None
    http = client or httpx.Client(timeout=timeout, follow_redirects=True)
    try:
        response = http.get(url, headers={"User-Agent": user_agent})
        response.raise_for_status()
        logger.debug("Fetched document", url=url, status=response.status_code, size=len(response.content))
        return response.text
    except httpx.TimeoutException as e:
        raise FetchError(f"Timeout fetching {url}: {e}") from e
    except httpx.HTTPStatusError as e:
        raise FetchError(f"HTTP {e.response.status_code} from {url}") from e
    except httpx.HTTPError as e:
        raise FetchError(f"Network error fetching {url}: {e}") from e
    finally:
        if owns_client:
            http.close()
