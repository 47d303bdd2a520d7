"""
Test configuration for wordcounter.

Provides parsed-document fixtures and shared options for the unit and
integration suites.
"""

from __future__ import annotations

import textwrap
from typing import Callable

import pytest
from bs4 import BeautifulSoup

from wordcounter.analysis.models import ExtractionOptions
from wordcounter.config import Config

# ============================================================================
# Pytest Configuration
# ============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Tests spanning extraction and analysis")


# ============================================================================
# Document Fixtures
# ============================================================================


@pytest.fixture
def make_soup() -> Callable[[str], BeautifulSoup]:
    """Parse dedented HTML with the default parser."""

    def _make(html: str) -> BeautifulSoup:
        return BeautifulSoup(textwrap.dedent(html), "html.parser")

    return _make


@pytest.fixture
def article_html() -> str:
    """A page with navigation, hidden content, scripts and an article."""
    return textwrap.dedent(
        """
        <html>
          <head><title>Sample Article</title><style>.x { color: red }</style></head>
          <body>
            <nav><a href="https://example.com/home">Home</a></nav>
            <article>
              <h1>Counting Words</h1>
              <p>Readers skim pages quickly.</p>
              <p>Counting visible words helps estimate reading time.</p>
              <div style="display:none">Secret hidden text</div>
              <span class="sr-only">Screen reader hint</span>
            </article>
            <script>var ignored = "script text";</script>
          </body>
        </html>
        """
    )


@pytest.fixture
def default_options() -> ExtractionOptions:
    return ExtractionOptions()


@pytest.fixture
def frequency_options() -> ExtractionOptions:
    return ExtractionOptions(compute_frequency=True, frequency_top_n=3)


@pytest.fixture
def default_config() -> Config:
    """Configuration with defaults only (no file, no environment)."""
    return Config.model_validate({})
