"""
Word counter facade.

Two entry paths share one analysis pipeline:

* page counting parses (or receives) a document, extracts its visible text
  and analyzes it, reporting an explicit failure when no readable content
  exists at all;
* selection counting analyzes a user-selected text fragment directly.
"""

from __future__ import annotations

from typing import Optional, Union

import structlog
from bs4 import BeautifulSoup
from bs4.element import Tag

from .analysis.models import AnalysisOutcome, ExtractionOptions, StatisticsResult
from .analysis.statistics import StatisticsEngine
from .extractor.fallback import FallbackExtractor, document_root
from .extractor.models import ExtractedText
from .extractor.style import StyleResolver
from .extractor.text import inner_text
from .extractor.tree_walker import TreeWalker
from .observability.metrics import increment, timed

logger = structlog.get_logger(__name__)

NO_CONTENT_MESSAGE = "No readable content found on this page"
DEFAULT_ERROR_MESSAGE = "Error counting content"


class WordCounter:
    """
    Counts words and related statistics for documents and text selections.

    Holds only immutable configuration; every call works on its own data.
    """

    def __init__(
        self,
        options: Optional[ExtractionOptions] = None,
        *,
        resolver: Optional[StyleResolver] = None,
        parser: str = "html.parser",
        min_fallback_chars: int = 100,
        selection_enabled: bool = True,
    ) -> None:
        self.options = options or ExtractionOptions()
        self.parser = parser
        self.selection_enabled = selection_enabled
        self.walker = TreeWalker(
            include_links=self.options.include_links,
            resolver=resolver,
            fallback=FallbackExtractor(min_content_chars=min_fallback_chars),
        )
        self.engine = StatisticsEngine(self.options)

    @classmethod
    def from_config(cls, config, resolver: Optional[StyleResolver] = None) -> WordCounter:
        """Build a counter from a ``wordcounter.config.Config`` snapshot."""
        return cls(
            config.counter.to_options(),
            resolver=resolver,
            parser=config.extraction.parser,
            min_fallback_chars=config.extraction.min_fallback_chars,
            selection_enabled=config.counter.selective_counter,
        )

    def parse(self, html: str) -> BeautifulSoup:
        return BeautifulSoup(html, self.parser)

    def extract(self, document: Union[str, Tag]) -> ExtractedText:
        """Extract the readable text of a document, trying every strategy."""
        soup = self.parse(document) if isinstance(document, str) else document
        extracted = self.walker.extract_text(soup)
        if extracted.is_blank:
            root = document_root(soup)
            extracted = ExtractedText(inner_text(root) or root.get_text(), strategy="document_text")
        return extracted

    def count_page(self, document: Union[str, Tag]) -> AnalysisOutcome:
        """
        Count a whole document.

        Args:
            document: HTML markup or an already parsed document

        Returns:
            AnalysisOutcome with statistics, or a failure when the document
            has no readable content
        """
        try:
            with timed("extraction_duration_seconds"):
                extracted = self.extract(document)
                if extracted.is_blank:
                    increment("no_content")
                    logger.info("No readable content found")
                    return AnalysisOutcome.failure(NO_CONTENT_MESSAGE)

                stats = self.engine.analyze(extracted.text)
        except Exception as e:
            logger.error("Error analyzing document", error=str(e))
            return AnalysisOutcome.failure(str(e) or DEFAULT_ERROR_MESSAGE)

        increment("extractions", strategy=extracted.strategy)
        logger.debug(
            "Document counted",
            strategy=extracted.strategy,
            fragments=extracted.fragments,
            words=stats.words,
        )
        return AnalysisOutcome.ok(stats, extracted.strategy)

    def count_text(self, text: object) -> StatisticsResult:
        """Analyze a text fragment directly, bypassing extraction."""
        return self.engine.analyze(text)

    def count_selection(self, selection: Optional[str]) -> Optional[StatisticsResult]:
        """
        Analyze a user selection.

        Returns None when selection counting is disabled, the selection is
        blank, or it contains no countable words.
        """
        if not self.selection_enabled or not isinstance(selection, str):
            return None
        text = selection.strip()
        if not text:
            return None

        stats = self.engine.analyze(text)
        if stats.words == 0:
            return None
        increment("extractions", strategy="selection")
        return stats
