"""
wordcounter - visible-text extraction and text statistics.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .analysis.models import AnalysisOutcome, ExtractionOptions, StatisticsResult
from .config import Config, load_config
from .counter import WordCounter

__all__ = [
    "__version__",
    "AnalysisOutcome",
    "Config",
    "ExtractionOptions",
    "StatisticsResult",
    "WordCounter",
    "load_config",
]
