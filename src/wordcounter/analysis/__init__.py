"""
Text analysis pipeline: normalization, tokenization, statistics and
word-frequency ranking.
"""

from .frequency import FrequencyRanker
from .models import URL_TOKEN, AnalysisOutcome, ExtractionOptions, FrequencyEntry, StatisticsResult, Token
from .normalizer import URL_SENTINEL, TextNormalizer, clean_text
from .statistics import StatisticsEngine, count_paragraphs, count_sentences
from .stopwords import STOP_WORDS
from .tokenizer import tokenize

__all__ = [
    "AnalysisOutcome",
    "ExtractionOptions",
    "FrequencyEntry",
    "FrequencyRanker",
    "STOP_WORDS",
    "StatisticsEngine",
    "StatisticsResult",
    "TextNormalizer",
    "Token",
    "URL_SENTINEL",
    "URL_TOKEN",
    "clean_text",
    "count_paragraphs",
    "count_sentences",
    "tokenize",
]
