"""
Exception hierarchy for wordcounter.

The engine itself never raises for content problems; these exceptions cover
configuration mistakes and the I/O done around the engine by the CLI.
"""

from __future__ import annotations


class WordCounterError(Exception):
    """Base exception for all wordcounter errors."""


class ConfigError(WordCounterError):
    """Raised when a configuration file cannot be read or validated."""


class FetchError(WordCounterError):
    """Raised when a document cannot be fetched over HTTP."""


class RestrictedUrlError(FetchError):
    """Raised for URLs whose scheme or host the counter refuses to read."""
