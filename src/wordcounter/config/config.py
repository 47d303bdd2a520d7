"""
Configuration management for wordcounter using Pydantic.

Configuration is loaded once into an immutable snapshot and passed into each
counting call; nothing in the engine reads global settings.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordcounter.analysis.models import ExtractionOptions
from wordcounter.exceptions import ConfigError

# --- Setup Logging ---
log = logging.getLogger(__name__)

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}

# --- Nested Configuration Models ---


class CounterSettings(BaseModel):
    """User-facing counter options."""

    model_config = ConfigDict(frozen=True)

    include_links: bool = Field(default=False, description="Count link text, with URLs counted as one [URL] word.")
    reading_speed: int = Field(default=200, ge=1, le=2000, description="Reading speed in words per minute.")
    speaking_speed: int = Field(default=150, ge=1, le=2000, description="Speaking speed in words per minute.")
    selective_counter: bool = Field(default=True, description="Enable counting of selected text fragments.")
    show_word_frequency: bool = Field(default=False, description="Compute the most frequent words.")
    frequency_word_count: int = Field(default=5, ge=1, le=100, description="Number of frequent words to report.")

    def to_options(self) -> ExtractionOptions:
        return ExtractionOptions(
            include_links=self.include_links,
            reading_speed=self.reading_speed,
            speaking_speed=self.speaking_speed,
            compute_frequency=self.show_word_frequency,
            frequency_top_n=self.frequency_word_count,
        )


class DisplayConfig(BaseModel):
    """Which optional statistics appear in the plain-text report."""

    model_config = ConfigDict(frozen=True)

    show_sentences: bool = False
    show_paragraphs: bool = False
    show_unique_words: bool = False
    show_avg_word_length: bool = True
    show_longest_word: bool = True
    show_reading_time: bool = True
    show_speaking_time: bool = False
    show_density: bool = False


class ExtractionSettings(BaseModel):
    """Configuration for document parsing and extraction."""

    model_config = ConfigDict(frozen=True)

    parser: str = Field(default="html.parser", description="BeautifulSoup tree builder to parse HTML with.")
    min_fallback_chars: int = Field(
        default=100, ge=0, description="Minimum text length for a fallback content selector to be accepted."
    )
    fetch_timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds when reading URLs.")
    user_agent: str = Field(default="wordcounter/0.1 (+text statistics)", description="User-Agent for HTTP requests.")


class MonitoringConfig(BaseModel):
    """Configuration for logging and metrics."""

    model_config = ConfigDict(frozen=True)

    log_level: str = Field(default="WARNING", description="Logging level (e.g., DEBUG, INFO, WARNING).")
    log_file: Optional[str] = Field(default=None, description="Path to log file. If None, logs to console.")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        normalized = v.upper().strip()
        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(sorted(VALID_LOG_LEVELS))}")
        return normalized


# --- Main Configuration Class ---


class Config(BaseSettings):
    counter: CounterSettings = Field(default_factory=CounterSettings)
    display: DisplayConfig = Field(default_factory=DisplayConfig)
    extraction: ExtractionSettings = Field(default_factory=ExtractionSettings)
    monitoring: MonitoringConfig = Field(default_factory=MonitoringConfig)

    model_config = SettingsConfigDict(
        env_prefix="WORDCOUNTER_", env_nested_delimiter="__", case_sensitive=False, frozen=True
    )

    @classmethod
    def from_yaml(cls, path: Path) -> Config:
        log.debug("Loading configuration from YAML file: %s", path)
        if not path.is_file():
            raise FileNotFoundError(f"Configuration file not found or is not a file: {path}")
        with open(path, "r", encoding="utf-8") as f:
            yaml_data = yaml.safe_load(f)
        if not yaml_data:
            log.warning("Configuration file is empty: %s. Using default settings.", path)
            return cls.model_validate({})
        return cls.model_validate(yaml_data)


def find_config_file() -> Path | None:
    current_dir = Path.cwd()
    for name in ("wordcounter.yaml", "wordcounter.yml", "config.yaml"):
        path = current_dir / name
        if path.is_file():
            return path
    return None


def load_config(path: Optional[Path] = None) -> Config:
    """
    Load the configuration snapshot.

    An explicit ``path`` must exist and validate. Without one, a config file
    in the working directory is used if present, otherwise defaults (plus
    ``WORDCOUNTER_*`` environment overrides).

    Raises:
        ConfigError: If the configuration cannot be read or is invalid
    """
    config_path = path or find_config_file()
    try:
        if config_path is None:
            log.debug("No config file found. Using default settings.")
            return Config()
        log.info("Loading configuration from: %s", config_path)
        return Config.from_yaml(Path(config_path))
    except (ValidationError, FileNotFoundError, yaml.YAMLError) as e:
        raise ConfigError(f"Invalid configuration ({config_path or 'defaults'}): {e}") from e
