"""Configuration management for the Article Body Sanitizer."""

import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_PATTERNS_PATH = Path(__file__).parent / "patterns.yaml"

PATTERN_TABLE_KEYS = ("drop_line", "cutoff_section")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class PatternConfigError(ValueError):
    """Raised when the pattern tables cannot be loaded or compiled."""


class PatternEntry(BaseModel):
    """Single regular expression entry of a pattern table."""
    pattern: str
    description: str = ""

    @field_validator("pattern")
    @classmethod
    def validate_pattern(cls, v: str) -> str:
        """Reject empty or uncompilable expressions at load time."""
        if not v.strip():
            raise ValueError("Pattern must not be empty")
        try:
            re.compile(v, re.IGNORECASE)
        except re.error as e:
            raise ValueError(f"Invalid regular expression {v!r}: {e}") from e
        return v


class Settings(BaseSettings):
    """Main application settings."""

    # ── Pattern Tables ─────────────────────────────────────────────────────
    patterns_file: Path = Field(
        DEFAULT_PATTERNS_PATH, description="YAML file holding the drop-line and cutoff-section tables"
    )

    # ── Headline Spam Heuristic ────────────────────────────────────────────
    headline_max_words: int = Field(20, description="Lines with this many words or more are never headline spam")
    headline_min_run: int = Field(2, description="Minimum trailing headline run length to discard")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = Field("INFO", description="Log level")
    json_logging: bool = Field(True, description="Enable JSON logging")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("headline_max_words", "headline_min_run")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate heuristic thresholds are positive."""
        if v < 1:
            raise ValueError("Headline thresholds must be at least 1")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate the log level name."""
        if v.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()


class PatternConfig:
    """Pattern table loader."""

    def __init__(self, config_path: str | Path = DEFAULT_PATTERNS_PATH):
        self.config_path = Path(config_path)
        self._tables: dict[str, list[PatternEntry]] = {}
        self.load_config()

    def load_config(self) -> None:
        """Load and validate the pattern tables from a YAML file."""
        if not self.config_path.exists():
            raise PatternConfigError(f"Pattern file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                raw: Any = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise PatternConfigError(f"Malformed pattern file {self.config_path}: {e}") from e

        if not isinstance(raw, dict):
            raise PatternConfigError(f"Pattern file {self.config_path} must be a mapping")

        tables: dict[str, list[PatternEntry]] = {}
        for key in PATTERN_TABLE_KEYS:
            entries = raw.get(key)
            if not isinstance(entries, list):
                raise PatternConfigError(f"Pattern file {self.config_path} is missing the '{key}' list")
            try:
                tables[key] = [
                    PatternEntry(pattern=entry) if isinstance(entry, str) else PatternEntry(**entry)
                    for entry in entries
                ]
            except (ValidationError, TypeError) as e:
                raise PatternConfigError(f"Invalid entry in '{key}' table: {e}") from e

        self._tables = tables

    def get_drop_line_entries(self) -> list[PatternEntry]:
        """Get entries of the drop-line table."""
        return list(self._tables["drop_line"])

    def get_cutoff_section_entries(self) -> list[PatternEntry]:
        """Get entries of the cutoff-section table."""
        return list(self._tables["cutoff_section"])


# Global instances
settings = Settings()
pattern_config = PatternConfig(settings.patterns_file)


def get_settings() -> Settings:
    """Get application settings."""
    return settings


def get_pattern_config() -> PatternConfig:
    """Get the pattern table configuration."""
    return pattern_config
