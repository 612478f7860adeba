"""Tests for configuration module."""

import pytest

from article_sanitizer.config import DEFAULT_PATTERNS_PATH, PatternConfig, Settings, get_settings


def test_settings_defaults(monkeypatch):
    """Test default settings values."""
    monkeypatch.delenv("HEADLINE_MAX_WORDS", raising=False)
    monkeypatch.delenv("HEADLINE_MIN_RUN", raising=False)
    monkeypatch.delenv("PATTERNS_FILE", raising=False)

    settings = Settings()

    assert settings.headline_max_words == 20
    assert settings.headline_min_run == 2
    assert settings.patterns_file == DEFAULT_PATTERNS_PATH


def test_settings_from_environment(monkeypatch, write_patterns):
    """Test settings creation with environment variables."""
    path = write_patterns("drop_line: []\ncutoff_section: []\n")
    monkeypatch.setenv("HEADLINE_MAX_WORDS", "12")
    monkeypatch.setenv("HEADLINE_MIN_RUN", "3")
    monkeypatch.setenv("PATTERNS_FILE", str(path))
    monkeypatch.setenv("LOG_LEVEL", "warning")

    settings = Settings()

    assert settings.headline_max_words == 12
    assert settings.headline_min_run == 3
    assert settings.patterns_file == path
    assert settings.log_level == "WARNING"


@pytest.mark.parametrize("field", ["headline_max_words", "headline_min_run"])
def test_threshold_validation(field):
    """Test heuristic thresholds must be positive."""
    with pytest.raises(ValueError, match="Headline thresholds must be at least 1"):
        Settings(**{field: 0})


def test_log_level_validation():
    with pytest.raises(ValueError, match="Unknown log level"):
        Settings(log_level="LOUD")


def test_get_settings_is_shared():
    assert get_settings() is get_settings()


def test_packaged_patterns_load():
    config = PatternConfig()

    assert config.config_path == DEFAULT_PATTERNS_PATH
    assert config.get_drop_line_entries()
    assert config.get_cutoff_section_entries()


def test_entries_are_copies():
    config = PatternConfig()

    entries = config.get_drop_line_entries()
    entries.clear()

    assert config.get_drop_line_entries()
