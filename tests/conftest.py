"""Pytest configuration and fixtures."""

import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# Set test environment
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["JSON_LOGGING"] = "false"


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmp_dir:
        yield Path(tmp_dir)


@pytest.fixture
def write_patterns(temp_dir):
    """Write a pattern YAML file and return its path."""
    def _write(content: str, name: str = "patterns.yaml") -> Path:
        path = temp_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def long_paragraph() -> str:
    """A real body paragraph."""
    return (
        "The city council voted on Tuesday to approve a new budget that expands "
        "funding for public transit, road repairs and neighborhood parks over "
        "the next three years."
    )


@pytest.fixture
def spam_headlines() -> list[str]:
    """Unrelated headlines appended by aggregators."""
    return [
        "Celebrity Chef Opens New Restaurant Downtown",
        "Stock Market Rallies Amid Rate Cut Hopes",
        "Scientists Discover New Species of Frog",
        "Local Team Wins Championship Title",
    ]


@pytest.fixture
def messy_body(long_paragraph, spam_headlines) -> str:
    """Body with promo lines, credits, blank runs and a cutoff section."""
    return "\n".join([
        "Updated on: June 5, 2024 / 10:00 AM EDT",
        "/ CBS News",
        "",
        long_paragraph,
        "Subscribe to our newsletter for daily updates",
        "",
        "",
        "",
        "Officials said the plan would be reviewed again in the spring.",
        "Follow us on Instagram",
        "",
        "Related Stories:",
        *spam_headlines,
        "Officials said more details would come later.",
    ])
