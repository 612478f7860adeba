"""
Pattern tables for article body cleaning.

Two read-only tables drive line classification:

- drop-line patterns remove isolated junk lines (promos, CTAs, credits,
  legal footers) without touching neighbouring content;
- cutoff-section patterns mark a structural boundary ("Related Stories:",
  "***", "Topics") after which the rest of the body is discarded.

The tables are data, loaded from YAML once per process. Adding a new junk
signature means editing ``patterns.yaml`` (or pointing ``PATTERNS_FILE`` at
another file), never this module.
"""

import re
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from ..config import PatternConfig, PatternEntry, get_pattern_config


class PatternCategory(Enum):
    """Which table a pattern belongs to."""
    DROP_LINE = "drop_line"
    CUTOFF_SECTION = "cutoff_section"


@dataclass(frozen=True)
class Pattern:
    """Compiled, case-insensitive line matcher."""
    regex: re.Pattern[str]
    category: PatternCategory
    description: str = ""

    @property
    def source(self) -> str:
        return self.regex.pattern

    def matches(self, text: str) -> bool:
        return self.regex.search(text) is not None


def compile_entries(entries: list[PatternEntry], category: PatternCategory) -> tuple[Pattern, ...]:
    """Compile config entries into patterns of one category."""
    return tuple(
        Pattern(
            regex=re.compile(entry.pattern, re.IGNORECASE),
            category=category,
            description=entry.description,
        )
        for entry in entries
    )


@dataclass(frozen=True)
class PatternTables:
    """Immutable pair of drop-line and cutoff-section tables."""
    drop_line: tuple[Pattern, ...]
    cutoff_section: tuple[Pattern, ...]

    @classmethod
    def from_config(cls, config: PatternConfig) -> "PatternTables":
        return cls(
            drop_line=compile_entries(config.get_drop_line_entries(), PatternCategory.DROP_LINE),
            cutoff_section=compile_entries(config.get_cutoff_section_entries(), PatternCategory.CUTOFF_SECTION),
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "PatternTables":
        """Load tables from a YAML file; raises PatternConfigError on bad input."""
        return cls.from_config(PatternConfig(path))

    def match_cutoff(self, text: str) -> Pattern | None:
        """Return the first cutoff-section pattern matching ``text``."""
        return _first_match(self.cutoff_section, text)

    def match_drop(self, text: str) -> Pattern | None:
        """Return the first drop-line pattern matching ``text``."""
        return _first_match(self.drop_line, text)

    def matches_any(self, text: str) -> bool:
        return self.match_cutoff(text) is not None or self.match_drop(text) is not None

    def __len__(self) -> int:
        return len(self.drop_line) + len(self.cutoff_section)


def _first_match(patterns: tuple[Pattern, ...], text: str) -> Pattern | None:
    for pattern in patterns:
        if pattern.matches(text):
            return pattern
    return None


# Built at import so a broken table fails at startup, not per article
_tables = PatternTables.from_config(get_pattern_config())

DROP_LINE_PATTERNS: tuple[Pattern, ...] = _tables.drop_line
CUTOFF_SECTION_PATTERNS: tuple[Pattern, ...] = _tables.cutoff_section


def get_pattern_tables() -> PatternTables:
    """Get the process-wide pattern tables."""
    return _tables
