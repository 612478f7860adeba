"""Tests for the pattern tables."""

import dataclasses

import pytest

from article_sanitizer.config import PatternConfig, PatternConfigError
from article_sanitizer.processing.patterns import (
    CUTOFF_SECTION_PATTERNS,
    DROP_LINE_PATTERNS,
    PatternCategory,
    PatternTables,
    get_pattern_tables,
)

CUSTOM_PATTERNS = """
drop_line:
  - pattern: '\\bpromo code\\b'
    description: Coupon prompts
  - 'tip line'
cutoff_section:
  - pattern: '^\\s*from the archive\\s*$'
"""


def test_default_tables_loaded():
    tables = get_pattern_tables()

    assert tables.drop_line == DROP_LINE_PATTERNS
    assert tables.cutoff_section == CUTOFF_SECTION_PATTERNS
    assert len(tables.drop_line) > 0
    assert len(tables.cutoff_section) > 0
    assert all(p.category is PatternCategory.DROP_LINE for p in tables.drop_line)
    assert all(p.category is PatternCategory.CUTOFF_SECTION for p in tables.cutoff_section)


def test_tables_are_immutable():
    tables = get_pattern_tables()

    with pytest.raises(dataclasses.FrozenInstanceError):
        tables.drop_line = ()
    assert isinstance(tables.drop_line, tuple)


@pytest.mark.parametrize("line", [
    "Subscribe to our newsletter",
    "SUBSCRIBE NOW",
    "Sign up for breaking news alerts",
    "Download the app for more stories",
    "Follow us on WhatsApp",
    "Join our community",
    "Turn on notifications",
    "Click here to watch",
    "Updated on: June 5, 2024 / 10:00 AM EDT",
    "/ CBS News",
    "/ ABC News",
    "CBS News",
    "Reuters",
    "Associated Press",
    "contributed to this report.",
    "Copyright © 2024 CBS Interactive Inc.",
    "All Rights Reserved",
    "More from Yahoo News",
    "Don't miss it",
    "Privacy Policy",
    "Share this article",
])
def test_drop_line_defaults(line):
    tables = get_pattern_tables()

    assert tables.match_drop(line) is not None
    assert tables.match_cutoff(line) is None


@pytest.mark.parametrize("line", [
    "Related Stories:",
    "RELATED STORIES",
    "Recommended Stories",
    "Trending Now",
    "You may also like",
    "Read next:",
    "In case you missed it",
    "***",
    "Topics",
    "Venture Editor",
    "© 2024 CBS Interactive Inc. All Rights Reserved.",
])
def test_cutoff_defaults(line):
    assert get_pattern_tables().match_cutoff(line) is not None


@pytest.mark.parametrize("line", ["Edited by", "The Associated Press", "Advertisement", "Best of The Hollywood Reporter"])
def test_lines_in_both_tables(line):
    tables = get_pattern_tables()

    assert tables.match_drop(line) is not None
    assert tables.match_cutoff(line) is not None


@pytest.mark.parametrize("line", [
    "The city council voted on Tuesday to approve a new budget.",
    "Officials said the plan would be reviewed again in the spring.",
    "Celebrity Chef Opens New Restaurant Downtown",
])
def test_regular_content_does_not_match(line):
    assert not get_pattern_tables().matches_any(line)


def test_custom_pattern_file(write_patterns):
    tables = PatternTables.from_file(write_patterns(CUSTOM_PATTERNS))

    assert len(tables) == 3
    assert tables.drop_line[0].description == "Coupon prompts"
    assert tables.drop_line[1].description == ""
    assert tables.match_drop("Use PROMO CODE save10") is not None
    assert tables.match_drop("Call our tip line") is not None
    assert tables.match_cutoff("From the Archive") is not None
    assert tables.match_drop("Subscribe now") is None


def test_invalid_regex_fails_at_load(write_patterns):
    path = write_patterns("drop_line:\n  - pattern: '(unclosed'\ncutoff_section: []\n")

    with pytest.raises(PatternConfigError, match="drop_line"):
        PatternTables.from_file(path)


def test_empty_pattern_rejected(write_patterns):
    path = write_patterns("drop_line: []\ncutoff_section:\n  - pattern: '  '\n")

    with pytest.raises(PatternConfigError, match="cutoff_section"):
        PatternConfig(path)


def test_missing_table(write_patterns):
    path = write_patterns("drop_line:\n  - 'junk'\n")

    with pytest.raises(PatternConfigError, match="cutoff_section"):
        PatternConfig(path)


def test_missing_file(temp_dir):
    with pytest.raises(PatternConfigError, match="not found"):
        PatternConfig(temp_dir / "nope.yaml")


def test_malformed_yaml(write_patterns):
    path = write_patterns("drop_line: [unclosed\n")

    with pytest.raises(PatternConfigError, match="Malformed"):
        PatternConfig(path)


def test_non_mapping_yaml(write_patterns):
    with pytest.raises(PatternConfigError, match="mapping"):
        PatternConfig(write_patterns("- just\n- a list\n"))


def test_pattern_config_error_is_value_error():
    assert issubclass(PatternConfigError, ValueError)
