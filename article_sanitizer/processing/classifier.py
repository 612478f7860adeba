"""
Line classification for article body cleaning.

Each line of a body is assigned exactly one classification:

1. CUTOFF_TRIGGER if it matches a cutoff-section pattern. Scanning stops
   there; every later line is reported as DROP with reason ``after_cutoff``.
2. DROP if it matches a drop-line pattern.
3. KEEP otherwise (blank lines included, they mark paragraph breaks).

A final pass walks the kept lines backward from the end and reclassifies a
trailing run of headline-shaped lines as SPAM_BLOCK. Aggregators append
lists of unrelated titles with no marker in front of them, so only their
shape gives them away.
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from ..config import get_settings
from .patterns import PatternTables, get_pattern_tables
from .text_utils import (
    count_words,
    has_terminal_punctuation,
    is_numeric_figure,
    starts_with_honorific,
    starts_with_narrative_lead_in,
)

AFTER_CUTOFF = "after_cutoff"
HEADLINE_SPAM = "headline_spam"

MIN_HEADLINE_CHARS = 9


class Classification(Enum):
    """Outcome for a single line."""
    KEEP = "keep"
    DROP = "drop"
    CUTOFF_TRIGGER = "cutoff_trigger"
    SPAM_BLOCK = "spam_block"


@dataclass(frozen=True)
class Line:
    """A trimmed body line and its zero-based position."""
    index: int
    text: str

    @property
    def is_blank(self) -> bool:
        return not self.text


@dataclass(frozen=True)
class LineDecision:
    """Classification of one line plus what caused it."""
    line: Line
    classification: Classification
    reason: str | None = None


def to_lines(texts: Iterable[str]) -> list[Line]:
    """Wrap raw line strings as positioned, trimmed lines."""
    return [Line(index=i, text=text.strip()) for i, text in enumerate(texts)]


def looks_like_headline(text: str, max_words: int = 20) -> bool:
    """Check whether a kept line has the shape of an appended headline.

    Args:
        text: Trimmed line
        max_words: Word-count ceiling; lines at or above it are prose

    Returns:
        True if the line is short, unpunctuated and title-like
    """
    if not text:
        return False

    if count_words(text) >= max_words:
        return False

    if has_terminal_punctuation(text):
        return False

    # Title-like: opens with a capital or digit, reads as a label not a clause
    if len(text) < MIN_HEADLINE_CHARS or ":" in text:
        return False
    if not (text[0].isupper() or text[0].isdigit()):
        return False
    if is_numeric_figure(text):
        return False
    if starts_with_honorific(text) or starts_with_narrative_lead_in(text):
        return False

    return text.count(",") <= 1


class LineClassifier:
    """Assigns a Classification to every line of a body."""

    def __init__(
        self,
        tables: PatternTables | None = None,
        headline_max_words: int = 20,
        headline_min_run: int = 2,
    ):
        if headline_max_words < 1 or headline_min_run < 1:
            raise ValueError("Headline thresholds must be at least 1")

        self.tables = tables if tables is not None else get_pattern_tables()
        self.headline_max_words = headline_max_words
        self.headline_min_run = headline_min_run

    def classify_line(self, line: Line) -> LineDecision:
        """Classify a single line against the pattern tables only."""
        if line.is_blank:
            return LineDecision(line, Classification.KEEP)

        # Cutoff is checked first so it wins over a drop match
        cutoff = self.tables.match_cutoff(line.text)
        if cutoff is not None:
            return LineDecision(line, Classification.CUTOFF_TRIGGER, cutoff.source)

        drop = self.tables.match_drop(line.text)
        if drop is not None:
            return LineDecision(line, Classification.DROP, drop.source)

        return LineDecision(line, Classification.KEEP)

    def classify(self, lines: Sequence[Line]) -> list[LineDecision]:
        """Classify every line, in order.

        Args:
            lines: Body lines in original order

        Returns:
            One decision per input line
        """
        decisions: list[LineDecision] = []

        for position, line in enumerate(lines):
            decision = self.classify_line(line)
            decisions.append(decision)

            if decision.classification is Classification.CUTOFF_TRIGGER:
                decisions.extend(
                    LineDecision(rest, Classification.DROP, AFTER_CUTOFF)
                    for rest in lines[position + 1:]
                )
                break

        self._mark_spam_tail(decisions)
        return decisions

    def _mark_spam_tail(self, decisions: list[LineDecision]) -> None:
        """Reclassify the trailing headline run as SPAM_BLOCK, in place."""
        run: list[int] = []

        for position in range(len(decisions) - 1, -1, -1):
            decision = decisions[position]
            if decision.classification is not Classification.KEEP:
                continue
            if decision.line.is_blank:
                continue
            if not looks_like_headline(decision.line.text, self.headline_max_words):
                break
            run.append(position)

        if len(run) < self.headline_min_run:
            return

        for position in run:
            decisions[position] = LineDecision(
                decisions[position].line, Classification.SPAM_BLOCK, HEADLINE_SPAM
            )


def classify(
    lines: Sequence[Line],
    tables: PatternTables | None = None,
    headline_max_words: int | None = None,
    headline_min_run: int | None = None,
) -> list[LineDecision]:
    """Classify lines with the configured tables and heuristic thresholds."""
    settings = get_settings()
    classifier = LineClassifier(
        tables=tables,
        headline_max_words=headline_max_words if headline_max_words is not None else settings.headline_max_words,
        headline_min_run=headline_min_run if headline_min_run is not None else settings.headline_min_run,
    )
    return classifier.classify(lines)
