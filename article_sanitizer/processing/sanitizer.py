"""
Article body sanitizer.

Runs a raw scraped body through the line classifier and the body assembler:

    raw body -> lines -> classifications -> cleaned body

The sanitizer keeps no state between calls. Pattern tables are shared
read-only, so one instance can serve any number of threads.
"""

from collections import Counter
from dataclasses import dataclass, field
from typing import Any

from ..config import Settings, get_settings
from ..logging import LoggingMixin, log_processing_stage
from .assembler import assemble
from .classifier import Classification, LineClassifier, LineDecision, to_lines
from .patterns import PatternTables
from .text_utils import decode_body, split_body_lines


@dataclass
class SanitizeResult:
    """Cleaned body together with the per-line decisions behind it."""
    body: str
    decisions: list[LineDecision]
    counts: dict[Classification, int] = field(default_factory=dict)
    cutoff_line: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.body

    @property
    def input_line_count(self) -> int:
        return len(self.decisions)

    @property
    def output_line_count(self) -> int:
        return len(self.body.splitlines())


class ArticleSanitizer(LoggingMixin):
    """Strips promo lines, trailing sections and headline spam from bodies."""

    def __init__(
        self,
        tables: PatternTables | None = None,
        settings: Settings | None = None,
        headline_max_words: int | None = None,
        headline_min_run: int | None = None,
    ):
        settings = settings or get_settings()
        self.classifier = LineClassifier(
            tables=tables,
            headline_max_words=headline_max_words if headline_max_words is not None else settings.headline_max_words,
            headline_min_run=headline_min_run if headline_min_run is not None else settings.headline_min_run,
        )

    @property
    def tables(self) -> PatternTables:
        return self.classifier.tables

    def sanitize_with_report(self, body: str | bytes | None) -> SanitizeResult:
        """Clean a body and report how each line was classified.

        Args:
            body: Raw article body with newline-delimited paragraphs

        Returns:
            SanitizeResult; ``body`` is empty when nothing usable survived
        """
        lines = to_lines(split_body_lines(decode_body(body)))
        decisions = self.classifier.classify(lines)
        cleaned = assemble(lines, [d.classification for d in decisions])

        counts = Counter(d.classification for d in decisions)
        cutoff_line = next(
            (d.line.index for d in decisions if d.classification is Classification.CUTOFF_TRIGGER),
            None,
        )

        result = SanitizeResult(
            body=cleaned,
            decisions=decisions,
            counts=dict(counts),
            cutoff_line=cutoff_line,
        )

        self.logger.debug(
            **log_processing_stage(
                stage="sanitize_body",
                input_count=result.input_line_count,
                output_count=result.output_line_count,
                dropped=counts[Classification.DROP],
                spam_lines=counts[Classification.SPAM_BLOCK],
                cutoff_line=cutoff_line,
            )
        )

        return result

    def sanitize(self, body: str | bytes | None) -> str:
        """Clean a body, returning an empty string if nothing survived."""
        return self.sanitize_with_report(body).body


def sanitize(body: str | bytes | None) -> str:
    """Clean a raw article body with the configured tables and thresholds.

    Args:
        body: Raw article body

    Returns:
        Cleaned body, or an empty string when nothing usable survived
    """
    return ArticleSanitizer().sanitize(body)


def prepare_article_for_summary(
    article: dict[str, Any],
    sanitizer: ArticleSanitizer | None = None,
) -> dict[str, Any]:
    """Reduce a scraped article to the fields a summarizer needs.

    The body is cleaned; when nothing survives it is set to None so the
    caller can fall back to the excerpt or mark the article unusable.

    Args:
        article: Scraped article with at least ``title`` and ``body``
        sanitizer: Sanitizer to use, default configuration if omitted

    Returns:
        Dict with ``title``, ``excerpt``, ``category`` and cleaned ``body``
    """
    sanitizer = sanitizer or ArticleSanitizer()
    cleaned = sanitizer.sanitize(article.get("body"))

    return {
        "title": article.get("title", ""),
        "excerpt": article.get("excerpt"),
        "category": article.get("category"),
        "body": cleaned or None,
    }
