"""Text processing utilities for article body cleaning."""

import re

# Sentence end, optionally followed by closing quotes or brackets
TERMINAL_PUNCTUATION_RE = re.compile(r'[.!?…]["\'”’»)\]]*$')

NUMERIC_FIGURE_RE = re.compile(r'^[\d.,]+%?$')

NARRATIVE_LEAD_IN_RE = re.compile(
    r'^(in|on|at|after|before|during|as|when|while|because|since|although)\b',
    re.IGNORECASE,
)

HONORIFIC_RE = re.compile(r'^(mr|mrs|ms|dr)\.', re.IGNORECASE)


def decode_body(body: str | bytes | None) -> str:
    """Coerce a raw body to text.

    Args:
        body: Raw body as scraped; bytes are decoded as UTF-8

    Returns:
        Body text, empty string for None
    """
    if body is None:
        return ""

    if isinstance(body, bytes):
        return body.decode("utf-8", errors="replace")

    return body


def split_body_lines(body: str) -> list[str]:
    """Split a body into trimmed lines.

    Every line boundary Python recognises (``\\r\\n``, ``\\r``, form feeds,
    unicode separators) counts as a break. Leading and trailing whitespace,
    including non-breaking spaces, is removed from each line.

    Args:
        body: Body text

    Returns:
        Trimmed lines in original order
    """
    if not body:
        return []

    return [line.strip() for line in body.splitlines()]


def count_words(text: str) -> int:
    """Count whitespace-separated words."""
    return len(text.split())


def has_terminal_punctuation(text: str) -> bool:
    """Check whether text ends like a sentence.

    Args:
        text: Trimmed line

    Returns:
        True if the line ends in ``.``, ``?``, ``!`` or an ellipsis
    """
    return TERMINAL_PUNCTUATION_RE.search(text) is not None


def is_numeric_figure(text: str) -> bool:
    return NUMERIC_FIGURE_RE.match(text) is not None


def starts_with_narrative_lead_in(text: str) -> bool:
    return NARRATIVE_LEAD_IN_RE.match(text) is not None


def starts_with_honorific(text: str) -> bool:
    return HONORIFIC_RE.match(text) is not None
