"""Body assembly from classified lines."""

from collections.abc import Sequence

from .classifier import Classification, Line


def assemble(lines: Sequence[Line], classifications: Sequence[Classification]) -> str:
    """Join the kept lines into the cleaned body.

    Stops at the first CUTOFF_TRIGGER. Blank lines survive as paragraph
    breaks, collapsed to at most one in a row, and never lead or trail.

    Args:
        lines: Body lines in original order
        classifications: One classification per line

    Returns:
        Cleaned body, empty string if nothing survived
    """
    if len(lines) != len(classifications):
        raise ValueError(
            f"Got {len(classifications)} classifications for {len(lines)} lines"
        )

    kept: list[str] = []

    for line, classification in zip(lines, classifications):
        if classification is Classification.CUTOFF_TRIGGER:
            break
        if classification is not Classification.KEEP:
            continue

        if line.is_blank:
            if kept and kept[-1]:
                kept.append("")
            continue

        kept.append(line.text)

    while kept and not kept[-1]:
        kept.pop()

    return "\n".join(kept)
