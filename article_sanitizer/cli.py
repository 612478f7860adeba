#!/usr/bin/env python3
"""Command line tools for cleaning article bodies and inspecting pattern tables."""

import sys
from pathlib import Path

import click
import orjson
from rich import box
from rich.console import Console
from rich.table import Table

from .config import LOG_LEVELS, PatternConfigError
from .logging import PerformanceLogger, get_logger, log_error, log_processing_stage, setup_logging
from .processing.classifier import Classification
from .processing.patterns import PatternTables, get_pattern_tables
from .processing.sanitizer import ArticleSanitizer, SanitizeResult

logger = get_logger(__name__)
console = Console(stderr=True)

CLASSIFICATION_STYLES = {
    Classification.KEEP: "green",
    Classification.DROP: "yellow",
    Classification.CUTOFF_TRIGGER: "red",
    Classification.SPAM_BLOCK: "magenta",
}


def sanitize_collected_articles(payload: bytes, sanitizer: ArticleSanitizer) -> bytes:
    """Clean every ``body`` in a collected-articles JSON document.

    Args:
        payload: JSON document with an ``articles`` array
        sanitizer: Sanitizer to apply

    Returns:
        The same document, re-serialized, with cleaned bodies
    """
    data = orjson.loads(payload)
    articles = data.get("articles") if isinstance(data, dict) else None
    if not isinstance(articles, list):
        raise click.ClickException("Input does not contain a valid 'articles' array")

    emptied = 0
    with PerformanceLogger("sanitize_articles", logger):
        for article in articles:
            if not isinstance(article, dict):
                continue
            cleaned = sanitizer.sanitize(article.get("body"))
            if not cleaned:
                emptied += 1
            article["body"] = cleaned or None

    logger.info(
        **log_processing_stage(
            stage="sanitize_articles",
            input_count=len(articles),
            output_count=len(articles) - emptied,
            emptied=emptied,
        )
    )

    return orjson.dumps(data, option=orjson.OPT_INDENT_2)


def display_decisions(result: SanitizeResult) -> None:
    """Show per-line classifications in a table."""
    table = Table(
        title="Line Decisions",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan"
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Decision", justify="center")
    table.add_column("Line", overflow="fold")
    table.add_column("Reason", overflow="fold", style="dim")

    for decision in result.decisions:
        color = CLASSIFICATION_STYLES[decision.classification]
        table.add_row(
            str(decision.line.index),
            f"[{color}]{decision.classification.value.upper()}[/{color}]",
            decision.line.text or "[dim]<blank>[/dim]",
            decision.reason or "-",
        )

    console.print(table)


@click.command()
@click.argument("input_file", type=click.File("rb"), default="-")
@click.option(
    "--output",
    "-o",
    type=click.File("wb"),
    default="-",
    help="Output file (default: stdout)",
)
@click.option("--articles", is_flag=True, help="Treat input as a collected-articles JSON file")
@click.option("--explain", is_flag=True, help="Show how each line was classified")
@click.option("--max-words", type=click.IntRange(min=1), help="Headline spam word-count ceiling")
@click.option("--min-run", type=click.IntRange(min=1), help="Minimum trailing headline run to discard")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Log level",
)
def sanitize_body(input_file, output, articles, explain, max_words, min_run, log_level):
    """Clean a scraped article body (or a collected-articles file)."""
    setup_logging(log_level=log_level, json_logging=False)

    try:
        sanitizer = ArticleSanitizer(headline_max_words=max_words, headline_min_run=min_run)
        payload = input_file.read()

        if articles:
            output.write(sanitize_collected_articles(payload, sanitizer))
            return

        result = sanitizer.sanitize_with_report(payload)
        if explain:
            display_decisions(result)
        if result.is_empty:
            console.print("[yellow]Nothing usable survived cleaning[/yellow]")

        output.write(result.body.encode("utf-8"))
        if result.body:
            output.write(b"\n")

    except click.ClickException:
        raise
    except orjson.JSONDecodeError as e:
        raise click.ClickException(f"Invalid JSON input: {e}") from e
    except Exception as e:
        logger.error(**log_error(e, context="sanitize_body"))
        click.echo(f"❌ Error: {e}", err=True)
        sys.exit(1)


@click.command()
@click.option(
    "--patterns-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Pattern YAML file to check (default: configured tables)",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def check_patterns(patterns_file, output_json):
    """Load, compile and list the drop-line and cutoff-section tables."""
    try:
        tables = PatternTables.from_file(patterns_file) if patterns_file else get_pattern_tables()
    except PatternConfigError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)

    if output_json:
        report = {
            category: [
                {"pattern": p.source, "description": p.description}
                for p in patterns
            ]
            for category, patterns in (
                ("drop_line", tables.drop_line),
                ("cutoff_section", tables.cutoff_section),
            )
        }
        click.echo(orjson.dumps(report, option=orjson.OPT_INDENT_2).decode("utf-8"))
        return

    table = Table(
        title=f"Pattern Tables ({len(tables)} patterns)",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Table", style="dim")
    table.add_column("Pattern", overflow="fold")
    table.add_column("Targets", overflow="fold")

    for pattern in tables.cutoff_section + tables.drop_line:
        table.add_row(pattern.category.value, pattern.source, pattern.description or "-")

    Console().print(table)


if __name__ == "__main__":
    sanitize_body()
