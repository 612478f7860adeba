"""Structured logging for the Article Body Sanitizer."""

import json
import logging
import sys
import time
from typing import Any

import structlog
from structlog import processors, stdlib

from .config import get_settings


def setup_logging(log_level: str | None = None, json_logging: bool | None = None) -> None:
    """Route structlog events through stdlib logging on stderr.

    Stdout is left to the CLI, which writes cleaned bodies there.

    Args:
        log_level: Level name from config.LOG_LEVELS, settings value if omitted
        json_logging: JSON lines instead of console output, settings value if omitted
    """
    settings = get_settings()
    level = getattr(logging, (log_level or settings.log_level).upper())
    use_json = settings.json_logging if json_logging is None else json_logging

    logging.basicConfig(format="%(message)s", stream=sys.stderr, level=level)
    logging.getLogger().setLevel(level)

    chain = [
        stdlib.filter_by_level,
        stdlib.add_logger_name,
        stdlib.add_log_level,
        stdlib.PositionalArgumentsFormatter(),
        processors.TimeStamper(fmt="iso"),
        processors.StackInfoRenderer(),
        processors.format_exc_info,
    ]

    if use_json:
        chain.append(processors.JSONRenderer(serializer=json.dumps))
    else:
        chain.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=chain,
        wrapper_class=stdlib.BoundLogger,
        logger_factory=stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger, typically for ``__name__``."""
    return structlog.get_logger(name)


class LoggingMixin:
    """Gives a class a ``logger`` named after its module and class."""

    @property
    def logger(self) -> structlog.stdlib.BoundLogger:
        return get_logger(f"{self.__class__.__module__}.{self.__class__.__name__}")


def log_processing_stage(
    stage: str,
    input_count: int,
    output_count: int,
    duration: float | None = None,
    **kwargs: Any
) -> dict[str, Any]:
    """Build a ``processing_stage`` event.

    Args:
        stage: Stage name, e.g. ``sanitize_body``
        input_count: Lines or articles going in
        output_count: Lines or articles coming out
        duration: Seconds spent, if measured
        **kwargs: Stage-specific fields (dropped lines, cutoff position, ...)

    Returns:
        Keyword arguments for a logger call
    """
    event = {
        "event": "processing_stage",
        "stage": stage,
        "input_count": input_count,
        "output_count": output_count,
        **kwargs
    }
    if duration is not None:
        event["duration"] = duration
    return event


def log_error(error: Exception, context: str | None = None, **kwargs: Any) -> dict[str, Any]:
    """Build an ``error`` event for a caught exception."""
    event = {
        "event": "error",
        "error_type": type(error).__name__,
        "error_message": str(error),
        **kwargs
    }
    if context:
        event["context"] = context
    return event


class PerformanceLogger:
    """Times a block and logs its start, completion or failure."""

    def __init__(self, operation: str, logger: structlog.stdlib.BoundLogger):
        self.operation = operation
        self.logger = logger
        self.start_time: float | None = None

    def __enter__(self) -> "PerformanceLogger":
        self.start_time = time.perf_counter()
        self.logger.info("operation_started", operation=self.operation)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        if self.start_time is None:
            return

        duration = time.perf_counter() - self.start_time
        if exc_type is None:
            self.logger.info("operation_completed", operation=self.operation, duration=duration)
        else:
            self.logger.error(
                "operation_failed",
                operation=self.operation,
                duration=duration,
                error_type=exc_type.__name__,
                error_message=str(exc_val) if exc_val else None
            )


# Initialize logging on module import
setup_logging()
