"""
Centralized logging configuration for the report audit package.

This module provides standardized logging configuration using structlog
for all components. Parser, verifier and engine code should obtain their
loggers here so output stays consistently structured.
"""
import logging
import sys
from typing import Any, Optional, Sequence, TextIO

import structlog
from structlog.types import FilteringBoundLogger

from ..config.defaults import LoggingParams


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None,
    params: Optional[LoggingParams] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for parser, verifier and engine output.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
        params: Loaded LoggingParams; when given, its level and format_json
            replace the two keyword arguments above
        stream: Destination for log lines, defaults to stderr
    """
    if params is not None:
        level = params.level
        format_json = params.format_json

    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        stream=stream or sys.stderr,
        format="%(message)s"  # structlog will handle formatting
    )
    # basicConfig is a no-op once handlers exist; reconfiguring still moves the level
    logging.getLogger().setLevel(log_level)

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_verifier_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for report safety decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for the safety subsystem
    """
    logger = get_logger(name)

    return logger.bind(subsystem="safety")


def log_safety_decision(
    logger: FilteringBoundLogger,
    report: Sequence[int],
    safe: bool,
    dampened: bool = False,
    first_violation: Optional[int] = None,
    removal_index: Optional[int] = None,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a report safety check with standardized fields.

    Args:
        logger: Structlog logger instance
        report: Levels of the report that was checked
        safe: Final safety outcome
        dampened: True if the outcome relied on the problem dampener
        first_violation: Index of the first offending pair, if any
        removal_index: Index whose removal made the report safe, if any
        context: Additional context data
    """
    bound_logger = logger.bind(
        levels=list(report),
        result="SAFE" if safe else "UNSAFE",
        dampened=dampened,
        first_violation=first_violation,
        removal_index=removal_index,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Report safety decision")
