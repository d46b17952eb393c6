"""
Centralized logging configuration for the farm intake workflow.

All modules obtain their loggers through this module so that pipeline
decisions and store mutations share one structured format. Log output goes
to stderr by default; stdout is reserved for the intake report.
"""
import logging
import sys
from typing import Any, Optional, TextIO

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "WARNING",
    format_json: bool = False,
    include_timestamp: bool = True,
    stream: Optional[TextIO] = None,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        stream: Destination stream, stderr when omitted
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=stream or sys.stderr,
        format="%(message)s"  # structlog will handle formatting
    )
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


def get_pipeline_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger bound for rule pipeline decisions.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for stage decisions
    """
    return get_logger(name).bind(
        subsystem="pipeline",
        audit_trail=True
    )


def log_stage_decision(
    logger: FilteringBoundLogger,
    stage_name: str,
    stopped: bool,
    request_id: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log the outcome of a single rule stage with standardized format.

    Args:
        logger: Structlog logger instance
        stage_name: Name of the stage that ran
        stopped: Whether the stage halted the pipeline
        request_id: Short description of the request being processed
        context: Context flags after the stage ran
    """
    bound_logger = logger.bind(
        stage_name=stage_name,
        stage_result="STOP" if stopped else "CONTINUE",
        request_id=request_id,
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    if stopped:
        bound_logger.info("Pipeline stopped")
    else:
        bound_logger.debug("Stage passed")
