"""Logging configuration for applications embedding hoodlocate."""

from logging import DEBUG, Handler, Logger, StreamHandler, getLevelName, getLogger
from typing import cast

import structlog
from structlog import dev, processors, stdlib
from structlog.stdlib import BoundLogger


def configure_logging(level: str = "INFO", json_logs: bool = False) -> None:
    """Route structlog events through the standard library 'hoodlocate' logger.

    Args:
        level: Log level name, e.g. "DEBUG" to trace every hood considered
        json_logs: Render JSON lines instead of console output
    """
    numeric_level = getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Unknown log level: {level}")

    shared_processors = [
        stdlib.add_logger_name,
        stdlib.add_log_level,
        processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S.%f"),
    ]

    structlog.configure(
        processors=[
            stdlib.filter_by_level,
            *shared_processors,
            stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=stdlib.LoggerFactory(),
        wrapper_class=stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler: Handler = StreamHandler()
    handler.setFormatter(
        stdlib.ProcessorFormatter(
            processor=processors.JSONRenderer()
            if json_logs
            else dev.ConsoleRenderer(colors=False),
            foreign_pre_chain=shared_processors,
        )
    )

    package_logger: Logger = getLogger("hoodlocate")
    package_logger.setLevel(numeric_level)
    # Replace handlers so repeated calls do not duplicate output
    package_logger.handlers = [handler]


def get_logger(name: str = "hoodlocate") -> BoundLogger:
    """Return a structlog logger over the stdlib logger *name*.

    Events stay silent until the stdlib level allows them.
    """
    return cast(BoundLogger, structlog.wrap_logger(getLogger(name)))


def debug_enabled(name: str = "hoodlocate") -> bool:
    """True if debug events for *name* would be emitted.

    Check this before logging inside per-candidate loops: structlog runs
    its processor chain before the stdlib level check drops the event.
    """
    return getLogger(name).isEnabledFor(DEBUG)
