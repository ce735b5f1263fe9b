import logging

import structlog
from structlog.stdlib import BoundLogger


def configure_logging(level: str = "INFO") -> None:
    """Route structlog output to the console, filtered at ``level``."""

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.getLevelName(level.upper())),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> BoundLogger:
    """Return a structlog bound logger for the given module name."""

    return structlog.get_logger(name)
