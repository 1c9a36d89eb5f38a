"""Logging configuration using structlog.

The client only emits log events. Applications that want structured output
call ``setup_logging`` once at startup.
"""

import logging
from typing import Any, Optional

import structlog

from .config import get_global_settings

LOGGER_NAMESPACE = "fortnite_api"


def setup_logging(log_level: Optional[str] = None, json_logs: bool = True) -> None:
    """
    Configure structlog for the client's log events.

    :param log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL);
        defaults to ``FORTNITE_API_LOG_LEVEL``
    :param json_logs: Render JSON lines instead of the console format
    """
    level_name = (log_level or get_global_settings().log_level).upper()
    level = getattr(logging, level_name, logging.INFO)

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger(LOGGER_NAMESPACE).setLevel(level)

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    """
    Get a structlog logger for a client module.

    :param name: Logger name (usually __name__)
    :returns: Logger instance
    """
    return structlog.get_logger(name)
