"""Logging configuration for the ShipHero SDK.

The SDK only emits records under the ``shiphero`` logger. Applications that
want output call :func:`setup_logging`, which provides two formats:
- Console: Rich-formatted colored output for development
- JSON: Structured JSON logs for production/log aggregation
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from rich.console import Console
from rich.logging import RichHandler

from shiphero.config import LogFormat, ShipHeroSettings

BASE_LOGGER = "shiphero"

_RESERVED_RECORD_KEYS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)


class JSONFormatter(logging.Formatter):
    """JSON log formatter for structured logging.

    Outputs each log record as a single JSON line. Fields passed through
    ``extra`` are merged into the top-level object.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RESERVED_RECORD_KEYS:
                log_data[key] = value

        return json.dumps(log_data, default=str, ensure_ascii=False)


def setup_logging(
    log_level: str | None = None,
    log_format: LogFormat | None = None,
    settings: ShipHeroSettings | None = None,
) -> logging.Logger:
    """Configure and return the SDK logger.

    Explicit arguments win over ``settings``; without either, INFO level
    console output is used. Existing handlers on the ``shiphero`` logger are
    replaced so repeated calls never duplicate output.

    Args:
        log_level: Override log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Override log format (CONSOLE or JSON).
        settings: Settings to read ``log_level``/``log_format`` from.

    Returns:
        The configured ``shiphero`` logger.

    Example:
        >>> logger = setup_logging(log_level="DEBUG", log_format=LogFormat.JSON)
    """
    level_str = log_level or (settings.log_level if settings else "INFO")
    format_type = log_format or (settings.log_format if settings else LogFormat.CONSOLE)

    level = getattr(logging, level_str.upper(), logging.INFO)

    logger = logging.getLogger(BASE_LOGGER)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    handler: logging.Handler
    if format_type == LogFormat.JSON:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JSONFormatter())
    else:
        console = Console(stderr=True)
        handler = RichHandler(
            console=console,
            show_time=True,
            show_level=True,
            show_path=True,
            rich_tracebacks=True,
            tracebacks_show_locals=level <= logging.DEBUG,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Get a logger under the ``shiphero`` hierarchy.

    Args:
        name: Typically ``__name__``. Names already inside the ``shiphero``
            package are used as-is; anything else becomes a child of it.

    Returns:
        Logger instance.
    """
    if not name:
        return logging.getLogger(BASE_LOGGER)
    if name == BASE_LOGGER or name.startswith(f"{BASE_LOGGER}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{BASE_LOGGER}.{name}")
