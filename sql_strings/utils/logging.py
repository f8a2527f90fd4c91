"""Logging configuration with structured logging support."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional


class StructuredFormatter(logging.Formatter):
    """Structured JSON formatter for logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data = {
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

        # Render context fields attached by RenderLoggerAdapter
        if hasattr(record, "render_context"):
            log_data.update(record.render_context)

        return json.dumps(log_data, default=str)


class StandardFormatter(logging.Formatter):
    """Standard human-readable formatter."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def setup_logging(
    level: str = "INFO",
    structured: bool = False,
    log_file: Optional[str] = None,
) -> None:
    """Set up logging for the ``sql_strings`` loggers.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        structured: Use structured JSON logging if True
        log_file: Optional log file path
    """
    log_level = getattr(logging, level.upper(), logging.INFO)
    formatter = StructuredFormatter() if structured else StandardFormatter()

    handlers = []

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    handlers.append(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    package_logger = logging.getLogger("sql_strings")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    for handler in handlers:
        package_logger.addHandler(handler)
    package_logger.setLevel(log_level)
    package_logger.propagate = False

    logging.getLogger("sqlglot").setLevel(logging.WARNING)


def configure_logging(logging_config) -> None:
    """Set up logging from a LoggingConfig section."""
    setup_logging(
        level=logging_config.level,
        structured=logging_config.structured,
        log_file=logging_config.log_file,
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


class RenderLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that attaches render context fields to each record."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        """Process log message with render context.

        Args:
            msg: Log message
            kwargs: Keyword arguments

        Returns:
            Tuple of (message, kwargs)
        """
        extra = kwargs.setdefault("extra", {})
        extra["render_context"] = self.extra
        return msg, kwargs


def get_render_logger(name: str, context) -> RenderLoggerAdapter:
    """Get a logger that tags records with a render context's settings.

    Args:
        name: Logger name
        context: RenderContext being rendered

    Returns:
        Logger adapter with ``with_parameters``, ``timezone`` and ``method``

    Example:
        >>> logger = get_render_logger(__name__, RenderContext())
        >>> logger.debug("Rendering sql fragment")
    """
    fields = {
        "with_parameters": context.with_parameters,
        "timezone": context.timezone,
        "method": context.method,
    }
    return RenderLoggerAdapter(get_logger(name), fields)
