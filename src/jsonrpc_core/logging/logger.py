"""Structured logging with OTEL trace context.

Usage:
    from jsonrpc_core.logging import get_logger

    logger = get_logger("dispatcher")
    logger.info("Method invoked", method="add")
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

from opentelemetry import trace

from jsonrpc_core.config.models import LoggingConfig
from jsonrpc_core.types import LogFormat, LogLevel

from .colors import CYAN, LIGHT_BLUE, MAGENTA, RED, RESET, YELLOW

LOGGER_PREFIX = "jsonrpc"

_LEVELS = {
    LogLevel.DEBUG: logging.DEBUG,
    LogLevel.INFO: logging.INFO,
    LogLevel.WARN: logging.WARNING,
    LogLevel.ERROR: logging.ERROR,
}

# LogRecord attributes that are not user-supplied extra fields
_RESERVED_FIELDS = frozenset(
    {
        "name", "msg", "args", "created", "filename", "funcName",
        "levelname", "levelno", "lineno", "module", "msecs",
        "pathname", "process", "processName", "relativeCreated",
        "stack_info", "exc_info", "exc_text", "thread", "threadName",
        "message", "taskName",
    }
)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {k: v for k, v in record.__dict__.items() if k not in _RESERVED_FIELDS}


class StructuredLogFormatter(logging.Formatter):
    """JSON formatter with trace context injection.

    Formats log records as JSON with:
    - timestamp (ISO 8601)
    - level
    - component (logger name)
    - message
    - trace_id / span_id (if a span is recording)
    - exception (if exc_info is set)
    - Additional fields from extra
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_data: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "component": record.name,
            "message": record.getMessage(),
        }

        span = trace.get_current_span()
        if span and span.is_recording():
            ctx = span.get_span_context()
            if ctx.is_valid:
                log_data["trace_id"] = format(ctx.trace_id, "032x")
                log_data["span_id"] = format(ctx.span_id, "016x")

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        log_data.update(_extra_fields(record))

        return json.dumps(log_data, default=str)


class ColoredLogFormatter(logging.Formatter):
    """Human-readable formatter: ``[COMPONENT] message {extra}``."""

    level_colors = {
        logging.DEBUG: LIGHT_BLUE,
        logging.INFO: CYAN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
    }

    def __init__(self, truncate_at: int = 200):
        super().__init__()
        self.truncate_at = truncate_at

    def format(self, record: logging.LogRecord) -> str:
        color = self.level_colors.get(record.levelno, RED)
        component = record.name.removeprefix(f"{LOGGER_PREFIX}.")
        output = f"{MAGENTA}[{component.upper()}]{RESET} {color}{record.getMessage()}{RESET}"

        extra = _extra_fields(record)
        if extra:
            extra_str = str(extra)
            if len(extra_str) > self.truncate_at:
                extra_str = extra_str[: self.truncate_at] + "..."
            output += f" {LIGHT_BLUE}{extra_str}{RESET}"

        if record.exc_info:
            output += "\n" + self.formatException(record.exc_info)
        return output


def _make_formatter(log_format: LogFormat) -> logging.Formatter:
    if log_format == LogFormat.COLORED:
        return ColoredLogFormatter()
    return StructuredLogFormatter()


class RpcLogger:
    """Structured logger for one core component.

    Wraps Python logging with:
    - Automatic trace context injection
    - Keyword arguments as structured fields
    """

    def __init__(
        self,
        name: str,
        config: LoggingConfig | None = None,
        output: TextIO | None = None,
    ):
        """Initialize logger.

        Args:
            name: Component name (e.g., "dispatcher")
            config: Level and format to apply
            output: Stream for the handler (default: sys.stderr)
        """
        self._logger = logging.getLogger(f"{LOGGER_PREFIX}.{name}")
        self._output = output
        if not self._logger.handlers:
            self._logger.addHandler(logging.StreamHandler(output or sys.stderr))
        self.configure(config or LoggingConfig())

    def configure(self, config: LoggingConfig) -> None:
        """Apply level and format (for reconfiguration after config load).

        Args:
            config: Logging configuration
        """
        self._logger.setLevel(_LEVELS.get(config.level, logging.INFO))
        for handler in self._logger.handlers:
            handler.setFormatter(_make_formatter(config.format))

    def _log(self, level: int, message: str, **kwargs: Any) -> None:
        """Log message with extra fields.

        Args:
            level: Log level
            message: Log message
            **kwargs: Additional fields to include
        """
        self._logger.log(level, message, extra=kwargs)

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message."""
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message."""
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message."""
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message."""
        self._log(logging.ERROR, message, **kwargs)

    def exception(self, message: str, level: int = logging.ERROR, **kwargs: Any) -> None:
        """Log message with the active exception's traceback."""
        self._logger.log(level, message, exc_info=True, extra=kwargs)


# Logger cache
_loggers: dict[str, RpcLogger] = {}
_config: LoggingConfig | None = None


def get_logger(name: str) -> RpcLogger:
    """Get or create a structured logger.

    Args:
        name: Component name

    Returns:
        RpcLogger instance
    """
    if name not in _loggers:
        _loggers[name] = RpcLogger(name, _config)
    return _loggers[name]


def configure_logging(config: LoggingConfig) -> None:
    """Apply configuration to existing and future component loggers.

    Args:
        config: Logging configuration
    """
    global _config  # noqa: PLW0603
    _config = config
    for logger in _loggers.values():
        logger.configure(config)


def reset_loggers() -> None:
    """Reset logger cache and configuration (for testing)."""
    global _loggers, _config  # noqa: PLW0603
    _loggers = {}
    _config = None
