"""Structured logging for the JSON-RPC core."""

from .logger import (
    ColoredLogFormatter,
    RpcLogger,
    StructuredLogFormatter,
    configure_logging,
    get_logger,
    reset_loggers,
)

__all__ = [
    "RpcLogger",
    "StructuredLogFormatter",
    "ColoredLogFormatter",
    "get_logger",
    "configure_logging",
    "reset_loggers",
]
