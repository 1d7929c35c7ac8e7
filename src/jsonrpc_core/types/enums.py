"""Shared enumerations for the JSON-RPC core."""

from enum import Enum


class LogLevel(str, Enum):
    """Log verbosity level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


class LogFormat(str, Enum):
    """Log output format."""

    COLORED = "colored"
    JSON = "json"


class BatchMode(str, Enum):
    """How the items of a batch request are evaluated."""

    SEQUENTIAL = "sequential"
    CONCURRENT = "concurrent"
