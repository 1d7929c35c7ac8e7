"""Shared types for the JSON-RPC core.

Import from here rather than submodules:
    from jsonrpc_core.types import LogLevel, BatchMode, ValidationResult
"""

from .enums import BatchMode, LogFormat, LogLevel
from .validation import ValidationIssue, ValidationResult

__all__ = [
    # Enums
    "LogLevel",
    "LogFormat",
    "BatchMode",
    # Validation
    "ValidationIssue",
    "ValidationResult",
]
