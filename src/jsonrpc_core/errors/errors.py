"""JSON-RPC error types and error codes."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Reserved JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603
    SERVER_ERROR = -32000  # Default for handler failures without a code


# Range available to handlers for server-defined errors
SERVER_ERROR_RANGE = range(-32099, -32000 + 1)


@dataclass
class RpcError(Exception):
    """Error returned to the client inside a JSON-RPC error object.

    Handlers raise it to fail a call with a specific code; the core raises it
    for every protocol-level failure.
    """

    code: int
    message: str
    data: Any = None  # None = no "data" member on the wire

    def __post_init__(self) -> None:
        """Set Exception message."""
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize as a JSON-RPC error object.

        Returns:
            Dict with code, message and (when present) data
        """
        error: dict[str, Any] = {
            "code": int(self.code),
            "message": self.message,
        }
        if self.data is not None:
            error["data"] = self.data
        return error


class ConfigError(Exception):
    """Invalid server configuration. Raised at startup, never sent on the wire."""

    def __init__(self, message: str, detail: str | None = None):
        super().__init__(message if detail is None else f"{message}: {detail}")
        self.message = message
        self.detail = detail


@dataclass
class ErrorTemplate:
    """Template for creating errors."""

    key: str  # e.g., "METHOD_NOT_FOUND"
    code: int
    message_template: str  # "Method not found: {method}"


@dataclass
class MatchResult:
    """Result of matching an exception."""

    key: str  # Template key in the ErrorRegistry
    context: dict[str, Any] = field(default_factory=dict)
    data: Any = None


class ErrorMatcher(ABC):
    """Base class for exception matchers."""

    @abstractmethod
    def matches(self, error: Exception) -> bool:
        """Check if this matcher handles the error.

        Args:
            error: Exception raised by a handler

        Returns:
            True if this matcher can handle the error
        """

    @abstractmethod
    def extract(self, error: Exception) -> MatchResult:
        """Extract error template info from the exception.

        Args:
            error: Exception to extract from

        Returns:
            MatchResult with template key and context
        """
