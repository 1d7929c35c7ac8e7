"""JSON-RPC error handling - error codes, templates and exception mapping."""

from .errors import (
    SERVER_ERROR_RANGE,
    ConfigError,
    ErrorCode,
    ErrorMatcher,
    ErrorTemplate,
    MatchResult,
    RpcError,
)
from .factory import (
    ErrorFactory,
    create_error,
    get_error_factory,
    rpc_error,
    rpc_error_with_data,
)
from .matchers import DefaultErrorMatcher, ErrorMatcherChain, ExceptionTypeMatcher
from .registry import ErrorRegistry

__all__ = [
    # Core error types
    "RpcError",
    "ErrorCode",
    "SERVER_ERROR_RANGE",
    "ConfigError",
    "ErrorTemplate",
    "MatchResult",
    # Registry and factory
    "ErrorRegistry",
    "ErrorFactory",
    "ErrorMatcherChain",
    "ErrorMatcher",
    "ExceptionTypeMatcher",
    "DefaultErrorMatcher",
    # Convenience functions
    "get_error_factory",
    "create_error",
    "rpc_error",
    "rpc_error_with_data",
]
