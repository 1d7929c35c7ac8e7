"""Error factory for creating RpcErrors from any exception type."""

from typing import Any

from .errors import RpcError
from .matchers import ErrorMatcherChain
from .registry import ErrorRegistry


class ErrorFactory:
    """Creates RpcErrors from template keys or from arbitrary exceptions."""

    def __init__(
        self,
        registry: ErrorRegistry | None = None,
        matcher_chain: ErrorMatcherChain | None = None,
    ):
        """Initialize error factory.

        Args:
            registry: Error registry (defaults to new ErrorRegistry())
            matcher_chain: Matcher chain (defaults to new ErrorMatcherChain())
        """
        self.registry = registry or ErrorRegistry()
        self.matcher_chain = matcher_chain or ErrorMatcherChain()

    def from_exception(self, error: Exception) -> RpcError:
        """Convert any exception to RpcError.

        Args:
            error: Exception raised while handling a call

        Returns:
            The error itself if it already is an RpcError, otherwise the
            result of the first matching matcher
        """
        if isinstance(error, RpcError):
            return error

        match_result = self.matcher_chain.match(error)
        return self.registry.create(
            key=match_result.key,
            context=match_result.context,
            data=match_result.data,
        )

    def create(
        self,
        key: str,
        data: Any = None,
        **context: Any,
    ) -> RpcError:
        """Create RpcError directly from a template key.

        Args:
            key: Template key
            data: Optional error data
            **context: Context variables for message interpolation

        Returns:
            RpcError instance
        """
        return self.registry.create(key=key, context=context, data=data)


# Convenience singleton
_default_factory: ErrorFactory | None = None


def get_error_factory() -> ErrorFactory:
    """Get default error factory singleton.

    Returns:
        Default ErrorFactory instance
    """
    global _default_factory  # noqa: PLW0603
    if _default_factory is None:
        _default_factory = ErrorFactory()
    return _default_factory


def create_error(key: str, data: Any = None, **context: Any) -> RpcError:
    """Convenience function to create an error from a built-in template.

    Args:
        key: Template key
        data: Optional error data
        **context: Context variables for message interpolation

    Returns:
        RpcError instance
    """
    return get_error_factory().create(key, data, **context)


def rpc_error(code: int, message: str) -> RpcError:
    """Create an RpcError with the given code and message.

    Server error codes should be in the range -32000 to -32099.
    """
    return RpcError(code=code, message=message)


def rpc_error_with_data(code: int, message: str, data: Any) -> RpcError:
    """Create an RpcError with the given code, message, and additional data.

    Server error codes should be in the range -32000 to -32099.
    """
    return RpcError(code=code, message=message, data=data)
