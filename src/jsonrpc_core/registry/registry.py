"""Method Registry - immutable name to method lookup."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Any

from jsonrpc_core.logging import get_logger
from jsonrpc_core.params import (
    MethodSignature,
    ParamSpec,
    check_arity,
    return_type_of,
    signature_from_callable,
)

from .types import Method


class MethodRegistry(Mapping[str, Method]):
    """Read-only mapping of method names to methods.

    Built once from a list of methods; when two methods share a name the
    later one wins. Safe for concurrent reads since it is never mutated.
    """

    def __init__(self, methods: Iterable[Method] = ()):
        """Initialize registry.

        Args:
            methods: Methods to register, in order
        """
        logger = get_logger("registry")
        table: dict[str, Method] = {}
        for method in methods:
            if method.name in table:
                logger.warning("Method registered twice, keeping the later one", method=method.name)
            table[method.name] = method
        self._methods = MappingProxyType(table)

    def lookup(self, name: str) -> Method | None:
        """Get a method by name.

        Args:
            name: Method name

        Returns:
            Method if registered, None otherwise
        """
        return self._methods.get(name)

    def __getitem__(self, name: str) -> Method:
        return self._methods[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._methods)

    def __len__(self) -> int:
        return len(self._methods)

    def __repr__(self) -> str:
        return f"MethodRegistry({sorted(self._methods)!r})"


def build_method(
    name: str,
    handler: Callable[..., Any],
    signature: MethodSignature | Iterable[ParamSpec] | None = None,
    *,
    result_type: Any = None,
) -> Method:
    """Create a method from a name, handler, and parameter description.

    Args:
        name: Method name clients call
        handler: Function (or coroutine function) implementing the method
        signature: Parameter descriptors; derived from the handler when omitted
        result_type: Type used to serialize results; defaults to the handler's
            return annotation when the signature is derived, otherwise Any

    Returns:
        Method instance

    Raises:
        ValueError: If the signature does not match the handler's arity
    """
    if signature is None:
        signature = signature_from_callable(handler)
        if result_type is None:
            result_type = return_type_of(handler)
    else:
        if not isinstance(signature, MethodSignature):
            signature = MethodSignature(signature)
        check_arity(handler, signature)

    return Method(
        name=name,
        signature=signature,
        handler=handler,
        result_type=Any if result_type is None else result_type,
    )


def build_registry(methods: Iterable[Method]) -> MethodRegistry:
    """Create a registry from a list of methods. Later duplicates win.

    Args:
        methods: Methods to register

    Returns:
        MethodRegistry instance
    """
    return MethodRegistry(methods)
