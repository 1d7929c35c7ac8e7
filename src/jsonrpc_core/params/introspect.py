"""Derive method signatures from handler callables."""

import inspect
import typing
from collections.abc import Callable
from typing import Any

from .types import MethodSignature, OptionalParam, ParamSpec, RequiredParam

_BINDABLE_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def _type_hints(func: Callable[..., Any]) -> dict[str, Any]:
    target = func.__call__ if not inspect.isroutine(func) and callable(func) else func
    try:
        return typing.get_type_hints(target, include_extras=True)
    except (NameError, TypeError):
        # Unresolvable forward references; fall back to raw annotations
        return {}


def _annotation(hints: dict[str, Any], param: inspect.Parameter) -> Any:
    if param.name in hints:
        return hints[param.name]
    if param.annotation is inspect.Parameter.empty or isinstance(param.annotation, str):
        return Any
    return param.annotation


def signature_from_callable(func: Callable[..., Any]) -> MethodSignature:
    """Build a MethodSignature from a handler's Python signature.

    Positional parameters become RequiredParam, or OptionalParam when they
    have a default. Type hints become conversion targets. ``*args`` and
    ``**kwargs`` are skipped, as are keyword-only parameters with defaults.

    Args:
        func: Handler function or callable object

    Returns:
        MethodSignature matching the handler's positional arity

    Raises:
        ValueError: If the handler has a keyword-only parameter without a
            default, or its signature cannot be inspected
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError) as e:
        msg = f"Cannot inspect signature of {func!r}"
        raise ValueError(msg) from e

    hints = _type_hints(func)
    params: list[ParamSpec] = []

    for param in sig.parameters.values():
        if param.kind == inspect.Parameter.KEYWORD_ONLY:
            if param.default is inspect.Parameter.empty:
                msg = f"Keyword-only parameter without default cannot be bound: {param.name}"
                raise ValueError(msg)
            continue
        if param.kind not in _BINDABLE_KINDS:
            continue

        annotation = _annotation(hints, param)
        if param.default is inspect.Parameter.empty:
            params.append(RequiredParam(param.name, annotation))
        else:
            params.append(OptionalParam(param.name, param.default, annotation))

    return MethodSignature(params)


def return_type_of(func: Callable[..., Any]) -> Any:
    """Return the handler's declared result type, or Any if undeclared."""
    hints = _type_hints(func)
    return hints.get("return", Any)


def check_arity(func: Callable[..., Any], signature: MethodSignature) -> None:
    """Verify the handler accepts exactly one positional argument per parameter.

    Handlers whose signature cannot be inspected (some builtins) are accepted.

    Raises:
        ValueError: If the handler cannot be called with len(signature) arguments
    """
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError):
        return

    try:
        sig.bind(*([None] * len(signature)))
    except TypeError as e:
        msg = f"Handler {getattr(func, '__name__', func)!r} does not accept {len(signature)} positional arguments"
        raise ValueError(msg) from e
