"""Argument binding - matches JSON arguments to a method signature."""

from typing import Any

from pydantic import ValidationError

from jsonrpc_core.errors import create_error

from .types import MethodSignature, OptionalParam, ParamSpec

# JSON-RPC "params": an object (named) or an array (positional)
Args = dict[str, Any] | list[Any]

_NOT_FOUND = object()


def conversion_diagnostic(error: ValidationError) -> list[dict[str, Any]]:
    """Reduce a pydantic ValidationError to JSON-safe entries.

    Args:
        error: Error raised while converting an argument

    Returns:
        List of {"loc", "msg", "type"} dicts
    """
    return [
        {"loc": list(item["loc"]), "msg": item["msg"], "type": item["type"]}
        for item in error.errors()
    ]


def _resolve(param: ParamSpec, value: Any) -> Any:
    if value is _NOT_FOUND:
        if isinstance(param, OptionalParam):
            return param.default
        raise create_error("MISSING_ARGUMENT", name=param.name)

    try:
        return param.convert(value)
    except ValidationError as e:
        raise create_error(
            "WRONG_ARGUMENT_TYPE",
            data=conversion_diagnostic(e),
            name=param.name,
        ) from e


def bind_arguments(signature: MethodSignature, args: Args) -> list[Any]:
    """Bind a JSON argument set to a signature.

    Named arguments are looked up by parameter name; positional arguments are
    consumed in signature order. A missing value falls back to the parameter's
    default, if it has one. Extra positional values and unknown names are
    ignored. The first failing parameter aborts binding.

    Args:
        signature: Method signature to bind against
        args: Object (named) or array (positional) of JSON values

    Returns:
        Converted values in signature order

    Raises:
        RpcError: -32602 for a missing required argument or a value of the
            wrong type
    """
    if isinstance(args, dict):
        return [_resolve(param, args.get(param.name, _NOT_FOUND)) for param in signature]

    if isinstance(args, list):
        remaining = iter(args)
        return [_resolve(param, next(remaining, _NOT_FOUND)) for param in signature]

    msg = f"Arguments must be an object or an array, got {type(args).__name__}"
    raise TypeError(msg)
