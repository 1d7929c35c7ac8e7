"""Method types for the registry."""

import inspect
import math
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter
from pydantic_core import to_jsonable_python

from jsonrpc_core.params import MethodSignature


@dataclass(frozen=True)
class Method:
    """A named handler with its parameter signature.

    The handler is called with one positional argument per signature entry,
    in signature order. It may be a plain function or return an awaitable.
    """

    name: str
    signature: MethodSignature
    handler: Callable[..., Any] = field(repr=False)
    result_type: Any = Any
    _result_adapter: TypeAdapter[Any] | None = field(
        init=False, repr=False, compare=False, default=None
    )

    def __post_init__(self) -> None:
        if self.result_type is not Any:
            object.__setattr__(self, "_result_adapter", TypeAdapter(self.result_type))

    async def call(self, values: list[Any]) -> Any:
        """Run the handler with already-bound values.

        Args:
            values: Converted arguments in signature order

        Returns:
            The handler's (awaited) return value
        """
        result = self.handler(*values)
        if inspect.isawaitable(result):
            result = await result
        return result

    def serialize(self, result: Any) -> Any:
        """Render a handler result as a JSON-compatible value.

        Raises:
            pydantic_core.PydanticSerializationError: If the value has no
                JSON representation
            ValueError: If the value is self-referencing or holds NaN or
                Infinity, which JSON cannot carry
        """
        if self._result_adapter is not None:
            value = self._result_adapter.dump_python(result, mode="json")
        else:
            value = to_jsonable_python(result)
        _require_finite(value)
        return value


def _require_finite(value: Any) -> None:
    if isinstance(value, float) and not math.isfinite(value):
        msg = f"{value!r} is not a valid JSON number"
        raise ValueError(msg)
    if isinstance(value, dict):
        for item in value.values():
            _require_finite(item)
    elif isinstance(value, list):
        for item in value:
            _require_finite(item)
