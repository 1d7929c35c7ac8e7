"""Parameter descriptors and method signatures."""

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from typing import Any

from pydantic import TypeAdapter


def _adapter_for(annotation: Any) -> TypeAdapter[Any] | None:
    if annotation is Any:
        return None
    return TypeAdapter(annotation)


class _Converting:
    """Shared conversion for parameter descriptors.

    ``annotation`` is the target type JSON values are converted to (any type
    pydantic can validate). Conversion follows pydantic's strict JSON rules:
    a string is never read as a number and a number never as a boolean,
    while integers still widen to floats and objects fill models.
    ``Any`` passes values through untouched.
    """

    annotation: Any
    _adapter: TypeAdapter[Any] | None

    def __post_init__(self) -> None:
        object.__setattr__(self, "_adapter", _adapter_for(self.annotation))

    def convert(self, value: Any) -> Any:
        """Convert a JSON value to the parameter's type.

        Raises:
            pydantic.ValidationError: If the value does not fit the type
        """
        if self._adapter is None:
            return value
        return self._adapter.validate_json(json.dumps(value), strict=True)


@dataclass(frozen=True)
class RequiredParam(_Converting):
    """Parameter that must be supplied by the caller."""

    name: str
    annotation: Any = Any
    _adapter: TypeAdapter[Any] | None = field(
        init=False, repr=False, compare=False, default=None
    )


@dataclass(frozen=True)
class OptionalParam(_Converting):
    """Parameter with a default used when the caller omits it.

    The default is used as given; it is not converted.
    """

    name: str
    default: Any
    annotation: Any = Any
    _adapter: TypeAdapter[Any] | None = field(
        init=False, repr=False, compare=False, default=None
    )


ParamSpec = RequiredParam | OptionalParam


@dataclass(frozen=True)
class MethodSignature:
    """Ordered parameter list of a method.

    Order defines positional binding; names must be unique.
    """

    params: tuple[ParamSpec, ...] = ()

    def __init__(self, params: Iterable[ParamSpec] = ()):
        object.__setattr__(self, "params", tuple(params))
        seen: set[str] = set()
        for param in self.params:
            if param.name in seen:
                msg = f"Duplicate parameter name: {param.name}"
                raise ValueError(msg)
            seen.add(param.name)

    def __iter__(self) -> Iterator[ParamSpec]:
        return iter(self.params)

    def __len__(self) -> int:
        return len(self.params)

    @property
    def names(self) -> list[str]:
        """Parameter names in declaration order."""
        return [param.name for param in self.params]
