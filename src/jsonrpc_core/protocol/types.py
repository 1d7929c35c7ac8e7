"""JSON-RPC 2.0 message types."""

from dataclasses import dataclass
from typing import Any, Final

from jsonrpc_core.errors import RpcError
from jsonrpc_core.params import Args

JSONRPC_VERSION: Final = "2.0"

# Request id as it appears on the wire
Id = str | int | float | None


class _Absent:
    """Marker for a request without an "id" member (a notification).

    Distinct from None, which is a valid id (JSON null).
    """

    _instance: "_Absent | None" = None

    def __new__(cls) -> "_Absent":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT: Final = _Absent()


def is_valid_id(value: Any) -> bool:
    """Check whether a JSON value may be used as a request id."""
    if isinstance(value, bool):
        return False
    return value is None or isinstance(value, (str, int, float))


@dataclass(frozen=True)
class Request:
    """A decoded request or notification."""

    method: str
    args: Args
    id: Id | _Absent = ABSENT

    @property
    def is_notification(self) -> bool:
        """True if the request carries no id and must not be answered."""
        return self.id is ABSENT


@dataclass(frozen=True)
class Response:
    """Outcome of one request, tied to its id.

    Exactly one of result/error is meaningful: a response is an error
    response iff error is set.
    """

    id: Id
    result: Any = None
    error: RpcError | None = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict[str, Any]:
        """Serialize as a JSON-RPC response object.

        Returns:
            Dict with jsonrpc, result or error, and id
        """
        if self.error is not None:
            return {"jsonrpc": JSONRPC_VERSION, "error": self.error.to_dict(), "id": self.id}
        return {"jsonrpc": JSONRPC_VERSION, "result": self.result, "id": self.id}


@dataclass(frozen=True)
class Single:
    """Top-level payload holding one request object."""

    payload: dict[str, Any]


@dataclass(frozen=True)
class Batch:
    """Top-level payload holding an array of request values."""

    items: list[Any]


TopLevel = Single | Batch
