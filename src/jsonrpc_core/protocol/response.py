"""Response building and wire encoding."""

import json
from collections.abc import Iterable
from typing import Any

from pydantic_core import PydanticSerializationError, to_jsonable_python

from jsonrpc_core.errors import RpcError, create_error

from .types import Id, Response, _Absent


def to_response(
    request_id: Id | _Absent,
    result: Any = None,
    error: RpcError | None = None,
) -> Response | None:
    """Wrap a call outcome with its request id.

    Args:
        request_id: Id of the originating request, or ABSENT for a notification
        result: JSON-compatible result (ignored when error is set)
        error: Error outcome

    Returns:
        Response, or None for a notification
    """
    if isinstance(request_id, _Absent):
        return None
    if error is not None:
        return Response(id=request_id, error=error)
    return Response(id=request_id, result=result)


def collect_batch(responses: Iterable[Response | None]) -> list[Response] | None:
    """Keep the answered items of a batch, in order.

    Returns:
        List of responses, or None when nothing is to be answered
    """
    collected = [response for response in responses if response is not None]
    return collected or None


def _jsonable(value: Any) -> Any:
    # Only reached for error data supplied by handlers; results are
    # serialized before they get here.
    try:
        return to_jsonable_python(value)
    except (PydanticSerializationError, ValueError):
        return str(value)


def _dumps(response: Response) -> bytes:
    try:
        text = json.dumps(
            response.to_dict(),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
            default=_jsonable,
        )
    except (ValueError, TypeError):
        # Error data that still cannot be written (self-referencing, or
        # holding NaN or Infinity) is replaced as a whole.
        fallback = Response(
            id=response.id,
            error=create_error("INTERNAL_ERROR", detail="response is not serializable"),
        )
        text = json.dumps(fallback.to_dict(), ensure_ascii=False, separators=(",", ":"))
    return text.encode("utf-8")


def encode(payload: Response | list[Response]) -> bytes:
    """Serialize a response or a batch of responses to UTF-8 JSON bytes.

    The output is strict JSON: a response whose content cannot be written
    that way is replaced by an Internal error (-32603) with the same id.
    """
    if isinstance(payload, list):
        return b"[" + b",".join(_dumps(response) for response in payload) + b"]"
    return _dumps(payload)
