"""Request parsing - raw bytes to top-level payload to Request records."""

import json
import math
from typing import Any

from jsonrpc_core.errors import RpcError, create_error

from .types import ABSENT, JSONRPC_VERSION, Batch, Id, Request, Single, TopLevel, is_valid_id


def invalid_request(detail: str) -> RpcError:
    """Create an Invalid Request (-32600) error carrying a description."""
    return create_error("INVALID_REQUEST", data=detail)


def parse_top(data: bytes | str) -> TopLevel:
    """Decode raw input and classify its top-level shape.

    Args:
        data: Raw request bytes (UTF-8) or text

    Returns:
        Single for a JSON object, Batch for a JSON array

    Raises:
        RpcError: -32700 if the input is not JSON or holds a number that
            is not finite, -32600 if the top-level value is neither an
            object nor an array
    """
    try:
        value = json.loads(data, parse_float=_parse_float, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        raise create_error("PARSE_ERROR") from e

    if isinstance(value, dict):
        return Single(payload=value)
    if isinstance(value, list):
        return Batch(items=value)
    raise invalid_request("Not a JSON object or array")


def decode_request(value: Any, require_version: bool = False) -> Request:
    """Decode one request object.

    The "jsonrpc" member is accepted whatever its value unless
    require_version is set.

    Args:
        value: One element of a Single or Batch payload
        require_version: Reject requests whose "jsonrpc" member is not "2.0"

    Returns:
        Request record; its id is ABSENT when the "id" member is missing

    Raises:
        RpcError: -32600 describing the first problem found
    """
    if not isinstance(value, dict):
        raise invalid_request(f"Expected a JSON object, got {_json_type(value)}")

    if require_version and value.get("jsonrpc") != JSONRPC_VERSION:
        raise invalid_request('"jsonrpc" must be exactly "2.0"')

    method = value.get("method")
    if not isinstance(method, str):
        if "method" not in value:
            raise invalid_request('Missing "method" member')
        raise invalid_request(f'"method" must be a string, got {_json_type(method)}')

    args = value.get("params", {})
    if not isinstance(args, (dict, list)):
        raise invalid_request(f'"params" must be an object or an array, got {_json_type(args)}')

    request_id = value.get("id", ABSENT)
    if request_id is not ABSENT and not is_valid_id(request_id):
        raise invalid_request(f'"id" must be a string, number or null, got {_json_type(request_id)}')

    return Request(method=method, args=args, id=request_id)


def salvage_id(value: Any) -> Id:
    """Recover an id from a value that failed to decode.

    Returns:
        The value's "id" member if it is a valid id, otherwise None
    """
    if isinstance(value, dict):
        request_id = value.get("id")
        if is_valid_id(request_id):
            return request_id
    return None


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"{text} is out of range")
    return value
