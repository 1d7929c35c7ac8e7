"""JSON-RPC 2.0 wire protocol - parsing, message types and encoding."""

from .parser import decode_request, invalid_request, parse_top, salvage_id
from .response import collect_batch, encode, to_response
from .types import (
    ABSENT,
    JSONRPC_VERSION,
    Batch,
    Id,
    Request,
    Response,
    Single,
    TopLevel,
    is_valid_id,
)

__all__ = [
    # Types
    "ABSENT",
    "JSONRPC_VERSION",
    "Id",
    "Request",
    "Response",
    "Single",
    "Batch",
    "TopLevel",
    "is_valid_id",
    # Parsing
    "parse_top",
    "decode_request",
    "invalid_request",
    "salvage_id",
    # Responses
    "to_response",
    "collect_batch",
    "encode",
]
