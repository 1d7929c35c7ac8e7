"""JSON-RPC Core - transport-agnostic JSON-RPC 2.0 request handling.

Turns a raw request payload into a raw response payload (or nothing) given a
registry of named handlers. Embedding hosts own the transport.
"""

from jsonrpc_core.application import RpcApplication
from jsonrpc_core.dispatch import BatchStrategy, concurrent, sequential
from jsonrpc_core.errors import ErrorCode, RpcError, rpc_error, rpc_error_with_data
from jsonrpc_core.params import MethodSignature, OptionalParam, RequiredParam
from jsonrpc_core.registry import Method, MethodRegistry, build_method, build_registry
from jsonrpc_core.server import RpcServer, call, call_sync, call_with_strategy

__version__ = "1.0.0"
__all__ = [
    "__version__",
    # Entry points
    "call",
    "call_with_strategy",
    "call_sync",
    "RpcServer",
    "RpcApplication",
    # Methods
    "Method",
    "MethodRegistry",
    "build_method",
    "build_registry",
    "RequiredParam",
    "OptionalParam",
    "MethodSignature",
    # Batch strategies
    "BatchStrategy",
    "sequential",
    "concurrent",
    # Errors
    "RpcError",
    "ErrorCode",
    "rpc_error",
    "rpc_error_with_data",
]
