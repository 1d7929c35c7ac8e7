"""Call surface - handles one JSON-RPC request payload end to end.

Usage:
    registry = build_registry([build_method("add", add)])
    body = await call(registry, b'{"jsonrpc": "2.0", "method": "add", "params": [1, 2], "id": 1}')
"""

import asyncio

from jsonrpc_core.config import ProtocolConfig
from jsonrpc_core.dispatch import BatchStrategy, Dispatcher, evaluate_batch, sequential
from jsonrpc_core.errors import ErrorFactory, RpcError
from jsonrpc_core.logging import get_logger
from jsonrpc_core.protocol import (
    Batch,
    Response,
    collect_batch,
    encode,
    invalid_request,
    parse_top,
)
from jsonrpc_core.registry import MethodRegistry


class RpcServer:
    """Handles raw request payloads against a fixed registry.

    Holds no per-call state, so one instance may serve concurrent calls.
    """

    def __init__(
        self,
        registry: MethodRegistry,
        strategy: BatchStrategy = sequential,
        protocol: ProtocolConfig | None = None,
        error_factory: ErrorFactory | None = None,
    ):
        """Initialize server.

        Args:
            registry: Methods available to callers
            strategy: Batch evaluation strategy (default: sequential)
            protocol: Protocol strictness options (default: lenient)
            error_factory: Converts handler exceptions to RpcErrors
        """
        self._registry = registry
        self._strategy = strategy
        self._protocol = protocol or ProtocolConfig()
        self._dispatcher = Dispatcher(
            registry,
            error_factory=error_factory,
            require_version=self._protocol.require_version,
        )
        self._logger = get_logger("server")

    @property
    def registry(self) -> MethodRegistry:
        return self._registry

    async def handle(self, data: bytes | str) -> bytes | None:
        """Handle one request payload.

        Args:
            data: Raw request (single object or batch array)

        Returns:
            Response bytes, or None when nothing is to be answered
            (a notification, or a batch of notifications)
        """
        try:
            top = parse_top(data)
        except RpcError as e:
            self._logger.debug("Rejected payload", code=int(e.code), detail=e.message)
            return encode(Response(id=None, error=e))

        if not isinstance(top, Batch):
            response = await self._dispatcher.handle(top.payload)
            return encode(response) if response is not None else None

        if not top.items and self._protocol.reject_empty_batch:
            return encode(Response(id=None, error=invalid_request("Empty batch")))

        responses = await evaluate_batch(self._strategy, self._dispatcher, top.items)
        collected = collect_batch(responses)
        return encode(collected) if collected is not None else None


async def call(registry: MethodRegistry, data: bytes | str) -> bytes | None:
    """Handle one JSON-RPC request, evaluating batches sequentially.

    Same as ``call_with_strategy(sequential, registry, data)``.

    Args:
        registry: Methods available to callers
        data: Raw request

    Returns:
        Response bytes, or None for a notification / all-notification batch
    """
    return await call_with_strategy(sequential, registry, data)


async def call_with_strategy(
    strategy: BatchStrategy,
    registry: MethodRegistry,
    data: bytes | str,
    protocol: ProtocolConfig | None = None,
) -> bytes | None:
    """Handle one JSON-RPC request with a caller-chosen batch strategy.

    Args:
        strategy: Evaluation strategy for batch elements
        registry: Methods available to callers
        data: Raw request
        protocol: Protocol strictness options (default: lenient)

    Returns:
        Response bytes, or None for a notification / all-notification batch
    """
    return await RpcServer(registry, strategy, protocol).handle(data)


def call_sync(registry: MethodRegistry, data: bytes | str) -> bytes | None:
    """Blocking variant of ``call`` for hosts without an event loop.

    Must not be used from inside a running event loop.
    """
    return asyncio.run(call(registry, data))
