"""Batch evaluation strategies."""

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from typing import Any, TypeVar

from jsonrpc_core.protocol import Response
from jsonrpc_core.types import BatchMode

from .dispatcher import Dispatcher

T = TypeVar("T")

# Runs a sequence of pending computations, returning results in input order
BatchStrategy = Callable[[Sequence[Awaitable[Any]]], Awaitable[list[Any]]]


async def sequential(tasks: Sequence[Awaitable[T]]) -> list[T]:
    """Await tasks one after another, in order."""
    return [await task for task in tasks]


async def concurrent(tasks: Sequence[Awaitable[T]]) -> list[T]:
    """Run tasks concurrently on the current event loop.

    Results keep input order regardless of completion order.
    """
    return list(await asyncio.gather(*tasks))


_STRATEGIES: dict[BatchMode, BatchStrategy] = {
    BatchMode.SEQUENTIAL: sequential,
    BatchMode.CONCURRENT: concurrent,
}


def get_strategy(mode: BatchMode) -> BatchStrategy:
    """Return the built-in strategy for a batch mode."""
    return _STRATEGIES[mode]


async def evaluate_batch(
    strategy: BatchStrategy,
    dispatcher: Dispatcher,
    values: Sequence[Any],
) -> list[Response | None]:
    """Handle every element of a batch under the given strategy.

    Elements are independent: a malformed or failing element only affects its
    own response.

    Args:
        strategy: Evaluation strategy
        dispatcher: Dispatcher used for each element
        values: Raw batch elements

    Returns:
        One entry per element, in input order; None for notifications
    """
    return await strategy([dispatcher.handle(value) for value in values])
