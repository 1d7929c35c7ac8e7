"""Tests for batch evaluation strategies."""

import asyncio

import pytest

from jsonrpc_core.dispatch import Dispatcher, concurrent, evaluate_batch, get_strategy, sequential
from jsonrpc_core.types import BatchMode


async def _record(completed: list[int], index: int, delay: float) -> int:
    await asyncio.sleep(delay)
    completed.append(index)
    return index


@pytest.mark.unit
class TestStrategies:
    """Tests for the built-in strategies."""

    @pytest.mark.asyncio
    async def test_sequential_runs_in_order(self):
        completed: list[int] = []
        results = await sequential([_record(completed, 0, 0.02), _record(completed, 1, 0)])
        assert results == [0, 1]
        assert completed == [0, 1]

    @pytest.mark.asyncio
    async def test_concurrent_keeps_input_order(self):
        completed: list[int] = []
        results = await concurrent([_record(completed, 0, 0.05), _record(completed, 1, 0)])
        assert results == [0, 1]
        assert completed == [1, 0]

    @pytest.mark.asyncio
    async def test_empty(self):
        assert await sequential([]) == []
        assert await concurrent([]) == []

    def test_get_strategy(self):
        assert get_strategy(BatchMode.SEQUENTIAL) is sequential
        assert get_strategy(BatchMode.CONCURRENT) is concurrent


@pytest.mark.unit
class TestEvaluateBatch:
    """Tests for evaluate_batch."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("strategy", [sequential, concurrent])
    async def test_one_entry_per_element(self, registry, strategy):
        values = [
            {"method": "slow_echo", "params": ["first", 0.03], "id": 1},
            {"method": "echo", "params": ["note"]},
            "not a request",
            {"method": "foo", "id": 3},
            {"method": "slow_echo", "params": ["last", 0], "id": 4},
        ]
        responses = await evaluate_batch(strategy, Dispatcher(registry), values)

        assert len(responses) == 5
        assert responses[0].result == "first"
        assert responses[1] is None
        assert responses[2].error.code == -32600
        assert responses[3].error.code == -32601
        assert responses[4].result == "last"

    @pytest.mark.asyncio
    async def test_custom_strategy(self, registry):
        seen: list[int] = []

        async def counting(tasks):
            seen.append(len(tasks))
            return await sequential(tasks)

        values = [{"method": "echo", "params": [i], "id": i} for i in range(3)]
        responses = await evaluate_batch(counting, Dispatcher(registry), values)
        assert seen == [3]
        assert [r.result for r in responses] == [0, 1, 2]
