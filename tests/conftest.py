"""
Pytest configuration and shared fixtures for JSON-RPC core tests.
"""

import asyncio
import json
import sys
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from jsonrpc_core import (  # noqa: E402
    MethodRegistry,
    OptionalParam,
    RequiredParam,
    build_method,
    build_registry,
    rpc_error,
)
from jsonrpc_core.logging import reset_loggers  # noqa: E402

# =============================================================================
# Logger State
# =============================================================================


@pytest.fixture(autouse=True)
def reset_logger_state():
    """Reset logger cache before and after each test."""
    reset_loggers()
    yield
    reset_loggers()


# =============================================================================
# Registry Fixtures
# =============================================================================


def _subtract(a: int, b: int) -> int:
    return a - b


async def _slow_echo(value: Any, delay: float) -> Any:
    await asyncio.sleep(delay)
    return value


def _fail_custom() -> None:
    raise rpc_error(-32001, "custom failure")


def _fail_plain() -> None:
    raise RuntimeError("boom")


def _fail_silent() -> None:
    raise RuntimeError()


def _not_serializable() -> object:
    return object()


@pytest.fixture
def registry() -> MethodRegistry:
    """Registry with a handful of typical methods."""
    return build_registry(
        [
            build_method("subtract", _subtract),
            build_method(
                "add",
                lambda a, b: a + b,
                [RequiredParam("a", int), OptionalParam("b", 5, int)],
            ),
            build_method("echo", lambda value: value, [RequiredParam("value")]),
            build_method("slow_echo", _slow_echo),
            build_method("fail_custom", _fail_custom),
            build_method("fail_plain", _fail_plain),
            build_method("fail_silent", _fail_silent),
            build_method("not_serializable", _not_serializable, []),
        ]
    )


@pytest.fixture
def request_bytes() -> Callable[..., bytes]:
    """Build a raw JSON-RPC request payload."""

    def _build(method: str, params: Any = None, **extra: Any) -> bytes:
        message: dict[str, Any] = {"jsonrpc": "2.0", "method": method}
        if params is not None:
            message["params"] = params
        message.update(extra)
        return json.dumps(message).encode()

    return _build


# =============================================================================
# Markers Configuration
# =============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "property: Property-based tests")
