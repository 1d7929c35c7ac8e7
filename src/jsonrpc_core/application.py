"""RPC Application - wires configuration, logging and the server together.

Hosts that want file-based configuration use this instead of assembling
RpcServer by hand:

    app = RpcApplication([build_method("add", add)], config_path="jsonrpc-core.yaml")
    await app.initialize()
    body = await app.handle(request_bytes)
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jsonrpc_core.config import ConfigLoader, ServerConfig
from jsonrpc_core.dispatch import get_strategy
from jsonrpc_core.errors import ErrorFactory, ErrorMatcher, ErrorRegistry, ErrorTemplate
from jsonrpc_core.errors.matchers import ErrorMatcherChain
from jsonrpc_core.logging import configure_logging, get_logger
from jsonrpc_core.registry import Method, MethodRegistry, build_registry
from jsonrpc_core.server import RpcServer


class RpcApplication:
    """
    JSON-RPC application orchestrator.

    Initialization sequence:

    1. Config loading
    2. Logger setup
    3. Error registry (built-in + host templates) and matchers
    4. Method registry
    5. Server with the configured batch strategy
    """

    def __init__(
        self,
        methods: Iterable[Method],
        config_path: str | Path | None = None,
        config_overrides: dict[str, Any] | None = None,
        error_templates: Iterable[ErrorTemplate] = (),
        error_matchers: Iterable[ErrorMatcher] = (),
    ):
        """Initialize application.

        Args:
            methods: Methods to serve
            config_path: Path to config file (optional)
            config_overrides: Values merged over the loaded configuration
            error_templates: Host-defined error templates
            error_matchers: Host exception matchers, consulted in order
        """
        self._methods = list(methods)
        self._config_path = config_path
        self._config_overrides = config_overrides
        self._error_templates = list(error_templates)
        self._error_matchers = list(error_matchers)
        self._initialized = False

        # Components (initialized in initialize())
        self.config: ServerConfig | None = None
        self.error_factory: ErrorFactory | None = None
        self.registry: MethodRegistry | None = None
        self.server: RpcServer | None = None

    @property
    def initialized(self) -> bool:
        return self._initialized

    async def initialize(self) -> None:
        """Initialize all components. Safe to call more than once."""
        if self._initialized:
            return

        # 1. Config
        loader = ConfigLoader(logger=get_logger("config"))
        self.config = loader.load(self._config_path, overrides=self._config_overrides)

        # 2. Logger
        configure_logging(self.config.logging)
        logger = get_logger("application")

        # 3. Errors
        error_registry = ErrorRegistry()
        for template in self._error_templates:
            error_registry.register(template)
        self.error_factory = ErrorFactory(
            registry=error_registry,
            matcher_chain=ErrorMatcherChain(self._error_matchers),
        )

        # 4. Methods
        self.registry = build_registry(self._methods)

        # 5. Server
        self.server = RpcServer(
            self.registry,
            strategy=get_strategy(self.config.batch.mode),
            protocol=self.config.protocol,
            error_factory=self.error_factory,
        )

        self._initialized = True
        logger.info(
            "JSON-RPC application initialized",
            methods=len(self.registry),
            batch_mode=self.config.batch.mode.value,
        )

    async def handle(self, data: bytes | str) -> bytes | None:
        """Handle one request payload, initializing on first use.

        Args:
            data: Raw request

        Returns:
            Response bytes, or None when nothing is to be answered

        Raises:
            RuntimeError: If initialization did not produce a server
        """
        if not self._initialized:
            await self.initialize()

        if not self.server:
            raise RuntimeError("Application not initialized")

        return await self.server.handle(data)
