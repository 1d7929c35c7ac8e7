"""Dispatcher - routes one request to its method and captures the outcome."""

import logging
from typing import Any

from pydantic_core import PydanticSerializationError

from jsonrpc_core.errors import ErrorCode, ErrorFactory, RpcError, get_error_factory
from jsonrpc_core.logging import get_logger
from jsonrpc_core.params import bind_arguments
from jsonrpc_core.protocol import Request, Response, decode_request, salvage_id, to_response
from jsonrpc_core.registry import MethodRegistry


class Dispatcher:
    """Runs requests against a method registry.

    Every failure, whether raised by the core or by a handler, ends up as an
    RpcError in the outcome; nothing else escapes ``handle``.
    """

    def __init__(
        self,
        registry: MethodRegistry,
        error_factory: ErrorFactory | None = None,
        require_version: bool = False,
    ):
        """Initialize dispatcher.

        Args:
            registry: Methods available to callers
            error_factory: Converts handler exceptions (defaults to the shared factory)
            require_version: Reject requests whose "jsonrpc" member is not "2.0"
        """
        self._registry = registry
        self._error_factory = error_factory or get_error_factory()
        self._require_version = require_version
        self._logger = get_logger("dispatcher")

    async def dispatch(self, request: Request) -> Any:
        """Run one decoded request.

        Steps:
        1. Look up the method
        2. Bind arguments against its signature
        3. Invoke the handler
        4. Serialize the result

        Args:
            request: Decoded request

        Returns:
            JSON-compatible result

        Raises:
            RpcError: Method not found, invalid params, or the handler's failure
        """
        method = self._registry.lookup(request.method)
        if method is None:
            self._logger.debug("Method not found", method=request.method)
            raise self._error_factory.create("METHOD_NOT_FOUND", method=request.method)

        values = bind_arguments(method.signature, request.args)

        try:
            result = await method.call(values)
        except RpcError:
            raise
        except Exception as e:
            error = self._error_factory.from_exception(e)
            self._logger.exception(
                "Handler raised an exception",
                level=logging.WARNING,
                method=request.method,
                code=int(error.code),
            )
            raise error from e

        try:
            return method.serialize(result)
        except (PydanticSerializationError, ValueError, TypeError) as e:
            self._logger.error("Result is not serializable", method=request.method, detail=str(e))
            raise self._error_factory.create(
                "INTERNAL_ERROR", detail=f"result of {request.method} is not serializable"
            ) from e

    async def handle(self, value: Any) -> Response | None:
        """Decode, dispatch and wrap one request value.

        Args:
            value: Request object as parsed from JSON

        Returns:
            Response, or None if the request is a notification
        """
        try:
            request = decode_request(value, require_version=self._require_version)
        except RpcError as e:
            self._logger.debug("Invalid request", detail=str(e.data))
            return Response(id=salvage_id(value), error=e)

        try:
            result = await self.dispatch(request)
        except RpcError as e:
            if e.code == ErrorCode.INVALID_PARAMS:
                self._logger.debug("Invalid params", method=request.method, detail=e.message)
            return to_response(request.id, error=e)

        return to_response(request.id, result=result)
