"""Error registry for creating RpcErrors from templates."""

from typing import Any

from .errors import ErrorCode, ErrorTemplate, RpcError


class ErrorRegistry:
    """Registry of error templates. Creates errors from templates + context."""

    def __init__(self) -> None:
        """Initialize error registry with built-in templates."""
        self._templates: dict[str, ErrorTemplate] = {}
        self._load_builtin_templates()

    def get_template(self, key: str) -> ErrorTemplate | None:
        """Get template by key.

        Args:
            key: Template key to look up

        Returns:
            ErrorTemplate if found, None otherwise
        """
        return self._templates.get(key)

    def list_keys(self) -> list[str]:
        """List all registered template keys.

        Returns:
            List of template keys
        """
        return list(self._templates.keys())

    def register(self, template: ErrorTemplate) -> None:
        """Add a host-defined template.

        Args:
            template: Template to add

        Raises:
            ValueError: If a template with the same key exists
        """
        if template.key in self._templates:
            msg = f"Error template already registered: {template.key}"
            raise ValueError(msg)
        self._templates[template.key] = template

    def create(
        self,
        key: str,
        context: dict[str, Any] | None = None,
        data: Any = None,
    ) -> RpcError:
        """Create error instance from template + context.

        Args:
            key: Template key
            context: Context variables for message interpolation
            data: Optional error data

        Returns:
            RpcError instance

        Raises:
            ValueError: If template key not found
        """
        template = self.get_template(key)
        if not template:
            msg = f"Unknown error template: {key}"
            raise ValueError(msg)

        message = self._interpolate(template.message_template, context or {})
        return RpcError(code=template.code, message=message, data=data)

    def _interpolate(self, template: str, context: dict[str, Any]) -> str:
        """Safe string interpolation.

        Args:
            template: Template string with {var} placeholders
            context: Context variables

        Returns:
            Interpolated string, or the template as-is if a variable is missing
        """
        try:
            return template.format(**context)
        except (KeyError, IndexError):
            return template

    def _load_builtin_templates(self) -> None:
        """Load hardcoded built-in templates."""
        # Protocol errors
        self._templates["PARSE_ERROR"] = ErrorTemplate(
            key="PARSE_ERROR",
            code=ErrorCode.PARSE_ERROR,
            message_template="Invalid JSON",
        )

        self._templates["INVALID_REQUEST"] = ErrorTemplate(
            key="INVALID_REQUEST",
            code=ErrorCode.INVALID_REQUEST,
            message_template="Invalid JSON RPC 2.0 request",
        )

        self._templates["METHOD_NOT_FOUND"] = ErrorTemplate(
            key="METHOD_NOT_FOUND",
            code=ErrorCode.METHOD_NOT_FOUND,
            message_template="Method not found: {method}",
        )

        # Argument binding errors
        self._templates["MISSING_ARGUMENT"] = ErrorTemplate(
            key="MISSING_ARGUMENT",
            code=ErrorCode.INVALID_PARAMS,
            message_template="Cannot find required argument: {name}",
        )

        self._templates["WRONG_ARGUMENT_TYPE"] = ErrorTemplate(
            key="WRONG_ARGUMENT_TYPE",
            code=ErrorCode.INVALID_PARAMS,
            message_template="Wrong type for argument: {name}",
        )

        # Server errors
        self._templates["INTERNAL_ERROR"] = ErrorTemplate(
            key="INTERNAL_ERROR",
            code=ErrorCode.INTERNAL_ERROR,
            message_template="Internal error: {detail}",
        )

        self._templates["SERVER_ERROR"] = ErrorTemplate(
            key="SERVER_ERROR",
            code=ErrorCode.SERVER_ERROR,
            message_template="{message}",
        )

        self._templates["UNKNOWN_ERROR"] = ErrorTemplate(
            key="UNKNOWN_ERROR",
            code=ErrorCode.SERVER_ERROR,
            message_template="unknown error",
        )
