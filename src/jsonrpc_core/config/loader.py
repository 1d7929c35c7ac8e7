"""Server configuration loader."""

import os
import re
from enum import Enum
from pathlib import Path
from typing import Any

import yaml

from jsonrpc_core.errors import ConfigError
from jsonrpc_core.types import (
    BatchMode,
    LogFormat,
    LogLevel,
    ValidationIssue,
    ValidationResult,
)

from .models import BatchConfig, LoggingConfig, ProtocolConfig, ServerConfig

CONFIG_PATH_ENV = "JSONRPC_CORE_CONFIG"
DEFAULT_CONFIG_FILE = "jsonrpc-core.yaml"

# section -> key -> expected type (Enum subclass or bool)
_SCHEMA: dict[str, dict[str, type]] = {
    "logging": {"level": LogLevel, "format": LogFormat},
    "protocol": {"require_version": bool, "reject_empty_batch": bool},
    "batch": {"mode": BatchMode},
}


def resolve_env_vars(value: str) -> str:
    """Resolve environment variable references in string.

    Supports:
    - ${VAR} - Required, error if not set
    - ${VAR:-default} - With default value
    - ${VAR:?error message} - Required with custom error

    Args:
        value: String with potential env var references

    Returns:
        String with env vars resolved

    Raises:
        ConfigError: If required var not set
    """
    pattern = r"\$\{([^}:]+)(?::([?-])([^}]*))?\}"

    def replacer(match: re.Match[str]) -> str:
        var_name = match.group(1)
        operator = match.group(2)  # '-' or '?' or None
        operand = match.group(3)  # default value or error message

        env_value = os.environ.get(var_name)
        if env_value is not None:
            return env_value

        if operator == "-":
            return operand or ""
        if operator == "?":
            raise ConfigError(
                "Invalid configuration",
                operand or f"Required environment variable {var_name} not set",
            )
        raise ConfigError(
            "Invalid configuration",
            f"Required environment variable {var_name} not set",
        )

    return re.sub(pattern, replacer, value)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries.

    Args:
        base: Base dictionary
        override: Override dictionary

    Returns:
        Merged dictionary
    """
    result = base.copy()

    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value

    return result


def _resolve_env_vars_recursive(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    if isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    if isinstance(data, str):
        return resolve_env_vars(data)
    return data


def _coerce(value: Any, expected: type) -> Any:
    """Convert a raw YAML value to the expected field type.

    Raises:
        ValueError: If the value cannot be converted
    """
    if expected is bool:
        if isinstance(value, bool):
            return value
        if isinstance(value, str) and value.lower() in ("true", "false"):
            return value.lower() == "true"
        raise ValueError(f"expected a boolean, got {value!r}")
    if issubclass(expected, Enum):
        if isinstance(value, expected):
            return value
        # Level names are case-insensitive; other enums use lower-case values
        raw = str(value).upper() if expected is LogLevel else str(value).lower()
        try:
            return expected(raw)
        except ValueError:
            allowed = ", ".join(member.value for member in expected)
            raise ValueError(f"expected one of {allowed}, got {value!r}") from None
    return value


class ConfigLoader:
    """Load and validate server configuration."""

    def __init__(self, logger: Any = None):
        """Initialize config loader.

        Args:
            logger: Optional RpcLogger instance
        """
        self._config: ServerConfig | None = None
        self._config_path: Path | None = None
        self._logger = logger

    @property
    def config(self) -> ServerConfig | None:
        """Most recently loaded configuration."""
        return self._config

    @property
    def config_path(self) -> Path | None:
        """Path of the most recently loaded file, if any."""
        return self._config_path

    def load(
        self,
        path: str | Path | None = None,
        use_defaults: bool = True,
        overrides: dict[str, Any] | None = None,
    ) -> ServerConfig:
        """Load configuration from file.

        Resolution order if path not specified:
        1. JSONRPC_CORE_CONFIG environment variable
        2. ./jsonrpc-core.yaml
        3. If use_defaults=True and no file found, use default configuration

        Args:
            path: Optional path to config file
            use_defaults: If True, use default config when no file found
            overrides: Values deep-merged over the file contents

        Returns:
            Loaded ServerConfig instance

        Raises:
            ConfigError: If file not found (when use_defaults=False) or invalid
        """
        if path is None:
            path = os.environ.get(CONFIG_PATH_ENV) or DEFAULT_CONFIG_FILE

        config_path = Path(path)
        if not config_path.exists():
            if use_defaults:
                if self._logger:
                    self._logger.info("No config file found, using default configuration")
                if overrides:
                    return self.load_dict({}, overrides)
                return self.load_defaults()
            raise ConfigError("Config file not found", str(config_path))

        try:
            with config_path.open() as f:
                raw = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError("Invalid YAML in config file", str(e)) from e

        if not isinstance(raw, dict):
            raise ConfigError("Invalid configuration", "top level must be a mapping")

        self._config = self.load_dict(raw, overrides)
        self._config_path = config_path
        if self._logger:
            self._logger.info("Loaded configuration", path=str(config_path))
        return self._config

    def load_defaults(self) -> ServerConfig:
        """Return the default configuration.

        Returns:
            ServerConfig with all defaults
        """
        self._config = ServerConfig()
        self._config_path = None
        return self._config

    def load_dict(
        self,
        data: dict[str, Any],
        overrides: dict[str, Any] | None = None,
    ) -> ServerConfig:
        """Build configuration from an already-parsed mapping.

        Args:
            data: Raw configuration mapping (env vars not yet resolved)
            overrides: Values deep-merged over data

        Returns:
            ServerConfig instance

        Raises:
            ConfigError: If validation fails
        """
        resolved = _resolve_env_vars_recursive(deep_merge(data, overrides or {}))
        result = self.validate(resolved)
        if not result.valid:
            details = "; ".join(f"{issue.path}: {issue.message}" for issue in result.errors)
            raise ConfigError("Invalid configuration", details)
        if self._logger:
            for issue in result.warnings:
                self._logger.warning("Config warning", path=issue.path, detail=issue.message)

        sections = {
            section: {
                key: _coerce(value, _SCHEMA[section][key])
                for key, value in (resolved.get(section) or {}).items()
                if key in _SCHEMA[section]
            }
            for section in _SCHEMA
        }
        self._config = ServerConfig(
            logging=LoggingConfig(**sections["logging"]),
            protocol=ProtocolConfig(**sections["protocol"]),
            batch=BatchConfig(**sections["batch"]),
        )
        return self._config

    def validate(self, data: dict[str, Any]) -> ValidationResult:
        """Validate a raw configuration mapping without building it.

        Unknown sections and keys are reported as warnings.

        Args:
            data: Raw configuration mapping

        Returns:
            ValidationResult with errors and warnings
        """
        errors: list[ValidationIssue] = []
        warnings: list[ValidationIssue] = []

        for section, values in data.items():
            if section not in _SCHEMA:
                warnings.append(ValidationIssue(section, "unknown section", "warning"))
                continue
            if values is None:
                continue
            if not isinstance(values, dict):
                errors.append(ValidationIssue(section, "must be a mapping"))
                continue
            for key, value in values.items():
                path = f"{section}.{key}"
                expected = _SCHEMA[section].get(key)
                if expected is None:
                    warnings.append(ValidationIssue(path, "unknown key", "warning"))
                    continue
                try:
                    _coerce(value, expected)
                except ValueError as e:
                    errors.append(ValidationIssue(path, str(e)))

        return ValidationResult(valid=not errors, errors=errors, warnings=warnings)


def load_config(path: str | Path | None = None) -> ServerConfig:
    """Convenience function to load configuration.

    Args:
        path: Optional path to config file

    Returns:
        Loaded ServerConfig instance
    """
    return ConfigLoader().load(path)
