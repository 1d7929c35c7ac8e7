"""Server configuration - models and YAML loading."""

from .loader import (
    CONFIG_PATH_ENV,
    ConfigLoader,
    deep_merge,
    load_config,
    resolve_env_vars,
)
from .models import BatchConfig, LoggingConfig, ProtocolConfig, ServerConfig

__all__ = [
    # Config models
    "ServerConfig",
    "LoggingConfig",
    "ProtocolConfig",
    "BatchConfig",
    # Loader
    "ConfigLoader",
    "load_config",
    "CONFIG_PATH_ENV",
    # Utilities
    "resolve_env_vars",
    "deep_merge",
]
