"""Server configuration data models."""

from dataclasses import dataclass, field

from jsonrpc_core.types import BatchMode, LogFormat, LogLevel


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: LogLevel = LogLevel.INFO
    format: LogFormat = LogFormat.JSON


@dataclass
class ProtocolConfig:
    """Protocol strictness options.

    Defaults keep the lenient behaviour: the "jsonrpc" member is not checked
    and an empty batch produces no response.
    """

    require_version: bool = False
    reject_empty_batch: bool = False


@dataclass
class BatchConfig:
    """Batch evaluation configuration."""

    mode: BatchMode = BatchMode.SEQUENTIAL


@dataclass
class ServerConfig:
    """Root configuration."""

    logging: LoggingConfig = field(default_factory=LoggingConfig)
    protocol: ProtocolConfig = field(default_factory=ProtocolConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
