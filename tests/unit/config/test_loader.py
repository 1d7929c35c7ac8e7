"""Tests for configuration loading."""

from pathlib import Path

import pytest

from jsonrpc_core.config import (
    CONFIG_PATH_ENV,
    ConfigLoader,
    ServerConfig,
    deep_merge,
    load_config,
    resolve_env_vars,
)
from jsonrpc_core.errors import ConfigError
from jsonrpc_core.types import BatchMode, LogFormat, LogLevel


@pytest.fixture
def isolated(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run in an empty directory with no config path override."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(CONFIG_PATH_ENV, raising=False)
    return tmp_path


def _write(path: Path, content: str) -> Path:
    path.write_text(content)
    return path


@pytest.mark.unit
class TestResolveEnvVars:
    """Tests for environment variable references."""

    def test_set_variable(self, monkeypatch):
        monkeypatch.setenv("RPC_LEVEL", "DEBUG")
        assert resolve_env_vars("${RPC_LEVEL}") == "DEBUG"

    def test_default(self, monkeypatch):
        monkeypatch.delenv("RPC_MODE", raising=False)
        assert resolve_env_vars("${RPC_MODE:-concurrent}") == "concurrent"

    def test_missing_required(self, monkeypatch):
        monkeypatch.delenv("RPC_MISSING", raising=False)
        with pytest.raises(ConfigError, match="RPC_MISSING"):
            resolve_env_vars("${RPC_MISSING}")

    def test_custom_error_message(self, monkeypatch):
        monkeypatch.delenv("RPC_MISSING", raising=False)
        with pytest.raises(ConfigError, match="set the mode"):
            resolve_env_vars("${RPC_MISSING:?set the mode}")

    def test_plain_text(self):
        assert resolve_env_vars("sequential") == "sequential"


@pytest.mark.unit
def test_deep_merge():
    base = {"logging": {"level": "INFO", "format": "json"}, "batch": {"mode": "sequential"}}
    merged = deep_merge(base, {"logging": {"level": "DEBUG"}})
    assert merged == {"logging": {"level": "DEBUG", "format": "json"}, "batch": {"mode": "sequential"}}
    assert base["logging"]["level"] == "INFO"


@pytest.mark.unit
class TestConfigLoader:
    """Tests for ConfigLoader."""

    def test_defaults_when_no_file(self, isolated):
        loader = ConfigLoader()
        assert loader.load() == ServerConfig()
        assert loader.config_path is None

    def test_missing_file_without_defaults(self, isolated):
        with pytest.raises(ConfigError, match="Config file not found"):
            ConfigLoader().load(isolated / "missing.yaml", use_defaults=False)

    def test_load_file(self, isolated):
        path = _write(
            isolated / "server.yaml",
            """
logging:
  level: debug
  format: colored
protocol:
  require_version: true
  reject_empty_batch: "true"
batch:
  mode: CONCURRENT
""",
        )
        loader = ConfigLoader()
        config = loader.load(path)

        assert config.logging.level == LogLevel.DEBUG
        assert config.logging.format == LogFormat.COLORED
        assert config.protocol.require_version is True
        assert config.protocol.reject_empty_batch is True
        assert config.batch.mode == BatchMode.CONCURRENT
        assert loader.config_path == path
        assert loader.config is config

    def test_partial_file_keeps_defaults(self, isolated):
        path = _write(isolated / "server.yaml", "batch:\n  mode: concurrent\n")
        config = ConfigLoader().load(path)
        assert config.batch.mode == BatchMode.CONCURRENT
        assert config.logging.level == LogLevel.INFO
        assert config.protocol.require_version is False

    def test_default_file_in_working_directory(self, isolated):
        _write(isolated / "jsonrpc-core.yaml", "logging:\n  level: ERROR\n")
        assert ConfigLoader().load().logging.level == LogLevel.ERROR

    def test_path_from_environment(self, isolated, monkeypatch):
        path = _write(isolated / "custom.yaml", "logging:\n  level: WARN\n")
        monkeypatch.setenv(CONFIG_PATH_ENV, str(path))
        assert load_config().logging.level == LogLevel.WARN

    def test_env_var_in_values(self, isolated, monkeypatch):
        monkeypatch.setenv("RPC_BATCH_MODE", "concurrent")
        path = _write(isolated / "server.yaml", "batch:\n  mode: ${RPC_BATCH_MODE}\n")
        assert ConfigLoader().load(path).batch.mode == BatchMode.CONCURRENT

    def test_overrides(self, isolated):
        path = _write(isolated / "server.yaml", "logging:\n  level: ERROR\n  format: colored\n")
        config = ConfigLoader().load(path, overrides={"logging": {"level": "DEBUG"}})
        assert config.logging.level == LogLevel.DEBUG
        assert config.logging.format == LogFormat.COLORED

    def test_overrides_without_file(self, isolated):
        config = ConfigLoader().load(overrides={"batch": {"mode": "concurrent"}})
        assert config.batch.mode == BatchMode.CONCURRENT

    def test_empty_file(self, isolated):
        path = _write(isolated / "server.yaml", "")
        assert ConfigLoader().load(path) == ServerConfig()

    def test_invalid_yaml(self, isolated):
        path = _write(isolated / "server.yaml", "logging: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigLoader().load(path)

    def test_top_level_must_be_mapping(self, isolated):
        path = _write(isolated / "server.yaml", "- a\n- b\n")
        with pytest.raises(ConfigError, match="top level must be a mapping"):
            ConfigLoader().load(path)

    def test_invalid_value(self, isolated):
        path = _write(isolated / "server.yaml", "batch:\n  mode: parallel\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigLoader().load(path)
        assert "batch.mode" in exc_info.value.detail
        assert "sequential, concurrent" in exc_info.value.detail


@pytest.mark.unit
class TestValidate:
    """Tests for ConfigLoader.validate."""

    def test_valid(self):
        result = ConfigLoader().validate({"logging": {"level": "INFO"}})
        assert result.valid
        assert result.errors == []

    def test_unknown_section_and_key_are_warnings(self):
        result = ConfigLoader().validate({"server": {}, "logging": {"colour": True}})
        assert result.valid
        assert [w.path for w in result.warnings] == ["server", "logging.colour"]
        assert all(w.severity == "warning" for w in result.warnings)

    def test_wrong_types(self):
        result = ConfigLoader().validate(
            {"protocol": {"require_version": "yes"}, "logging": {"level": "LOUD"}, "batch": "fast"}
        )
        assert not result.valid
        assert {e.path for e in result.errors} == {"protocol.require_version", "logging.level", "batch"}

    def test_null_section_allowed(self):
        assert ConfigLoader().validate({"logging": None}).valid
