# ============================================================================
# CONFIGURATION TESTS
# ============================================================================
# STATUS: Tests - Replicas file and defaults
# PURPOSE: Verify YAML parsing, validation errors and env defaults
# CREATED: 19 OCT 2026
# ============================================================================
"""
Configuration Tests

Run with:
    pytest tests/test_config.py -v
"""

import dataclasses

import pytest

from core.config import (
    HealthcheckDefaults,
    get_defaults,
    load_config,
    parse_config,
    reset_defaults,
)
from core.errors import ConfigError


REPLICAS_YAML = """
replica1:
  host: 10.0.0.11
  port: 3307
  user: healthcheck
  password: secret
  max_seconds_behind_source: 10
  fail_replica_not_running: true
  healthcheck_config:
    port: 8081
    path: /health

replica2:
  host: 10.0.0.12
  healthcheck_config:
    port: 8082
"""


# ============================================================================
# LOADING
# ============================================================================

class TestLoadConfig:

    def test_load_file(self, tmp_path):
        path = tmp_path / "replicas.yml"
        path.write_text(REPLICAS_YAML)

        settings = load_config(path)

        assert [s.name for s in settings] == ["replica1", "replica2"]
        first = settings[0]
        assert first.host == "10.0.0.11"
        assert first.port == 3307
        assert first.max_allowed_lag_seconds == 10
        assert first.fail_if_not_replicating is True
        assert first.healthcheck_port == 8081
        assert first.healthcheck_path == "/health"

    def test_defaults_applied(self, tmp_path):
        path = tmp_path / "replicas.yml"
        path.write_text(REPLICAS_YAML)

        second = load_config(path)[1]

        assert second.port == 3306
        assert second.max_allowed_lag_seconds == 0
        assert second.fail_if_not_replicating is False
        assert second.healthcheck_path == "/"

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="failed to read config"):
            load_config(tmp_path / "nope.yml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "replicas.yml"
        path.write_text("replica1: [unclosed")
        with pytest.raises(ConfigError, match="failed to parse config"):
            load_config(path)

    def test_empty_file_has_no_replicas(self, tmp_path):
        path = tmp_path / "replicas.yml"
        path.write_text("")
        assert load_config(path) == []


# ============================================================================
# VALIDATION
# ============================================================================

class TestParseConfig:

    def test_non_mapping_document(self):
        with pytest.raises(ConfigError, match="mapping"):
            parse_config(["replica1"])

    def test_non_mapping_replica(self):
        with pytest.raises(ConfigError) as exc_info:
            parse_config({"replica1": "localhost"})
        assert exc_info.value.replica == "replica1"

    def test_negative_lag_rejected(self):
        with pytest.raises(ConfigError, match="max_seconds_behind_source"):
            parse_config({"replica1": {"max_seconds_behind_source": -1}})

    def test_bad_port_type_rejected(self):
        with pytest.raises(ConfigError, match="replica1"):
            parse_config({"replica1": {"healthcheck_config": {"port": "eighty"}}})

    def test_relative_path_rejected(self):
        with pytest.raises(ConfigError, match="path"):
            parse_config({"replica1": {"healthcheck_config": {"port": 8080, "path": "health"}}})

    def test_missing_port_parses_as_zero(self):
        """Reported by the fleet manager, not the parser."""
        settings = parse_config({"replica1": {"host": "db"}})
        assert settings[0].healthcheck_port == 0

    def test_null_values(self):
        settings = parse_config({"replica1": {"password": None, "healthcheck_config": None}})
        assert settings[0].password == ""
        assert settings[0].healthcheck_path == "/"

    def test_unknown_keys_ignored(self):
        settings = parse_config({"replica1": {"healthcheck_config": {"port": 1}, "comment": "x"}})
        assert settings[0].healthcheck_port == 1

    def test_settings_are_immutable(self):
        settings = parse_config({"replica1": {"healthcheck_config": {"port": 1}}})[0]
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.healthcheck_port = 2

    def test_password_hidden_from_repr(self):
        settings = parse_config({"replica1": {"password": "hunter2"}})[0]
        assert "hunter2" not in repr(settings)


# ============================================================================
# DEFAULTS
# ============================================================================

class TestHealthcheckDefaults:

    def test_builtin_defaults(self):
        defaults = HealthcheckDefaults()
        assert defaults.read_timeout_seconds == 10.0
        assert defaults.status_query == "SHOW REPLICA STATUS"
        assert defaults.config_path == "/etc/mysql-replica-healthcheck-agent/replicas.yml"

    def test_from_env(self, monkeypatch):
        monkeypatch.setenv("HEALTHCHECK_LISTEN_HOST", "127.0.0.1")
        monkeypatch.setenv("HEALTHCHECK_READ_TIMEOUT", "2.5")
        monkeypatch.setenv("HEALTHCHECK_SHUTDOWN_GRACE", "1")

        defaults = HealthcheckDefaults.from_env()

        assert defaults.listen_host == "127.0.0.1"
        assert defaults.read_timeout_seconds == 2.5
        assert defaults.shutdown_grace_seconds == 1.0

    def test_get_defaults_reloads_after_reset(self, monkeypatch):
        monkeypatch.setenv("HEALTHCHECK_SHUTDOWN_GRACE", "3")
        reset_defaults()
        try:
            assert get_defaults().shutdown_grace_seconds == 3.0
            assert get_defaults() is get_defaults()
        finally:
            reset_defaults()
