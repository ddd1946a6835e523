"""Tests for settings resolution."""

from __future__ import annotations

from pathlib import Path

import pytest

from azure_secret_monitor.application.exceptions import ConfigurationError
from azure_secret_monitor.domain.value_objects import OutputFormat
from azure_secret_monitor.infrastructure.config import Settings, load_settings

CREDENTIALS = {"tenant_id": "tenant", "client_id": "client", "client_secret": "secret"}


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory so no ./config.yaml is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _write_config(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


class TestLoadSettings:
    """Tests for load_settings."""

    def test_defaults(self) -> None:
        """Unset optional values fall back to built-in defaults."""
        settings = load_settings(CREDENTIALS, environ={})

        assert settings.monitor_tag == "MonitorSecrets"
        assert settings.expiry_threshold_days == 30
        assert settings.output_format is OutputFormat.TEXT
        assert settings.log_level == "INFO"

    def test_environment(self) -> None:
        """AZURE_* variables configure every key."""
        settings = load_settings(
            environ={
                "AZURE_TENANT_ID": "env-tenant",
                "AZURE_CLIENT_ID": "env-client",
                "AZURE_CLIENT_SECRET": "env-secret",
                "AZURE_MONITOR_TAG": "EnvTag",
                "AZURE_EXPIRY_THRESHOLD_DAYS": "14",
                "AZURE_FORMAT": "json",
                "AZURE_LOG_LEVEL": "debug",
            }
        )

        assert settings.tenant_id == "env-tenant"
        assert settings.client_id == "env-client"
        assert settings.client_secret == "env-secret"
        assert settings.monitor_tag == "EnvTag"
        assert settings.expiry_threshold_days == 14
        assert settings.output_format is OutputFormat.JSON
        assert settings.log_level == "DEBUG"

    def test_config_file(self, tmp_path: Path) -> None:
        """Values are read from an explicit YAML file."""
        config = _write_config(
            tmp_path / "monitor.yaml",
            "tenant_id: file-tenant\nclient_id: file-client\nclient_secret: file-secret\n"
            "monitor_tag: FileTag\nexpiry_threshold_days: 60\nformat: json\nunknown_key: ignored\n",
        )

        settings = load_settings(config_file=config, environ={})

        assert settings.tenant_id == "file-tenant"
        assert settings.monitor_tag == "FileTag"
        assert settings.expiry_threshold_days == 60
        assert settings.output_format is OutputFormat.JSON

    def test_default_config_file_in_working_directory(self, isolated_cwd: Path) -> None:
        """./config.yaml is used when no file is given."""
        _write_config(isolated_cwd / "config.yaml", "tenant_id: t\nclient_id: c\nclient_secret: s\nmonitor_tag: Cwd\n")
        assert load_settings(environ={}).monitor_tag == "Cwd"

    def test_json_config_file(self, tmp_path: Path) -> None:
        """JSON config files are accepted."""
        config = _write_config(
            tmp_path / "config.json",
            '{"tenant_id": "t", "client_id": "c", "client_secret": "s", "expiry_threshold_days": 5}',
        )
        assert load_settings(config_file=config, environ={}).expiry_threshold_days == 5

    def test_precedence(self, tmp_path: Path) -> None:
        """Flags override environment, which overrides the file, which overrides defaults."""
        config = _write_config(
            tmp_path / "config.yaml",
            "tenant_id: file\nclient_id: file\nclient_secret: file\nmonitor_tag: FileTag\nexpiry_threshold_days: 60\n",
        )
        environ = {"AZURE_CLIENT_ID": "env", "AZURE_MONITOR_TAG": "EnvTag", "AZURE_EXPIRY_THRESHOLD_DAYS": "45"}
        overrides = {"monitor_tag": "FlagTag", "client_secret": None, "format": None}

        settings = load_settings(overrides, config_file=config, environ=environ)

        assert settings.monitor_tag == "FlagTag"
        assert settings.expiry_threshold_days == 45
        assert settings.client_id == "env"
        assert settings.tenant_id == "file"
        assert settings.client_secret == "file"
        assert settings.output_format is OutputFormat.TEXT

    @pytest.mark.parametrize("missing", ["tenant_id", "client_id", "client_secret"])
    def test_required_credentials(self, missing: str) -> None:
        """Each credential field is required."""
        values = {**CREDENTIALS, missing: ""}
        with pytest.raises(ConfigurationError, match="missing required configuration"):
            load_settings(values, environ={})

    def test_all_missing_credentials_reported(self) -> None:
        """All missing fields are listed in one error."""
        with pytest.raises(ConfigurationError) as excinfo:
            load_settings(environ={})
        message = str(excinfo.value)
        assert "tenant ID" in message
        assert "client ID" in message
        assert "client secret" in message

    @pytest.mark.parametrize("value", ["xml", "JSON", "Text", ""])
    def test_invalid_format(self, value: str) -> None:
        """Format must be exactly text or json."""
        with pytest.raises(ConfigurationError, match="must be 'text' or 'json'"):
            load_settings({**CREDENTIALS, "format": value}, environ={})

    def test_invalid_threshold(self) -> None:
        """Non-integer thresholds are rejected."""
        with pytest.raises(ConfigurationError, match="must be an integer"):
            load_settings(CREDENTIALS, environ={"AZURE_EXPIRY_THRESHOLD_DAYS": "soon"})

    def test_negative_threshold_allowed(self) -> None:
        """Negative thresholds select only overdue secrets and are valid."""
        assert load_settings({**CREDENTIALS, "expiry_threshold_days": -3}, environ={}).expiry_threshold_days == -3

    def test_invalid_log_level(self) -> None:
        """Unknown log levels are rejected."""
        with pytest.raises(ConfigurationError, match="invalid log level"):
            load_settings({**CREDENTIALS, "log_level": "chatty"}, environ={})

    def test_missing_explicit_config_file(self, tmp_path: Path) -> None:
        """An explicitly named file must exist."""
        with pytest.raises(ConfigurationError, match="error reading config file"):
            load_settings(CREDENTIALS, config_file=tmp_path / "absent.yaml", environ={})

    def test_unparseable_config_file(self, tmp_path: Path) -> None:
        """Invalid YAML is a configuration error."""
        config = _write_config(tmp_path / "config.yaml", "tenant_id: [unclosed\n")
        with pytest.raises(ConfigurationError, match="error parsing config file"):
            load_settings(CREDENTIALS, config_file=config, environ={})

    def test_config_file_must_be_mapping(self, tmp_path: Path) -> None:
        """A YAML list is not a valid config file."""
        config = _write_config(tmp_path / "config.yaml", "- a\n- b\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_settings(CREDENTIALS, config_file=config, environ={})

    def test_empty_config_file(self, tmp_path: Path) -> None:
        """An empty file contributes nothing."""
        config = _write_config(tmp_path / "config.yaml", "")
        assert load_settings(CREDENTIALS, config_file=config, environ={}).monitor_tag == "MonitorSecrets"


class TestSettings:
    """Tests for the Settings record."""

    def test_secret_not_in_repr(self) -> None:
        """The client secret is never echoed."""
        settings = Settings(tenant_id="t", client_id="c", client_secret="super-secret")
        assert "super-secret" not in repr(settings)

    def test_settings_are_frozen(self) -> None:
        """Settings are immutable after construction."""
        settings = Settings(tenant_id="t", client_id="c", client_secret="s")
        with pytest.raises(AttributeError):
            settings.monitor_tag = "Other"  # type: ignore[misc]

    def test_graph_config(self) -> None:
        """Graph client configuration is derived from the credentials."""
        config = Settings(tenant_id="t", client_id="c", client_secret="s").graph_config
        assert (config.tenant_id, config.client_id, config.client_secret) == ("t", "c", "s")

    def test_tag_pattern(self) -> None:
        """The monitor tag is exposed as a compiled pattern."""
        pattern = Settings(tenant_id="t", client_id="c", client_secret="s", monitor_tag="Mon.*").tag_pattern
        assert pattern.matches(["MonitorSecrets"]) is True


class TestEmptyEnvironmentVariables:
    """Empty AZURE_* variables count as unset."""

    def test_empty_variables_do_not_override_file(self, tmp_path: Path) -> None:
        """Config file values survive empty environment variables."""
        config = _write_config(
            tmp_path / "config.yaml",
            "tenant_id: file-tenant\nclient_id: c\nclient_secret: s\nmonitor_tag: FileTag\nexpiry_threshold_days: 60\n",
        )
        environ = {"AZURE_TENANT_ID": "", "AZURE_MONITOR_TAG": "", "AZURE_EXPIRY_THRESHOLD_DAYS": ""}

        settings = load_settings(config_file=config, environ=environ)

        assert settings.tenant_id == "file-tenant"
        assert settings.monitor_tag == "FileTag"
        assert settings.expiry_threshold_days == 60

    def test_empty_variables_do_not_override_defaults(self) -> None:
        """Defaults survive empty environment variables."""
        environ = {"AZURE_MONITOR_TAG": "", "AZURE_FORMAT": "", "AZURE_EXPIRY_THRESHOLD_DAYS": ""}

        settings = load_settings(CREDENTIALS, environ=environ)

        assert settings.monitor_tag == "MonitorSecrets"
        assert settings.output_format is OutputFormat.TEXT
        assert settings.expiry_threshold_days == 30

    def test_empty_monitor_tag_keeps_untagged_apps_out(self) -> None:
        """An empty AZURE_MONITOR_TAG does not turn into a match-all pattern."""
        settings = load_settings(CREDENTIALS, environ={"AZURE_MONITOR_TAG": ""})
        assert settings.tag_pattern.matches(["Production"]) is False
