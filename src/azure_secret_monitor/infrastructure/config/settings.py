"""Run settings merged from defaults, config file, environment and CLI flags."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from typing import Any

import yaml

from ...application.exceptions import ConfigurationError
from ...domain.value_objects import OutputFormat, TagPattern
from ..adapters.entra_id.graph_client import GraphClientConfig

logger = logging.getLogger(__name__)

ENV_PREFIX = "AZURE_"
DEFAULT_CONFIG_FILES = (Path("config.yaml"), Path("config.yml"))

DEFAULTS: dict[str, Any] = {
    "tenant_id": "",
    "client_id": "",
    "client_secret": "",
    "monitor_tag": "MonitorSecrets",
    "expiry_threshold_days": 30,
    "format": OutputFormat.TEXT.value,
    "log_level": "INFO",
}

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass(frozen=True)
class Settings:
    """Immutable application settings for a single run."""

    tenant_id: str
    client_id: str
    client_secret: str = field(repr=False)
    monitor_tag: str = DEFAULTS["monitor_tag"]
    expiry_threshold_days: int = DEFAULTS["expiry_threshold_days"]
    output_format: OutputFormat = OutputFormat.TEXT
    log_level: str = DEFAULTS["log_level"]

    def validate(self) -> None:
        """Validate required settings."""
        missing: list[str] = []

        if not self.tenant_id:
            missing.append("tenant ID (--tenant-id, AZURE_TENANT_ID or tenant_id)")
        if not self.client_id:
            missing.append("client ID (--client-id, AZURE_CLIENT_ID or client_id)")
        if not self.client_secret:
            missing.append("client secret (--client-secret, AZURE_CLIENT_SECRET or client_secret)")

        if missing:
            msg = f"missing required configuration: {'; '.join(missing)}"
            raise ConfigurationError(msg)

    @cached_property
    def graph_config(self) -> GraphClientConfig:
        """Get Graph API client configuration."""
        return GraphClientConfig(
            tenant_id=self.tenant_id,
            client_id=self.client_id,
            client_secret=self.client_secret,
        )

    @cached_property
    def tag_pattern(self) -> TagPattern:
        """Get the compiled monitor tag pattern."""
        return TagPattern(self.monitor_tag)


def _read_config_file(path: Path | None) -> dict[str, Any]:
    """Read a YAML config file, or the default one in the working directory if present."""
    if path is None:
        path = next((p for p in DEFAULT_CONFIG_FILES if p.is_file()), None)
        if path is None:
            return {}
    try:
        content = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        msg = f"error reading config file {path}: {e.strerror or e}"
        raise ConfigurationError(msg) from e
    except yaml.YAMLError as e:
        msg = f"error parsing config file {path}: {e}"
        raise ConfigurationError(msg) from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        msg = f"config file {path} must contain a mapping of settings"
        raise ConfigurationError(msg)

    logger.debug("Loaded config file %s", path)
    return {str(k).lower().replace("-", "_"): v for k, v in content.items()}


def _read_environment(environ: Mapping[str, str]) -> dict[str, Any]:
    """Collect AZURE_* variables that mirror a config key."""
    values: dict[str, Any] = {}
    for key in DEFAULTS:
        env_key = f"{ENV_PREFIX}{key.upper()}"
        # Empty variables count as unset
        if environ.get(env_key):
            values[key] = environ[env_key]
    return values


def _to_int(key: str, value: Any) -> int:
    if isinstance(value, bool):
        msg = f"invalid {key} {value!r}: must be an integer"
        raise ConfigurationError(msg)
    try:
        return int(str(value).strip())
    except ValueError as e:
        msg = f"invalid {key} {value!r}: must be an integer"
        raise ConfigurationError(msg) from e


def _to_format(value: Any) -> OutputFormat:
    try:
        return OutputFormat(str(value))
    except ValueError as e:
        msg = f"invalid format '{value}': must be 'text' or 'json'"
        raise ConfigurationError(msg) from e


def _to_log_level(value: Any) -> str:
    level = str(value).upper()
    if level not in LOG_LEVELS:
        msg = f"invalid log level '{value}': must be one of {', '.join(LOG_LEVELS)}"
        raise ConfigurationError(msg)
    return level


def load_settings(
    overrides: Mapping[str, Any] | None = None,
    *,
    config_file: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> Settings:
    """
    Load and validate settings.

    Precedence, highest first: ``overrides`` (CLI flags), ``AZURE_*``
    environment variables, the config file, built-in defaults. Override
    values of None count as "not given".

    Args:
        overrides: Values passed on the command line, keyed by config name.
        config_file: Explicit config file; ./config.yaml is used when omitted.
        environ: Environment to read, defaults to ``os.environ``.

    Raises:
        ConfigurationError: If a value is invalid or a required one is missing.
    """
    merged: dict[str, Any] = dict(DEFAULTS)
    merged.update({k: v for k, v in _read_config_file(config_file).items() if k in DEFAULTS})
    merged.update(_read_environment(os.environ if environ is None else environ))
    merged.update({k: v for k, v in (overrides or {}).items() if k in DEFAULTS and v is not None})

    settings = Settings(
        tenant_id=str(merged["tenant_id"] or ""),
        client_id=str(merged["client_id"] or ""),
        client_secret=str(merged["client_secret"] or ""),
        monitor_tag=str(merged["monitor_tag"]),
        expiry_threshold_days=_to_int("expiry_threshold_days", merged["expiry_threshold_days"]),
        output_format=_to_format(merged["format"]),
        log_level=_to_log_level(merged["log_level"]),
    )
    settings.validate()
    return settings
