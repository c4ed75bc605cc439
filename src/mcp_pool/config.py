"""Gateway settings — YAML file, environment overrides, and defaults."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"

LogLevel = Literal["critical", "error", "warning", "info", "debug"]


class SettingsError(Exception):
    """Raised when a settings file or environment value is invalid."""


class TelemetrySettings(BaseModel):
    """Optional telemetry configuration."""

    enabled: bool = False
    service_name: str = "mcp-pool"
    export_to_console: bool = True
    otlp_endpoint: str | None = None


class GatewaySettings(BaseModel):
    """Everything ``mcp-pool serve`` needs to start listening."""

    host: str = DEFAULT_HOST
    port: int = Field(default=DEFAULT_PORT, ge=0, le=65535)
    log_level: LogLevel = "info"
    providers: list[str] | None = Field(
        default=None,
        description="Built-in providers to enable; all of them when unset.",
    )
    telemetry: TelemetrySettings = Field(default_factory=TelemetrySettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, value: Any) -> Any:
        return value.lower() if isinstance(value, str) else value


class SettingsLoader:
    """Build :class:`GatewaySettings` from an optional YAML file and the environment.

    Precedence, lowest to highest: defaults, YAML file, environment
    (``PORT``, ``HOST``, ``MCP_POOL_LOG_LEVEL``, ``MCP_POOL_PROVIDERS``).
    """

    def __init__(self, path: Path | None = None, environ: Mapping[str, str] | None = None) -> None:
        self._path = path
        self._environ = os.environ if environ is None else environ

    def load(self) -> GatewaySettings:
        """Read, merge and validate.

        Raises:
            SettingsError: On unreadable files, YAML errors or invalid values.
        """
        data = self._read_file(self._path) if self._path is not None else {}
        data.update(self._read_environ())
        try:
            return GatewaySettings.model_validate(data)
        except ValidationError as exc:
            raise SettingsError(str(exc)) from exc

    def _read_file(self, path: Path) -> dict[str, Any]:
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SettingsError(f"Cannot read {path}: {exc}") from exc

        try:
            data: Any = yaml.safe_load(os.path.expandvars(raw))
        except yaml.YAMLError as exc:
            raise SettingsError(f"YAML parse error: {exc}") from exc

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise SettingsError("Settings YAML must be a mapping")
        return data

    def _read_environ(self) -> dict[str, Any]:
        overrides: dict[str, Any] = {}
        if port := self._environ.get("PORT"):
            overrides["port"] = port
        if host := self._environ.get("HOST"):
            overrides["host"] = host
        if level := self._environ.get("MCP_POOL_LOG_LEVEL"):
            overrides["log_level"] = level
        if providers := self._environ.get("MCP_POOL_PROVIDERS"):
            overrides["providers"] = [p.strip() for p in providers.split(",") if p.strip()]
        return overrides
