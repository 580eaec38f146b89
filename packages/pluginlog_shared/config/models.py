"""Typed configuration models for plugin log sinks."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import Field, field_validator
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

from packages.pluginlog_shared.logging.levels import Level
from packages.pluginlog_shared.logging.options import Role

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "pluginlog" / "pluginlog.yaml"

# Sink level value selecting TRACE with JSON output.
JSON_LEVEL = "JSON"


class PluginLogSettings(BaseSettings):
    """Sink and root logger settings resolved from init/env/yaml/defaults.

    Environment variables use the ``PLUGINLOG_`` prefix, for example
    ``PLUGINLOG_LOG=debug`` or ``PLUGINLOG_LOG_PATH=/tmp/plugin.log``.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLUGINLOG_",
        extra="ignore",
    )

    log: str = Field(default="", description="Sink level name, or JSON.")
    log_path: str = Field(default="", description="File receiving sink output.")
    log_sdk: str = Field(default="", description="SDK root logger level.")
    log_provider: str = Field(default="", description="Provider root logger level.")

    _config_path: ClassVar[Path] = DEFAULT_CONFIG_PATH

    @field_validator("log", "log_path", "log_sdk", "log_provider", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        """Normalize surrounding whitespace; ``None`` means unset."""
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Apply precedence: init > env > yaml > model defaults."""
        return (
            init_settings,
            env_settings,
            YamlConfigSettingsSource(
                settings_cls,
                yaml_file=cls._config_path,
                yaml_file_encoding="utf-8",
            ),
        )

    @property
    def json_output(self) -> bool:
        """Return whether the sink should write JSON lines."""
        return self.log.upper() == JSON_LEVEL

    def sink_level(self) -> Level | None:
        """Return the sink level; ``None`` when the configured name is unknown.

        An empty value disables the sink (``Level.OFF``).
        """
        if self.log == "":
            return Level.OFF
        if self.json_output:
            return Level.TRACE
        return Level.from_name(self.log)

    def role_level(self, role: Role) -> Level:
        """Return the configured root logger level for ``role``."""
        raw = self.log_sdk if role is Role.SDK else self.log_provider
        return Level.from_name(raw) or Level.NO_LEVEL
