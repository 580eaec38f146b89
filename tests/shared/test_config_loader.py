"""Tests for pydantic-settings-backed plugin log configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from packages.pluginlog_shared.config import PluginLogSettings, load_settings
from packages.pluginlog_shared.logging.levels import Level
from packages.pluginlog_shared.logging.options import Role

_ENV_NAMES = (
    "PLUGINLOG_LOG",
    "PLUGINLOG_LOG_PATH",
    "PLUGINLOG_LOG_SDK",
    "PLUGINLOG_LOG_PROVIDER",
)


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)


def test_load_settings_uses_precedence_cascade(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Overrides should beat env, env should beat YAML, then defaults."""
    config_file = tmp_path / "pluginlog.yaml"
    config_file.write_text(
        "\n".join(
            [
                "log: warn",
                "log_sdk: error",
                "log_provider: info",
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("PLUGINLOG_LOG", "debug")
    monkeypatch.setenv("PLUGINLOG_LOG_SDK", "warn")

    settings = load_settings(config_path=config_file, log_sdk="trace")

    assert settings.log == "debug"
    assert settings.log_sdk == "trace"
    assert settings.log_provider == "info"
    assert settings.log_path == ""


def test_load_settings_uses_model_defaults_when_sources_missing(tmp_path: Path) -> None:
    """Settings should fall back to model defaults when env and YAML are absent."""
    settings = load_settings(config_path=tmp_path / "missing.yaml")

    assert settings.log == ""
    assert settings.sink_level() is Level.OFF
    assert settings.role_level(Role.SDK) is Level.NO_LEVEL
    assert settings.json_output is False


def test_json_level_selects_trace_json_sink() -> None:
    """The JSON level value should mean TRACE with JSON output."""
    settings = PluginLogSettings(log="json")

    assert settings.json_output is True
    assert settings.sink_level() is Level.TRACE


def test_unknown_sink_level_is_reported_as_none() -> None:
    """Unknown level names should not parse to a level."""
    assert PluginLogSettings(log="chatty").sink_level() is None


def test_role_level_reads_per_role_override() -> None:
    """Role levels should come from the matching per-role field."""
    settings = PluginLogSettings(log_sdk=" Debug ", log_provider="bogus")

    assert settings.role_level(Role.SDK) is Level.DEBUG
    assert settings.role_level(Role.PROVIDER) is Level.NO_LEVEL
