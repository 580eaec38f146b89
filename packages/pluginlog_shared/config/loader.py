"""Settings loading with deterministic precedence.

The cascade is always:
1) Explicit overrides passed by the caller
2) Environment variables (``PLUGINLOG_`` prefix)
3) ~/.config/pluginlog/pluginlog.yaml (or ``config_path``)
4) Model defaults
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, ClassVar

from .models import DEFAULT_CONFIG_PATH, PluginLogSettings


def load_settings(
    *, config_path: str | Path | None = None, **overrides: Any
) -> PluginLogSettings:
    """Resolve ``PluginLogSettings`` from overrides, env, YAML, and defaults."""
    resolved = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    if resolved == PluginLogSettings._config_path:
        return PluginLogSettings(**overrides)

    class _PathBoundSettings(PluginLogSettings):
        _config_path: ClassVar[Path] = resolved

    return _PathBoundSettings(**overrides)
