"""Public API for shared plugin log configuration utilities."""

from .loader import load_settings
from .models import DEFAULT_CONFIG_PATH, JSON_LEVEL, PluginLogSettings

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "JSON_LEVEL",
    "load_settings",
    "PluginLogSettings",
]
