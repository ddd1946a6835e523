"""Configuration loading."""

from .settings import ENV_PREFIX, Settings, load_settings

__all__ = [
    "ENV_PREFIX",
    "Settings",
    "load_settings",
]
