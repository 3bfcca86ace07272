"""Runtime configuration."""

from .runtime import ClientSettings, get_settings

__all__ = ["ClientSettings", "get_settings"]
