"""Configuration adapters."""

from browser_probe.adapters.config.app_config import AppConfig

__all__ = ["AppConfig"]
