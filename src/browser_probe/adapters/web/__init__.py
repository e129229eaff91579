"""Web adapters for collecting and inspecting browser data."""

from browser_probe.adapters.web.app import StarletteWebAdapter, create_app

__all__ = ["StarletteWebAdapter", "create_app"]
