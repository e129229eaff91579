"""Educational demo server that collects browser environment attributes."""

__version__ = "0.1.0"
