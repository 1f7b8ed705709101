"""Configuration management module."""

from configuration.manager import ConfigManager

__all__ = ["ConfigManager"]
