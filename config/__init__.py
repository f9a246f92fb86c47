"""Configuration module for the weather answer scoring engine."""

from config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
