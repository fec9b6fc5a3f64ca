"""Configuration management for the fuzzy page search service."""

from .settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
