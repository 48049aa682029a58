"""Configuration module for the client registry."""

from client_registry.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
