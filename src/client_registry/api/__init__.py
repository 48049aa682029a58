"""Admin API for the client registry."""

from client_registry.api.app import create_app

__all__ = ["create_app"]
