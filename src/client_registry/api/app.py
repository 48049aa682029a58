"""FastAPI application for the client registry admin API."""

import logging

from fastapi import FastAPI

from client_registry import __version__
from client_registry.clients import clients_router
from client_registry.config import get_settings

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Create and configure the admin FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    settings = get_settings()

    app = FastAPI(
        title="Client Registry",
        description="Builds secret-protected OAuth/OIDC client descriptors",
        version=__version__,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
    )

    # Health check endpoint
    @app.get("/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {"status": "healthy", "service": "client-registry"}

    # Ready check endpoint
    @app.get("/ready")
    async def ready_check() -> dict:
        """Readiness check endpoint."""
        return {"status": "ready", "service": "client-registry"}

    # Provides: POST /admin/clients
    app.include_router(clients_router)

    return app
