"""Client registry: builds secret-protected OAuth/OIDC client descriptors."""

__version__ = "0.1.0"
