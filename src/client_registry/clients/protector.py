"""Client secret protection capabilities."""

import logging
from typing import Protocol, runtime_checkable

from cryptography.fernet import Fernet, InvalidToken

from client_registry.clients.errors import SecretProtectionError
from client_registry.config import Settings, get_settings

logger = logging.getLogger(__name__)


@runtime_checkable
class SecretProtector(Protocol):
    """Transforms secret bytes (e.g. encrypts them) before storage."""

    def protect(self, data: bytes) -> bytes:
        """Protect raw secret bytes."""
        ...


class FernetSecretProtector:
    """Protects client secrets with Fernet (AES-128-CBC + HMAC-SHA256)."""

    def __init__(self, key: str | bytes) -> None:
        """Initialize the protector.

        Args:
            key: URL-safe base64 encoded 32-byte Fernet key.

        Raises:
            ValueError: If the key is not a valid Fernet key.
        """
        if isinstance(key, str):
            key = key.encode()
        self._fernet = Fernet(key)

    def protect(self, data: bytes) -> bytes:
        """Encrypt secret bytes.

        Args:
            data: Raw secret bytes.

        Returns:
            Fernet token bytes.
        """
        return self._fernet.encrypt(data)

    def unprotect(self, token: bytes) -> bytes:
        """Decrypt bytes produced by protect().

        Args:
            token: Fernet token bytes.

        Returns:
            The raw secret bytes.

        Raises:
            SecretProtectionError: If the token is invalid or was protected with another key.
        """
        try:
            return self._fernet.decrypt(token)
        except InvalidToken as e:
            raise SecretProtectionError("Failed to unprotect client secret: invalid token") from e


def generate_protection_key() -> str:
    """Generate a new key for FernetSecretProtector."""
    return Fernet.generate_key().decode()


def get_secret_protector(settings: Settings | None = None) -> SecretProtector | None:
    """Build the configured secret protector.

    Args:
        settings: Settings to read SECRET_PROTECTION_KEY from (defaults to global settings).

    Returns:
        FernetSecretProtector, or None if no usable key is configured.
    """
    settings = settings or get_settings()
    if not settings.secret_protection_key:
        logger.info("SECRET_PROTECTION_KEY not set, client secrets will not be protected")
        return None
    try:
        return FernetSecretProtector(settings.secret_protection_key)
    except ValueError as e:
        logger.error("Invalid secret protection key: %s", e)
        return None
