"""Client secret validation and processing.

A client secret reaches storage in one of these forms, always base64:
- the raw secret supplied by the administrator
- the SHA-256 hash of a supplied password (the password wins over a raw secret)
- either of the above passed through a SecretProtector

Hashing happens before protection, so a protector only ever sees
fixed-length digests or validated raw secrets.
"""

import base64
import binascii
import hashlib
import logging

from client_registry.clients.errors import InvalidSecretEncoding, MissingRequiredSecret
from client_registry.clients.models import Diagnostic, DiagnosticCode, SigningKeyType
from client_registry.clients.protector import SecretProtector

logger = logging.getLogger(__name__)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def decode_secret(secret: str) -> bytes:
    """Strictly decode a base64 client secret.

    Args:
        secret: Base64 encoded secret.

    Returns:
        The decoded bytes.

    Raises:
        InvalidSecretEncoding: If the secret has characters outside the base64
            alphabet, bad padding, or does not re-encode to the same string.
    """
    try:
        decoded = base64.b64decode(secret, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidSecretEncoding("Client secret is not a base64 encoded string") from e

    if base64.b64encode(decoded).decode("ascii") != secret:
        raise InvalidSecretEncoding("Client secret is not a canonical base64 encoded string")
    return decoded


def hash_password(password: str) -> str:
    """Derive a client secret from a password.

    Returns:
        base64(SHA-256(utf8(password))).
    """
    digest = hashlib.sha256(password.encode("utf-8")).digest()
    return base64.b64encode(digest).decode("ascii")


class SecretProcessor:
    """Validates and transforms client secrets for storage."""

    def validate(
        self,
        client_secret: str | None,
        signing_key_type: SigningKeyType | None,
        protector: SecretProtector | None,
        password: str | None = None,
    ) -> list[Diagnostic]:
        """Validate client secret settings.

        Runs even when no secret is given, so a missing protector is always reported.

        Args:
            client_secret: Base64 encoded client secret, if any.
            signing_key_type: Identity token signing key type, if any.
            protector: Secret protector that will be used, if any.
            password: Password that will replace the client secret, if any.

        Returns:
            Non-fatal diagnostics.

        Raises:
            MissingRequiredSecret: If tokens are signed with the client secret
                and the client secret is blank. A password does not count.
            InvalidSecretEncoding: If the client secret is not valid base64.
        """
        diagnostics: list[Diagnostic] = []

        if (
            _is_blank(client_secret)
            and signing_key_type == SigningKeyType.CLIENT_SECRET
        ):
            raise MissingRequiredSecret(
                "No client secret specified but signing key specified as client secret"
            )

        if not _is_blank(client_secret):
            decode_secret(client_secret)

        if protector is None:
            diagnostics.append(
                Diagnostic(
                    code=DiagnosticCode.NO_PROTECTOR,
                    message="No client secret protector set",
                )
            )

        if not _is_blank(client_secret) and password:
            diagnostics.append(
                Diagnostic(
                    code=DiagnosticCode.PASSWORD_OVERRIDES_SECRET,
                    message=(
                        "Both client secret and password given; "
                        "the client secret is replaced by the password hash"
                    ),
                )
            )

        return diagnostics

    def process(
        self,
        client_secret: str | None,
        password: str | None,
        protector: SecretProtector | None,
    ) -> str | None:
        """Produce the storage-safe client secret.

        Args:
            client_secret: Validated base64 client secret, if any.
            password: Password to hash into the secret, if any.
            protector: Secret protector to apply, if any.

        Returns:
            The final base64 secret, or None if neither secret nor password was given.
        """
        if _is_blank(client_secret) and not password:
            return None

        secret = client_secret
        if password:
            logger.debug("Deriving client secret from password")
            secret = hash_password(password)

        if protector is None:
            return secret

        protected = protector.protect(base64.b64decode(secret))
        return base64.b64encode(protected).decode("ascii")
