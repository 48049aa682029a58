"""Errors raised while validating client secret settings."""

from client_registry.clients.models import RegistrationError, RegistrationErrorCode


class ClientSecretError(Exception):
    """Invalid client secret settings. Aborts the registration."""

    code: RegistrationErrorCode

    def to_response(self) -> RegistrationError:
        """Render the error as an RFC 7591 style error body."""
        return RegistrationError(error=self.code, error_description=str(self))


class MissingRequiredSecret(ClientSecretError):
    """The identity token is signed with the client secret, but none was given."""

    code = RegistrationErrorCode.MISSING_REQUIRED_SECRET


class InvalidSecretEncoding(ClientSecretError):
    """The client secret is not a base64 encoded string."""

    code = RegistrationErrorCode.INVALID_SECRET_ENCODING


class SecretProtectionError(Exception):
    """A protected secret could not be unprotected."""
