"""Client registration service."""

import logging

from client_registry.clients.builder import DescriptorBuilder
from client_registry.clients.models import (
    ClientDefaults,
    ClientRegistrationRequest,
    RegistrationResult,
)
from client_registry.clients.protector import SecretProtector, get_secret_protector
from client_registry.clients.secret_processor import SecretProcessor

logger = logging.getLogger(__name__)


class ClientRegistrationService:
    """Service turning administrator input into a client descriptor.

    This service:
    - Validates the client secret settings (fatal errors abort before anything is built)
    - Hashes and protects the client secret
    - Builds the descriptor on top of the default skeleton
    - Returns the descriptor with any warnings

    The descriptor is not stored; persisting it is up to the caller.
    """

    def __init__(
        self,
        protector: SecretProtector | None = None,
        defaults: ClientDefaults | None = None,
        processor: SecretProcessor | None = None,
        builder: DescriptorBuilder | None = None,
    ) -> None:
        """Initialize the registration service.

        Args:
            protector: Secret protector (secrets are stored unprotected if not provided).
            defaults: Default descriptor skeleton.
            processor: Secret processor.
            builder: Descriptor builder (built from defaults if not provided).
        """
        self._protector = protector
        self._processor = processor or SecretProcessor()
        self._builder = builder or DescriptorBuilder(defaults)

    @property
    def protector(self) -> SecretProtector | None:
        """The secret protector in use, if any."""
        return self._protector

    def create_client(
        self,
        request: ClientRegistrationRequest,
        protect: bool = True,
    ) -> RegistrationResult:
        """Build a client descriptor from a registration request.

        Args:
            request: Administrator input.
            protect: Apply the configured protector. False stores the secret unprotected.

        Returns:
            RegistrationResult with the descriptor and warnings.

        Raises:
            MissingRequiredSecret: If the secret is required but missing.
            InvalidSecretEncoding: If the client secret is not valid base64.
        """
        protector = self._protector if protect else None
        logger.info("Registering client: client_id=%s", request.client_id)

        warnings = self._processor.validate(
            request.client_secret,
            request.identity_token_signing_key_type,
            protector,
            password=request.password,
        )
        for warning in warnings:
            logger.warning("%s (client_id=%s)", warning.message, request.client_id)

        client_secret = self._processor.process(
            request.client_secret,
            request.password,
            protector,
        )
        descriptor = self._builder.build(request, client_secret)

        logger.info(
            "Built client descriptor: client_id=%s, has_secret=%s, protected=%s",
            descriptor.client_id,
            descriptor.client_secret is not None,
            protector is not None and descriptor.client_secret is not None,
        )
        return RegistrationResult(client=descriptor, warnings=warnings)


# Global service instance
_registration_service: ClientRegistrationService | None = None


def get_client_registration_service() -> ClientRegistrationService:
    """Get the global client registration service instance.

    Returns:
        ClientRegistrationService wired with the configured protector.
    """
    global _registration_service
    if _registration_service is None:
        _registration_service = ClientRegistrationService(protector=get_secret_protector())
    return _registration_service
