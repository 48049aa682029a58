"""Client registration module.

Builds validated client descriptors for an OAuth/OIDC identity provider.
The client secret is checked, optionally derived from a password, and
protected before it is attached to the descriptor.
"""

from client_registry.clients.builder import DescriptorBuilder
from client_registry.clients.errors import (
    ClientSecretError,
    InvalidSecretEncoding,
    MissingRequiredSecret,
    SecretProtectionError,
)
from client_registry.clients.models import (
    AccessTokenType,
    ClientDefaults,
    ClientDescriptor,
    ClientRegistrationRequest,
    Diagnostic,
    DiagnosticCode,
    Flow,
    RegistrationError,
    RegistrationErrorCode,
    RegistrationResult,
    SigningKeyType,
    TokenExpiration,
    TokenUsage,
)
from client_registry.clients.protector import (
    FernetSecretProtector,
    SecretProtector,
    generate_protection_key,
    get_secret_protector,
)
from client_registry.clients.secret_processor import SecretProcessor, hash_password
from client_registry.clients.service import (
    ClientRegistrationService,
    get_client_registration_service,
)
from client_registry.clients.router import router as clients_router

__all__ = [
    # Models
    "AccessTokenType",
    "ClientDefaults",
    "ClientDescriptor",
    "ClientRegistrationRequest",
    "Diagnostic",
    "DiagnosticCode",
    "Flow",
    "RegistrationError",
    "RegistrationErrorCode",
    "RegistrationResult",
    "SigningKeyType",
    "TokenExpiration",
    "TokenUsage",
    # Errors
    "ClientSecretError",
    "InvalidSecretEncoding",
    "MissingRequiredSecret",
    "SecretProtectionError",
    # Secret handling
    "FernetSecretProtector",
    "SecretProtector",
    "SecretProcessor",
    "generate_protection_key",
    "get_secret_protector",
    "hash_password",
    # Building
    "DescriptorBuilder",
    "ClientRegistrationService",
    "get_client_registration_service",
    # Router
    "clients_router",
]
