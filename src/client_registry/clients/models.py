"""Data models for client registration descriptors."""

from enum import Enum

from pydantic import BaseModel, Field


class Flow(str, Enum):
    """OAuth/OIDC flows a client may use."""

    AUTHORIZATION_CODE = "authorization_code"
    IMPLICIT = "implicit"
    HYBRID = "hybrid"
    CLIENT_CREDENTIALS = "client_credentials"
    RESOURCE_OWNER = "resource_owner"


class TokenUsage(str, Enum):
    """Refresh token reuse policy."""

    REUSE = "reuse"
    ONE_TIME_ONLY = "one_time_only"


class TokenExpiration(str, Enum):
    """Refresh token expiration policy."""

    SLIDING = "sliding"
    ABSOLUTE = "absolute"


class AccessTokenType(str, Enum):
    """Access token format."""

    JWT = "jwt"
    REFERENCE = "reference"


class SigningKeyType(str, Enum):
    """Key used to sign identity tokens.

    CLIENT_SECRET means the client secret itself is the signing key, so a
    descriptor using it must carry a valid secret.
    """

    DEFAULT = "default"
    CLIENT_SECRET = "client-secret"


class DiagnosticCode(str, Enum):
    """Non-fatal diagnostics emitted while registering a client."""

    NO_PROTECTOR = "no_protector"
    PASSWORD_OVERRIDES_SECRET = "password_overrides_secret"


class RegistrationErrorCode(str, Enum):
    """Fatal registration error codes."""

    MISSING_REQUIRED_SECRET = "missing_required_secret"
    INVALID_SECRET_ENCODING = "invalid_secret_encoding"


class ClientDefaults(BaseModel):
    """Default skeleton a client descriptor is built from.

    Holds every field that has a default. Token lifetimes are in seconds.
    """

    enabled: bool = Field(default=True, description="Whether the client is enabled")
    require_consent: bool = Field(default=True, description="Show the consent screen")
    allow_remember_consent: bool = Field(
        default=True,
        description="Allow the user to remember a consent decision",
    )
    allow_local_login: bool = Field(
        default=True,
        description="Allow login with local accounts",
    )
    flow: Flow = Field(default=Flow.IMPLICIT, description="Allowed flow")
    client_uri: str | None = Field(None, description="Client home page")
    logo_uri: str | None = Field(None, description="Client logo")

    identity_token_lifetime: int = Field(default=300, ge=0)
    access_token_lifetime: int = Field(default=3600, ge=0)
    authorization_code_lifetime: int = Field(default=300, ge=0)
    absolute_refresh_token_lifetime: int = Field(default=2592000, ge=0)
    sliding_refresh_token_lifetime: int = Field(default=1296000, ge=0)
    refresh_token_usage: TokenUsage = Field(default=TokenUsage.ONE_TIME_ONLY)
    refresh_token_expiration: TokenExpiration = Field(default=TokenExpiration.ABSOLUTE)

    identity_token_signing_key_type: SigningKeyType = Field(default=SigningKeyType.DEFAULT)
    access_token_type: AccessTokenType = Field(default=AccessTokenType.JWT)

    identity_provider_restrictions: list[str] = Field(
        default_factory=list,
        description="Identity providers the client may use",
    )
    post_logout_redirect_uris: list[str] = Field(
        default_factory=list,
        description="Allowed post-logout redirect URIs",
    )
    redirect_uris: list[str] = Field(
        default_factory=list,
        description="Allowed redirect URIs",
    )
    scope_restrictions: list[str] = Field(
        default_factory=list,
        description="Scopes the client may request",
    )


class ClientDescriptor(ClientDefaults):
    """A registered client, ready to hand over to a client store.

    ``client_secret`` is always the processed form: base64 of the raw secret,
    of a SHA-256 password hash, or of the protected bytes of either.
    """

    client_id: str = Field(..., min_length=1, description="OAuth client ID")
    client_name: str = Field(..., min_length=1, description="Display name")
    client_secret: str | None = Field(None, description="Processed client secret")


class ClientRegistrationRequest(BaseModel):
    """Administrator input for registering a client.

    Every optional field left as None keeps the default of the descriptor.
    List fields are appended to the defaults.
    """

    client_id: str = Field(..., min_length=1, description="OAuth client ID")
    client_name: str = Field(..., min_length=1, description="Display name")
    client_secret: str | None = Field(
        None,
        repr=False,
        description="Base64 encoded client secret",
    )
    password: str | None = Field(
        None,
        repr=False,
        description="Password hashed into the client secret (overrides client_secret)",
    )
    client_uri: str | None = None
    logo_uri: str | None = None

    enabled: bool | None = None
    require_consent: bool | None = None
    allow_remember_consent: bool | None = None
    allow_local_login: bool | None = None
    flow: Flow | None = None

    identity_token_lifetime: int | None = Field(None, ge=0)
    access_token_lifetime: int | None = Field(None, ge=0)
    authorization_code_lifetime: int | None = Field(None, ge=0)
    absolute_refresh_token_lifetime: int | None = Field(None, ge=0)
    sliding_refresh_token_lifetime: int | None = Field(None, ge=0)
    refresh_token_usage: TokenUsage | None = None
    refresh_token_expiration: TokenExpiration | None = None

    identity_token_signing_key_type: SigningKeyType | None = None
    access_token_type: AccessTokenType | None = None

    identity_provider_restrictions: list[str] | None = None
    post_logout_redirect_uris: list[str] | None = None
    redirect_uris: list[str] | None = None
    scope_restrictions: list[str] | None = None


class Diagnostic(BaseModel):
    """A non-fatal warning attached to a registration."""

    code: DiagnosticCode = Field(..., description="Diagnostic code")
    message: str = Field(..., description="Human-readable message")


class RegistrationResult(BaseModel):
    """Outcome of a successful registration."""

    client: ClientDescriptor = Field(..., description="The built descriptor")
    warnings: list[Diagnostic] = Field(
        default_factory=list,
        description="Warnings raised while building the descriptor",
    )


class RegistrationError(BaseModel):
    """Registration error response, shaped like RFC 7591 errors."""

    error: RegistrationErrorCode = Field(..., description="Error code")
    error_description: str | None = Field(None, description="Human-readable error description")
