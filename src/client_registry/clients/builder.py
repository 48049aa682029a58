"""Assembles client descriptors from administrator input."""

from client_registry.clients.models import (
    ClientDefaults,
    ClientDescriptor,
    ClientRegistrationRequest,
)

# Defaultable fields replaced by the request value when one is supplied
SCALAR_FIELDS = (
    "enabled",
    "require_consent",
    "allow_remember_consent",
    "allow_local_login",
    "flow",
    "client_uri",
    "logo_uri",
    "identity_token_lifetime",
    "access_token_lifetime",
    "authorization_code_lifetime",
    "absolute_refresh_token_lifetime",
    "sliding_refresh_token_lifetime",
    "refresh_token_usage",
    "refresh_token_expiration",
    "identity_token_signing_key_type",
    "access_token_type",
)

# Collections the request values are appended to
LIST_FIELDS = (
    "identity_provider_restrictions",
    "post_logout_redirect_uris",
    "redirect_uris",
    "scope_restrictions",
)


class DescriptorBuilder:
    """Builds a ClientDescriptor on top of a default skeleton."""

    def __init__(self, defaults: ClientDefaults | None = None) -> None:
        """Initialize the builder.

        Args:
            defaults: Skeleton to build on (uses ClientDefaults() if not provided).
        """
        self._defaults = defaults or ClientDefaults()

    def build(
        self,
        request: ClientRegistrationRequest,
        client_secret: str | None,
        defaults: ClientDefaults | None = None,
    ) -> ClientDescriptor:
        """Build a descriptor.

        Args:
            request: Administrator input.
            client_secret: Already processed client secret; always wins over the defaults.
            defaults: Skeleton overriding the builder's own for this call.

        Returns:
            A new ClientDescriptor. The defaults are left untouched.
        """
        skeleton = defaults or self._defaults
        values = skeleton.model_dump(include=set(SCALAR_FIELDS) | set(LIST_FIELDS))

        for name in SCALAR_FIELDS:
            value = getattr(request, name)
            if value is not None:
                values[name] = value

        for name in LIST_FIELDS:
            values[name] = values[name] + list(getattr(request, name) or [])

        return ClientDescriptor(
            client_id=request.client_id,
            client_name=request.client_name,
            client_secret=client_secret,
            **values,
        )
