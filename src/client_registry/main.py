"""Admin CLI for building client descriptors.

Builds a client descriptor with a validated, hashed and protected client
secret and prints it as JSON, ready to be loaded into a client store.

Environment:
    SECRET_PROTECTION_KEY   Fernet key used to protect client secrets
    LOG_LEVEL / LOG_FORMAT  Logging configuration

Usage:
    # Client with a password-derived secret
    client-registry create --client-id svc1 --client-name "Service One" \\
        --password hunter2 --redirect-uri https://svc1.example.com/callback

    # Client described by a JSON file, with the password given separately
    client-registry create --file client.json --password hunter2

    # Generate a protection key
    client-registry generate-key

    # Run the admin API
    client-registry serve
"""

import argparse
import json
import logging
import sys

import uvicorn
from dotenv import load_dotenv
from pydantic import ValidationError

from client_registry.clients import (
    AccessTokenType,
    ClientRegistrationRequest,
    ClientRegistrationService,
    ClientSecretError,
    Flow,
    SigningKeyType,
    TokenExpiration,
    TokenUsage,
    generate_protection_key,
    get_secret_protector,
)
from client_registry.config import Settings, get_settings

logger = logging.getLogger(__name__)

LIFETIME_OPTIONS = (
    "identity_token_lifetime",
    "access_token_lifetime",
    "authorization_code_lifetime",
    "absolute_refresh_token_lifetime",
    "sliding_refresh_token_lifetime",
)

FLAG_OPTIONS = (
    "enabled",
    "require_consent",
    "allow_remember_consent",
    "allow_local_login",
)

# option dest -> request field
LIST_OPTIONS = {
    "redirect_uri": "redirect_uris",
    "post_logout_redirect_uri": "post_logout_redirect_uris",
    "identity_provider_restriction": "identity_provider_restrictions",
    "scope_restriction": "scope_restrictions",
}

SCALAR_OPTIONS = (
    "client_id",
    "client_name",
    "client_secret",
    "password",
    "client_uri",
    "logo_uri",
    "flow",
    "refresh_token_usage",
    "refresh_token_expiration",
    "access_token_type",
    "identity_token_signing_key_type",
    *FLAG_OPTIONS,
    *LIFETIME_OPTIONS,
)


def setup_logging(settings: Settings | None = None) -> None:
    """Configure application logging.

    Logs go to stderr so stdout only carries command output.
    """
    settings = settings or get_settings()

    log_format = (
        '{"time": "%(asctime)s", "level": "%(levelname)s", '
        '"logger": "%(name)s", "message": "%(message)s"}'
        if settings.log_format == "json"
        else "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()),
        format=log_format,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def _choices(enum_type) -> list[str]:
    return [member.value for member in enum_type]


def _option(dest: str) -> str:
    return "--" + dest.replace("_", "-")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="client-registry",
        description="Build secret-protected OAuth/OIDC client descriptors.",
        epilog=(
            "Environment variables:\n"
            "  SECRET_PROTECTION_KEY   Fernet key used to protect client secrets\n"
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # --- create ---
    create_parser = subparsers.add_parser(
        "create", help="Build a client descriptor and print it as JSON"
    )
    create_input = create_parser.add_mutually_exclusive_group(required=True)
    create_input.add_argument(
        "--file", help="JSON file with the client settings (other flags override its values)"
    )
    create_input.add_argument("--client-id", help="OAuth client ID")
    create_parser.add_argument("--client-name", help="Client display name")
    create_parser.add_argument("--client-secret", help="Base64 encoded client secret")
    create_parser.add_argument(
        "--password", help="Password hashed into the client secret (overrides --client-secret)"
    )
    create_parser.add_argument("--client-uri", help="Client home page")
    create_parser.add_argument("--logo-uri", help="Client logo")

    for dest in FLAG_OPTIONS:
        create_parser.add_argument(
            _option(dest), action=argparse.BooleanOptionalAction, default=None
        )

    create_parser.add_argument("--flow", choices=_choices(Flow))
    create_parser.add_argument("--refresh-token-usage", choices=_choices(TokenUsage))
    create_parser.add_argument("--refresh-token-expiration", choices=_choices(TokenExpiration))
    create_parser.add_argument("--access-token-type", choices=_choices(AccessTokenType))
    create_parser.add_argument(
        "--identity-token-signing-key-type", choices=_choices(SigningKeyType)
    )

    for dest in LIFETIME_OPTIONS:
        create_parser.add_argument(
            _option(dest), type=int, metavar="SECONDS"
        )

    for dest in LIST_OPTIONS:
        create_parser.add_argument(
            _option(dest), action="append", metavar="VALUE", help="May be repeated"
        )

    create_parser.add_argument(
        "--no-protect",
        action="store_true",
        help="Store the client secret without applying the configured protector",
    )
    create_parser.add_argument(
        "--indent", type=int, default=2, help="JSON indentation (default: 2)"
    )

    # --- generate-key ---
    subparsers.add_parser(
        "generate-key", help="Generate a SECRET_PROTECTION_KEY value"
    )

    # --- serve ---
    serve_parser = subparsers.add_parser("serve", help="Run the admin API")
    serve_parser.add_argument("--host", help="Bind host (default: ADMIN_HOST)")
    serve_parser.add_argument("--port", type=int, help="Bind port (default: ADMIN_PORT)")

    return parser


def load_request_from_file(path: str) -> dict:
    """Load client settings from a JSON file."""
    try:
        with open(path) as f:
            data = json.load(f)
    except FileNotFoundError:
        print(f"ERROR: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"ERROR: Invalid JSON in {path}: {e}", file=sys.stderr)
        sys.exit(1)

    if not isinstance(data, dict):
        print("ERROR: JSON file must contain an object", file=sys.stderr)
        sys.exit(1)
    return data


def build_request_from_args(args: argparse.Namespace) -> dict:
    """Collect the client settings given on the command line."""
    values = {}
    for dest in SCALAR_OPTIONS:
        value = getattr(args, dest)
        if value is not None:
            values[dest] = value
    for dest, field_name in LIST_OPTIONS.items():
        value = getattr(args, dest)
        if value is not None:
            values[field_name] = value
    return values


def create_client(args: argparse.Namespace, settings: Settings) -> None:
    """Build a client descriptor and print it."""
    data = load_request_from_file(args.file) if args.file else {}
    # Flags given alongside --file override the file's values
    data.update(build_request_from_args(args))

    try:
        request = ClientRegistrationRequest.model_validate(data)
    except ValidationError as e:
        print(f"ERROR: Invalid client settings:\n{e}", file=sys.stderr)
        sys.exit(1)

    service = ClientRegistrationService(protector=get_secret_protector(settings))
    try:
        result = service.create_client(request, protect=not args.no_protect)
    except ClientSecretError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    print(result.client.model_dump_json(indent=args.indent or None))


def serve(args: argparse.Namespace, settings: Settings) -> None:
    """Run the admin API under uvicorn."""
    host = args.host or settings.admin_host
    port = args.port or settings.admin_port
    logger.info("Starting client registry admin API on %s:%s", host, port)

    uvicorn.run(
        "client_registry.api.app:create_app",
        host=host,
        port=port,
        factory=True,
        log_level=settings.log_level.lower(),
    )


def main(argv: list[str] | None = None) -> None:
    """Entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Load environment variables from .env file
    load_dotenv()
    settings = get_settings()
    setup_logging(settings)

    if args.command == "create":
        if not args.file and not args.client_name:
            parser.error("--client-name is required with --client-id")
        create_client(args, settings)

    elif args.command == "generate-key":
        print(generate_protection_key())

    elif args.command == "serve":
        serve(args, settings)


if __name__ == "__main__":
    main()
