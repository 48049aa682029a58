"""Tests for client secret validation and processing."""

import base64
import hashlib

import pytest

from client_registry.clients.errors import (
    ClientSecretError,
    InvalidSecretEncoding,
    MissingRequiredSecret,
)
from client_registry.clients.models import DiagnosticCode, RegistrationErrorCode, SigningKeyType
from client_registry.clients.secret_processor import (
    SecretProcessor,
    decode_secret,
    hash_password,
)

# base64(SHA-256("hunter2"))
HUNTER2_HASH = "9S+9MrKzuG/4jvbEkGKChfSCrxXdyylUH5S89Saj9sc="


@pytest.fixture
def processor():
    """Create a secret processor."""
    return SecretProcessor()


class TestDecodeSecret:
    """Tests for strict base64 decoding."""

    def test_valid_secret(self):
        """Test decoding a valid secret."""
        assert decode_secret("c2VjcmV0") == b"secret"

    @pytest.mark.parametrize(
        "secret",
        [
            "not-base64!!",
            "c2VjcmV0!",
            "YWJ",  # missing padding
            "YWJj=",  # bad padding
            "YR==",  # non-zero trailing bits
            "c2Vj cmV0",  # embedded whitespace
        ],
    )
    def test_invalid_secret(self, secret):
        """Test that malformed secrets are rejected, not truncated."""
        with pytest.raises(InvalidSecretEncoding):
            decode_secret(secret)


class TestHashPassword:
    """Tests for password derived secrets."""

    def test_known_hash(self):
        """Test the derived secret for a known password."""
        assert hash_password("hunter2") == HUNTER2_HASH

    def test_matches_sha256(self):
        """Test the derived secret is base64 of the SHA-256 digest of the UTF-8 bytes."""
        password = "pässwörd"
        expected = base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest()).decode()

        assert hash_password(password) == expected
        assert hash_password(password) == hash_password(password)


class TestValidate:
    """Tests for SecretProcessor.validate."""

    def test_missing_secret_with_client_secret_signing(self, processor, protector):
        """Test that a secret is required when tokens are signed with it."""
        with pytest.raises(MissingRequiredSecret):
            processor.validate("", SigningKeyType.CLIENT_SECRET, protector)

    def test_whitespace_secret_with_client_secret_signing(self, processor, protector):
        """Test that a blank secret counts as missing."""
        with pytest.raises(MissingRequiredSecret):
            processor.validate("   ", SigningKeyType.CLIENT_SECRET, protector)

    def test_password_does_not_satisfy_client_secret_signing(self, processor, protector):
        """Test that a password does not stand in for the required secret."""
        with pytest.raises(MissingRequiredSecret):
            processor.validate(
                None, SigningKeyType.CLIENT_SECRET, protector, password="hunter2"
            )

    def test_missing_secret_with_default_signing(self, processor, protector):
        """Test that no secret is fine for the default signing key."""
        assert processor.validate(None, SigningKeyType.DEFAULT, protector) == []
        assert processor.validate(None, None, protector) == []

    def test_invalid_encoding(self, processor, protector):
        """Test that malformed base64 is rejected."""
        with pytest.raises(InvalidSecretEncoding):
            processor.validate("not-base64!!", None, protector)

    def test_invalid_encoding_with_password(self, processor, protector):
        """Test that a password does not hide a malformed secret."""
        with pytest.raises(InvalidSecretEncoding):
            processor.validate("not-base64!!", None, protector, password="hunter2")

    def test_no_protector_warning(self, processor):
        """Test the warning for a missing protector."""
        diagnostics = processor.validate("c2VjcmV0", None, None)

        assert [d.code for d in diagnostics] == [DiagnosticCode.NO_PROTECTOR]

    def test_no_protector_warning_without_secret(self, processor):
        """Test the warning is raised even without a secret."""
        diagnostics = processor.validate(None, None, None)

        assert [d.code for d in diagnostics] == [DiagnosticCode.NO_PROTECTOR]

    def test_password_overrides_secret_warning(self, processor, protector):
        """Test the warning when a password replaces a literal secret."""
        diagnostics = processor.validate("c2VjcmV0", None, protector, password="hunter2")

        assert [d.code for d in diagnostics] == [DiagnosticCode.PASSWORD_OVERRIDES_SECRET]


class TestProcess:
    """Tests for SecretProcessor.process."""

    def test_no_secret(self, processor, protector):
        """Test that no secret and no password yields no secret."""
        assert processor.process(None, None, protector) is None
        assert processor.process("", "", protector) is None
        assert protector.calls == []

    def test_raw_secret_unchanged(self, processor):
        """Test a raw secret is kept as is without a protector."""
        assert processor.process("c2VjcmV0", None, None) == "c2VjcmV0"

    def test_password_hashed(self, processor):
        """Test a password is hashed into the secret."""
        assert processor.process(None, "hunter2", None) == HUNTER2_HASH

    def test_password_overrides_secret(self, processor):
        """Test the password wins over a literal secret."""
        assert processor.process("c2VjcmV0", "hunter2", None) == HUNTER2_HASH

    def test_raw_secret_protected(self, processor, protector):
        """Test protection of a raw secret."""
        result = processor.process("c2VjcmV0", None, protector)

        assert protector.calls == [b"secret"]
        assert result == base64.b64encode(b"protected:secret").decode()

    def test_password_hashed_before_protection(self, processor, protector):
        """Test the protector receives the password digest."""
        result = processor.process(None, "hunter2", protector)

        digest = hashlib.sha256(b"hunter2").digest()
        assert protector.calls == [digest]
        assert result == base64.b64encode(b"protected:" + digest).decode()


class TestErrors:
    """Tests for client secret errors."""

    def test_error_responses(self):
        """Test each error renders its own code."""
        missing = MissingRequiredSecret("no secret").to_response()
        invalid = InvalidSecretEncoding("bad secret").to_response()

        assert missing.error == RegistrationErrorCode.MISSING_REQUIRED_SECRET
        assert missing.error_description == "no secret"
        assert invalid.error == RegistrationErrorCode.INVALID_SECRET_ENCODING

    def test_every_code_is_raised(self):
        """Test every error code belongs to a concrete error."""
        codes = {error.code for error in ClientSecretError.__subclasses__()}

        assert codes == set(RegistrationErrorCode)
