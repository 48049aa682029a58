"""Pytest configuration and fixtures."""

import os

import pytest
from cryptography.fernet import Fernet

# Set test environment variables before importing application modules
os.environ["SECRET_PROTECTION_KEY"] = ""
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["LOG_FORMAT"] = "text"
os.environ["DEBUG"] = "true"


class RecordingProtector:
    """Protector that tags bytes and records every call."""

    def __init__(self) -> None:
        self.calls: list[bytes] = []

    def protect(self, data: bytes) -> bytes:
        self.calls.append(data)
        return b"protected:" + data


@pytest.fixture
def protector():
    """Provide a recording protector."""
    return RecordingProtector()


@pytest.fixture
def protection_key():
    """Provide a fresh Fernet key."""
    return Fernet.generate_key().decode()


@pytest.fixture
def test_settings(protection_key):
    """Provide test settings with secret protection configured."""
    from client_registry.config import Settings

    return Settings(
        secret_protection_key=protection_key,
        log_level="DEBUG",
        log_format="text",
        debug=True,
    )
