"""Application settings and configuration management."""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Client secret protection
    secret_protection_key: str = Field(
        default="",
        description="Fernet key used to protect client secrets before storage (generate with: client-registry generate-key)",
    )

    # Admin API server
    admin_host: str = Field(
        default="127.0.0.1",
        description="Admin API host",
    )
    admin_port: int = Field(
        default=8000,
        description="Admin API port",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    # Development Settings
    debug: bool = Field(
        default=False,
        description="Enable debug mode",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
