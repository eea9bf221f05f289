# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Application configuration settings using Pydantic Settings.

This module provides centralized configuration management for SchoolHub.
Settings are loaded from environment variables with sensible defaults.

The Settings class is the main entry point and aggregates all subsettings.
A singleton instance is provided via get_settings() for dependency injection.

Example:
    >>> from schoolhub.core.config.settings import get_settings
    >>> settings = get_settings()
    >>> print(settings.environment)
    'development'
"""

from functools import lru_cache
from typing import Literal, Self

from pydantic import Field, SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_VERIFICATION_SECRET = "change-this-in-production"


class SMTPSettings(BaseSettings):
    """Outgoing mail server configuration.

    Attributes:
        host: SMTP server hostname.
        port: SMTP server port.
        username: SMTP authentication username.
        password: SMTP authentication password.
        use_tls: Whether to upgrade the connection with STARTTLS.
        from_email: Sender email address.
        from_name: Sender display name.
        timeout: Connection timeout in seconds.
    """

    model_config = SettingsConfigDict(
        env_prefix="SMTP_",
        extra="ignore",
    )

    host: str | None = None
    port: int = 587
    username: str | None = None
    password: SecretStr | None = None
    use_tls: bool = True
    from_email: str | None = None
    from_name: str = "SchoolHub"
    timeout: float = 30.0

    @property
    def is_configured(self) -> bool:
        """Check whether enough settings are present to send mail."""
        return all([self.host, self.username, self.password, self.from_email])


class VerificationSettings(BaseSettings):
    """Account verification token configuration.

    Attributes:
        secret_key: Secret key for signing verification tokens.
        algorithm: JWT signing algorithm.
        token_expire_hours: Lifetime of a verification link.
        base_url: Frontend page that consumes the verification token.
    """

    model_config = SettingsConfigDict(
        env_prefix="VERIFICATION_",
        extra="ignore",
    )

    secret_key: SecretStr = SecretStr(DEFAULT_VERIFICATION_SECRET)
    algorithm: str = "HS256"
    token_expire_hours: int = 48
    base_url: str = "http://localhost:5173/auth/verify-account"

    def build_link(self, token: str) -> str:
        """Build the verification link for a token."""
        separator = "&" if "?" in self.base_url else "?"
        return f"{self.base_url}{separator}token={token}"


class CORSSettings(BaseSettings):
    """CORS configuration for API.

    Attributes:
        origins: Comma-separated list of allowed origins.
        allow_credentials: Whether to allow credentials.
        allow_methods: Allowed HTTP methods.
        allow_headers: Allowed HTTP headers.
    """

    model_config = SettingsConfigDict(
        env_prefix="CORS_",
        extra="ignore",
    )

    origins: str = "http://localhost:3000,http://localhost:5173"
    allow_credentials: bool = True
    allow_methods: list[str] = ["*"]
    allow_headers: list[str] = ["*"]

    @property
    def origins_list(self) -> list[str]:
        """Parse origins string into a list."""
        return [origin.strip() for origin in self.origins.split(",") if origin.strip()]


class Settings(BaseSettings):
    """Main application settings aggregating all subsettings.

    Use get_settings() to obtain a cached singleton instance.

    Attributes:
        environment: Current environment (development, staging, production).
        debug: Enable debug mode.
        log_level: Logging level.
        smtp: Outgoing mail settings.
        verification: Account verification token settings.
        cors: CORS settings.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production"] = "development"
    debug: bool = True
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "DEBUG"

    smtp: SMTPSettings = Field(default_factory=SMTPSettings)
    verification: VerificationSettings = Field(default_factory=VerificationSettings)
    cors: CORSSettings = Field(default_factory=CORSSettings)

    @model_validator(mode="after")
    def validate_production_settings(self) -> Self:
        """Validate that production settings are properly configured.

        Raises:
            ValueError: If running in production with insecure defaults.
        """
        if self.environment == "production":
            if self.verification.secret_key.get_secret_value() == DEFAULT_VERIFICATION_SECRET:
                raise ValueError(
                    "Verification secret key must be changed from default in production. "
                    "Set VERIFICATION_SECRET_KEY environment variable."
                )
        return self

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    Call clear_settings_cache() if you need to reload settings.

    Returns:
        Cached Settings instance.
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache.

    Call this if you need to reload settings from environment.
    Useful for testing or dynamic configuration updates.
    """
    get_settings.cache_clear()
