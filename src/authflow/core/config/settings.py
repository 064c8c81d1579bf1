"""Configuration using Pydantic Settings with YAML support.

Sources, highest priority first:
1. Values passed to ``Settings()``
2. Environment variables (nested delimiter ``__``, e.g. ``FLOWS__RESET_REDIRECT_DELAY_MS``)
3. ``.env`` file (secrets only)
4. ``config/environments/{APP_ENV}/*.yaml`` merged over ``config/base/*.yaml``
5. Defaults in code
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .yaml_source import MultiYamlConfigSettingsSource


if TYPE_CHECKING:
    from pydantic_settings import PydanticBaseSettingsSource


# =============================================================================
# Nested Configuration Models (from YAML)
# =============================================================================


class AppSettings(BaseModel):
    """Application identity settings."""

    name: str = "Club Auth Flow"
    version: str = "0.1.0"
    debug: bool = False


class LoggingSettings(BaseModel):
    """Logging configuration settings."""

    level: str = "INFO"
    format: str = "json"


class IdentityProviderSettings(BaseModel):
    """Identity Toolkit REST endpoint settings."""

    base_url: str = "https://identitytoolkit.googleapis.com/v1"
    timeout: float = 10.0


class FlowSettings(BaseModel):
    """Behaviour of the sign-in, sign-up and reset-request screens."""

    reset_redirect_delay_ms: int = Field(default=3000, ge=0)
    min_secret_length: int = Field(default=6, ge=1)


# =============================================================================
# Main Settings Class
# =============================================================================


class Settings(BaseSettings):
    """Application settings with YAML + environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",
        case_sensitive=False,
        env_nested_delimiter="__",
    )

    APP_ENV: str = "development"

    app: AppSettings = AppSettings()
    logging: LoggingSettings = LoggingSettings()
    identity_provider: IdentityProviderSettings = IdentityProviderSettings()
    flows: FlowSettings = FlowSettings()

    # Secrets (from .env only - never in YAML)
    IDENTITY_PROVIDER_API_KEY: str = ""

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert the YAML source between ``.env`` and Docker secrets."""
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            MultiYamlConfigSettingsSource(settings_cls),
            file_secret_settings,
        )

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.APP_ENV == "production"

    @property
    def is_testing(self) -> bool:
        """Check if running in test environment."""
        return self.APP_ENV == "test"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
