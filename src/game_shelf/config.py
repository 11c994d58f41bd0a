"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables with validation,
type coercion, and sensible defaults.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class BGGConfig(BaseSettings):
    """BoardGameGeek XML API configuration."""

    model_config = SettingsConfigDict(env_prefix="BGG_")

    base_url: str = Field(
        default="https://boardgamegeek.com/xmlapi2",
        description="Base URL for the BGG XML API v2",
    )
    bearer_token: SecretStr | None = Field(
        default=None,
        description="Optional bearer token sent as Authorization header",
    )
    max_retries: int = Field(
        default=6,
        ge=0,
        le=20,
        description="Retries while BGG is still preparing a collection export",
    )
    retry_delay_seconds: float = Field(
        default=3.0,
        ge=0.0,
        le=60.0,
        description="Fixed delay between collection polling attempts",
    )
    timeout_seconds: int = Field(
        default=30,
        ge=5,
        le=120,
        description="HTTP request timeout in seconds",
    )


class SteamAPIConfig(BaseSettings):
    """Steam API specific configuration."""

    model_config = SettingsConfigDict(env_prefix="STEAM_")

    api_key: SecretStr | None = Field(
        default=None,
        description="Steam Web API key, required for owned-games lookups",
    )
    base_url: str = Field(
        default="https://api.steampowered.com",
        description="Base URL for Steam Web API",
    )
    store_url: str = Field(
        default="https://store.steampowered.com/api",
        description="Base URL for Steam Store API",
    )
    timeout_seconds: int = Field(
        default=30,
        ge=5,
        le=120,
        description="HTTP request timeout in seconds",
    )


class EnrichmentConfig(BaseSettings):
    """Tag enrichment configuration."""

    model_config = SettingsConfigDict(env_prefix="ENRICH_")

    top_n: int = Field(
        default=20,
        ge=1,
        le=20,
        description="Number of highest-ranked games considered for tags; BGG thing batches hold at most 20 ids",
    )


class LoggingConfig(BaseSettings):
    """Logging configuration."""

    model_config = SettingsConfigDict(env_prefix="LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    format: Literal["json", "console"] = Field(
        default="json",
        description="Log output format",
    )
    include_timestamp: bool = Field(
        default=True,
        description="Include timestamp in log entries",
    )


class Settings(BaseSettings):
    """
    Main application settings.

    Aggregates all configuration sections and provides
    a single entry point for configuration access.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Environment
    environment: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment environment",
    )
    demo_fixtures: bool = Field(
        default=True,
        description="Answer the demo username/ids with canned payloads",
    )

    # Sub-configurations
    bgg: BGGConfig = Field(default_factory=BGGConfig)
    steam: SteamAPIConfig = Field(default_factory=SteamAPIConfig)
    enrichment: EnrichmentConfig = Field(default_factory=EnrichmentConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration instance
    """
    return Settings()
