"""Application settings and configuration management."""
from typing import Literal, Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class MewsSettings(BaseSettings):
    """Mews Connector API configuration."""

    api_base_url: str = "https://api.mews-demo.com"
    client_token: str = ""
    access_token: str = ""
    client: str = "Mews Connector 1.0.0"  # Sent as "Client" in every request body
    # MEWS_API_* names are accepted for existing deployments
    timeout: int = Field(
        default=30,
        validation_alias=AliasChoices("MEWS_TIMEOUT", "MEWS_API_TIMEOUT"),
    )
    retry_times: int = Field(
        default=3,
        validation_alias=AliasChoices("MEWS_RETRY_TIMES", "MEWS_API_RETRY_TIMES"),
    )
    retry_delay_ms: int = 100

    # IANA zone used for day boundaries (e.g. "Europe/Budapest"); UTC when empty
    timezone_override: Optional[str] = None

    # Per-service availability fetches; 1 keeps them sequential
    availability_workers: int = 1

    # resourceCategories/getAll accepts at most 1000 service ids per call
    category_batch_size: int = 1000

    model_config = SettingsConfigDict(env_prefix="MEWS_", populate_by_name=True)


class LoggingSettings(BaseSettings):
    """Logging configuration."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: Literal["json", "console"] = "json"

    model_config = SettingsConfigDict(env_prefix="LOG_")


class Settings(BaseSettings):
    """Main application settings."""

    environment: Literal["dev", "staging", "prod"] = "dev"
    debug: bool = False

    # Sub-settings
    mews: MewsSettings = MewsSettings()
    logging: LoggingSettings = LoggingSettings()

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
