"""Configuration management for WPC."""

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from wpc.core.constants import CATALOG_BASE_URL, FALLBACK_BASE_URL, APIConstants, CacheLimits
from wpc.exceptions import ConfigurationError


class Config(BaseSettings):
    """Application configuration."""

    catalog_base_url: str = Field(
        default=CATALOG_BASE_URL,
        alias="WPC_CATALOG_BASE_URL",
        description="Base URL of the remote catalog data files",
    )
    fallback_base_url: str = Field(
        default=FALLBACK_BASE_URL,
        alias="WPC_FALLBACK_BASE_URL",
        description="Base URL of the application-local catalog endpoints",
    )
    cache_ttl_seconds: float = Field(
        default=float(CacheLimits.CATALOG_TTL_SECONDS),
        alias="WPC_CACHE_TTL_SECONDS",
        description="How long fetched catalog data stays fresh",
    )
    request_timeout: float = Field(
        default=float(APIConstants.REQUEST_TIMEOUT),
        alias="WPC_REQUEST_TIMEOUT",
        description="Transport timeout for catalog requests in seconds",
    )
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".wpc",
        alias="WPC_DATA_DIR",
        description="Directory for saved customizations",
    )
    profile: str = Field(
        default="local",
        alias="WPC_PROFILE",
        description="Profile (Steam ID) whose customizations are stored",
    )

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )


def load_config() -> Config:
    """Load configuration from environment and .env file.

    Raises:
        ConfigurationError: If a setting has an invalid value
    """
    try:
        return Config()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
