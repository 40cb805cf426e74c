"""Application settings powered by Pydantic BaseSettings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.catalog.constants import DEFAULT_TIMEOUT_SECONDS
from src.catalog.models import CachePolicy, Storefront


class AppSettings(BaseSettings):
    """Centralized environment configuration."""

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    developer_token: str = Field(
        default="", validation_alias="APPLE_MUSIC_DEVELOPER_TOKEN"
    )
    user_token: str | None = Field(
        default=None, validation_alias="APPLE_MUSIC_USER_TOKEN"
    )
    storefront: Storefront = Field(
        default=Storefront.UNITED_STATES, validation_alias="APPLE_MUSIC_STOREFRONT"
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        gt=0,
        validation_alias="APPLE_MUSIC_TIMEOUT_SECONDS",
    )
    cache_policy: CachePolicy = Field(
        default=CachePolicy.RETURN_CACHE_DATA_ELSE_LOAD,
        validation_alias="APPLE_MUSIC_CACHE_POLICY",
    )


def get_settings() -> AppSettings:
    """Get a settings instance."""
    return AppSettings()
