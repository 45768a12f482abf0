"""Configuration management for mime-sniffer."""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SnifferSettings(BaseSettings):
    """Detection settings."""

    model_config = SettingsConfigDict(
        env_prefix="MIME_SNIFFER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Bytes read from the start of each source
    header_size: int = Field(default=12, ge=1)

    # Returned when neither content nor extension identify the source
    default_mime_type: str = "application/octet-stream"

    # I/O timeouts in seconds (None = wait indefinitely)
    http_timeout: float | None = Field(default=None, gt=0)
    file_timeout: float | None = Field(default=None, gt=0)

    # Ask servers for the header bytes only instead of the full body
    use_range_requests: bool = True

    # Drop ?query and #fragment from URLs before deriving the extension
    strip_url_query: bool = False

    # Refuse to fetch URLs that resolve to loopback/private addresses
    block_private_networks: bool = False

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "console"] = "console"

    @field_validator("default_mime_type")
    @classmethod
    def _default_not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("default_mime_type must not be empty")
        return value


@lru_cache
def get_settings() -> SnifferSettings:
    """Get cached settings instance."""
    return SnifferSettings()
