from functools import lru_cache
from typing import cast

from pydantic import AnyHttpUrl, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    app_name: str = Field(
        default="Vault Metadata API",
        description="Application name",
    )
    api_base_url: AnyHttpUrl = Field(
        default=cast(AnyHttpUrl, "http://localhost:8000"),
        description="Base URL the client helper posts metadata requests to",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level",
    )
    fetch_timeout: float = Field(
        default=10.0,
        gt=0,
        description="Seconds to wait on the remote page before giving up",
    )
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
        ),
        description="User-Agent sent when fetching pages",
    )
    accept: str = Field(
        default=(
            "text/html,application/xhtml+xml,application/xml;q=0.9,"
            "image/webp,*/*;q=0.8"
        ),
        description="Accept header sent when fetching pages",
    )
    accept_language: str = Field(
        default="en-US,en;q=0.5",
        description="Accept-Language header sent when fetching pages",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def fetch_headers(self) -> dict[str, str]:
        return {
            "User-Agent": self.user_agent,
            "Accept": self.accept,
            "Accept-Language": self.accept_language,
        }


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
