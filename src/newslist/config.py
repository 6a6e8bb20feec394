"""Configuration loading for newslist."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NEWS_API_BASE_URL = "http://localhost:8080"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_prefix="NEWSLIST_")

    news_api_base_url: str = Field(
        default=DEFAULT_NEWS_API_BASE_URL,
        description="Base URL of the news API; articles are read from <base>/news",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    log_json: bool = Field(default=True, description="Emit JSON log lines instead of console output")

    @field_validator("news_api_base_url")
    @classmethod
    def validate_news_api_base_url(cls, v: str) -> str:
        """Validate the base URL is set and drop any trailing slash."""
        if not v or not v.strip():
            raise ValueError(
                "NEWSLIST_NEWS_API_BASE_URL must not be empty. "
                "Set it to the root URL of the news API."
            )
        return v.strip().rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
