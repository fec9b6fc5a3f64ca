"""Application settings and configuration management."""

from functools import lru_cache
from typing import List, Optional

from pydantic import Field, ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application
    app_name: str = Field(default="Fuzzy Page Search")
    app_version: str = Field(default="1.0.0")
    debug: bool = Field(default=False)

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)
    workers: int = Field(default=1)

    # Search defaults, used when a request leaves a value out
    fuzzy_distance: int = Field(default=20, ge=1)
    count_before: int = Field(default=0, ge=0)
    count_after: int = Field(default=0, ge=0)
    max_query_length: int = Field(default=500)

    # Outbound fetching
    request_timeout: float = Field(default=30.0)
    user_agent: Optional[str] = Field(default=None)
    proxy_url: str = Field(default="")  # e.g. http://api.scraperapi.com/
    proxy_api_key: str = Field(default="")

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    # CORS
    cors_origins: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:8080", "http://localhost:8000"]
    )

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra environment variables
    )


@lru_cache()
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
