"""
Configuration and settings for the weather backend.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    # HTTP listener
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000)
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # S3 bucket holding the prediction file and subscriber objects.
    # Credentials come from the boto3 default chain, never from here.
    s3_bucket_name: str = Field(default="daily-weather-output-mscac")
    aws_region: str = Field(default="us-east-2")
    s3_endpoint_url: Optional[str] = Field(default=None)
    store_connect_timeout: float = Field(default=5.0, gt=0)
    store_read_timeout: float = Field(default=10.0, gt=0)
    max_object_bytes: int = Field(default=1024 * 1024, gt=0)

    # Development toggles
    use_in_memory_backends: bool = Field(
        default=False, alias="WEATHER_USE_IN_MEMORY_BACKENDS"
    )

    log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
