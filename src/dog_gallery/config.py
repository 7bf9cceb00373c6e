"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    mongo_connection_string: str = Field(min_length=1)
    session_secret: str = Field(min_length=1)
    host: str = "127.0.0.1"
    port: int = 3000
    dog_api_url: str = "https://dog.ceo/api/breeds/image/random"
    default_database: str = "dog_gallery"
    session_idle_ttl_seconds: int = Field(default=86400, gt=0)
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
