"""
Configuration and settings for the Corenotes API.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the FastAPI service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Frontend origin allowed by CORS
    website_base_url: str = Field(default="http://localhost:3000")

    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3333)

    # Database (Postgres expected)
    database_url: Optional[str] = Field(default=None)

    # Development toggles
    use_in_memory_backends: bool = Field(default=False)

    # Session tokens issued by the auth service
    auth_secret: str = Field(default="dev-secret")
    auth_algorithm: str = Field(default="HS256")
    auth_cookie_name: str = Field(default="corenotes_session")

    log_level: str = Field(default="INFO")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()
