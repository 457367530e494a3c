"""Runtime configuration for the threads client."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime configuration for the threads client."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Assistants API
    api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    base_url: str = Field(default="https://api.openai.com/v1/", alias="OPENAI_BASE_URL")
    organization: str | None = Field(default=None, alias="OPENAI_ORGANIZATION")
    beta_header: str = Field(default="assistants=v1", alias="OPENAI_BETA")

    # HTTP
    request_timeout: float = Field(default=60.0, alias="OPENAI_TIMEOUT")


@lru_cache
def get_settings() -> Settings:
    return Settings()
