"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str
    openai_model: str = "gpt-5.2"
    openai_reasoning_effort: str | None = "low"
    openai_store: bool = False
    admin_token: str
    plan_cache_ttl_seconds: int = Field(default=30 * 60, gt=0)
    plan_cache_max_entries: int = Field(default=256, ge=1)
    generation_timeout_seconds: float | None = Field(default=120.0, gt=0)
    cook_start_hour: int = Field(default=18, ge=0, le=23)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
