"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    environment: str = _ENVIRONMENT
    service_version: str = "1.0.0"
    log_level: str = "INFO"
    plan_cache_ttl_seconds: int = 60
    meal_seed: int | None = None
    brand_name: str = "Diet Planner"
    support_email: str = "support@dietplanner.local"

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
