"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from fitness_tracker.domain.profiles import DEFAULT_CALORIE_GOAL

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    off_base_url: str = "https://world.openfoodfacts.org"
    off_page_size: int = 20
    food_search_ttl_seconds: int = 3600
    default_calorie_goal: int = DEFAULT_CALORIE_GOAL
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
