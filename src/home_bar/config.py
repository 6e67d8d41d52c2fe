"""Application configuration."""

import os
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage: Literal["supabase", "memory"] = "supabase"
    supabase_url: str | None = None
    supabase_service_key: str | None = None
    inventory_table: str = "home_bar_inventory"
    recipes_table: str = "home_bar_recipes"
    recommendation_limit: int = Field(default=3, ge=1)
    random_seed: int | None = None
    cors_origins: str = "*"
    log_level: str = "INFO"
    environment: str = Field(default=_ENVIRONMENT, validation_alias="ENVIRONMENT")

    model_config = SettingsConfigDict(
        env_prefix="HOME_BAR_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
        populate_by_name=True,
    )


def parse_cors_origins(raw: str | None) -> list[str]:
    """Parse a comma separated list of allowed CORS origins."""
    if raw is None:
        return ["*"]
    cleaned = raw.strip()
    if cleaned in {"", "*"}:
        return ["*"]
    return [chunk.strip() for chunk in cleaned.split(",") if chunk.strip()]
