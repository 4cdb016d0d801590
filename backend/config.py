"""Application configuration settings."""

from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the contribution API."""

    model_config = SettingsConfigDict(env_prefix="CONTRIB_", env_file=".env", extra="ignore")

    # IRS 401(k) employee deferral limit for 2024, under 50
    plan_annual_limit: float = 23000.0

    log_level: str = "INFO"

    # CORS (for the React dev server)
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:5173",
        "http://127.0.0.1:3000",
        "http://127.0.0.1:5173",
    ]


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings
