"""
Application configuration using Pydantic Settings.

Loads configuration from environment variables (.env file).
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project Info
    PROJECT_NAME: str = "TrainFuel readiness service"
    VERSION: str = "0.1.0"
    PROJECT_URL: str = "https://github.com/trainfuel/trainfuel-readiness"

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Database (document store backing the upstream cache)
    DATABASE_URL: str = "sqlite:///./trainfuel.db"

    # Data-kind discriminator for cached upstream activities
    ACTIVITY_CACHE_KIND: str = "activities"

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=True, extra="ignore")


# Global settings instance
settings = Settings()
