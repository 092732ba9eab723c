"""
Application configuration using Pydantic BaseSettings.
Loads environment variables and provides typed configuration.
"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Project metadata
    PROJECT_NAME: str = "ClientDesk CRM"
    VERSION: str = "0.1.0"

    # Client list
    PAGE_SIZE: int = 10
    DEFAULT_STATUS: str = "Prospect"

    # Seed data is reloaded on every start; nothing is persisted
    SEED_ON_STARTUP: bool = True

    # Logging
    LOG_LEVEL: str = "INFO"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
