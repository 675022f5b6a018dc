"""
Configuration settings for the FoodShare API.

Loads environment variables from .env file and provides typed configuration.
"""

from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    API_PREFIX: str = "/api"
    CORS_ORIGINS: List[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins (the single-page front end)",
    )

    # Database Configuration
    DATABASE_URL: str = Field(
        default="sqlite:///./data/foodshare.db", description="SQLAlchemy database URL"
    )
    DATABASE_ECHO: bool = Field(
        default=False, description="Echo SQL queries (for debugging)"
    )

    # Expiration alerts
    DISPLAY_ALERT_DAYS: int = Field(
        default=7, ge=0, description="Upper bound (days) of the user-facing alert list"
    )
    SYNC_ALERT_DAYS: int = Field(
        default=3, ge=0, description="Upper bound (days) for persisted alert records"
    )

    # Rate limiting (slowapi)
    RATE_LIMIT_ENABLED: bool = Field(
        default=True, description="Toggle slowapi rate limiting"
    )
    WORKFLOW_RATE_LIMIT: str = Field(
        default="30/minute",
        description="Limit for claim / accept / decline / mark-available calls",
    )

    # Logging Configuration
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# Global settings instance
settings = Settings()
