"""
Application settings using Pydantic BaseSettings.

This module defines the application settings that can be set
via environment variables.
"""


from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # Embedded SQLite catalog database
    database_path: str = Field(
        default="raceday.db",
        description="Path of the SQLite database file holding races and events",
    )

    seed_demo_data: bool = Field(
        default=True,
        description="Seed dummy races and events into empty tables at startup",
    )
    seed_race_count: int = Field(default=100, ge=0, description="Number of races to seed")
    seed_event_count: int = Field(default=100, ge=0, description="Number of events to seed")
    seed_random_seed: int | None = Field(
        default=None,
        description="Seed for the demo data generator, for reproducible data",
    )

    api_logging_enabled: bool = Field(
        default=True,
        description="Emit structured log entries for API errors and events",
    )

    # Use model_config instead of class Config
    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
        "extra": "allow",
    }


# Create a singleton instance of the settings
settings = Settings()


def get_settings() -> Settings:
    """
    Get the application settings.

    This function is provided as a dependency for FastAPI endpoints.

    Returns:
        The application settings
    """
    return settings
