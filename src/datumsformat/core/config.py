"""Configuration management using Pydantic Settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with environment and .env file support."""

    model_config = SettingsConfigDict(
        env_prefix="DATUMSFORMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Booking settings
    booking_window_months: int = Field(
        default=3, ge=0, description="How many months ahead the date picker allows"
    )
    booking_endpoint: str = Field(
        default="/webhook/booking-ops",
        description="Booking API endpoint the request payload is meant for",
    )

    # General settings
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: str = Field(default="INFO", description="Logging level")


# Singleton instance
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get settings singleton instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Reset settings singleton (useful for testing)."""
    global _settings
    _settings = None
