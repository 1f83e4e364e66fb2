"""
Application configuration management using Pydantic Settings.
Handles environment variables and default values for the service.
"""

from typing import Optional

import pytz
from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from tibber_alert.const import DEFAULT_PRICE_UNIT, DEFAULT_SCHEDULE_TIMEZONE
from tibber_alert.exceptions import ConfigurationError


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Constructed once at startup and passed to every component that needs it.
    """

    # Tibber API Configuration
    tibber_api_token: str = Field(min_length=1, description="Bearer token for the Tibber API")
    tibber_api_endpoint: str = Field(min_length=1, description="Tibber GraphQL endpoint URL")

    # Scheduler Configuration
    schedule_timezone: str = Field(
        default=DEFAULT_SCHEDULE_TIMEZONE,
        description="Timezone in which the hourly trigger fires at minute 0"
    )
    local_timezone: Optional[str] = Field(
        default=None,
        description="Timezone used to compare the cheapest hour with the clock (host local time if unset)"
    )
    run_on_startup: bool = Field(default=True, description="Run one price check immediately at startup")

    # Notification Configuration
    price_unit: str = Field(default=DEFAULT_PRICE_UNIT, description="Unit shown after the price in notifications")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", frozen=True)

    @field_validator("schedule_timezone")
    @classmethod
    def _known_schedule_timezone(cls, value: str) -> str:
        if not value:
            return DEFAULT_SCHEDULE_TIMEZONE
        if value not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {value}")
        return value

    @field_validator("local_timezone")
    @classmethod
    def _known_local_timezone(cls, value: Optional[str]) -> Optional[str]:
        if not value:
            return None
        if value not in pytz.all_timezones_set:
            raise ValueError(f"Unknown timezone: {value}")
        return value


def load_settings(**overrides) -> Settings:
    """
    Build the settings from the environment.

    Raises:
        ConfigurationError: If a required setting is missing or empty.
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = sorted({str(error["loc"][0]).upper() for error in e.errors() if error["loc"]})
        raise ConfigurationError(
            f"{' and '.join(fields) or 'Configuration'} must be set to valid values in the environment or the .env file."
        ) from e
