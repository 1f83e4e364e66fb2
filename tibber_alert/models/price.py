"""
Pydantic data models for Tibber price data and push notifications.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PriceRecord(BaseModel):
    """
    Represents the price of electricity for one hour of today.

    Based on the Tibber priceInfo format:
    {"total": 0.2321, "energy": 0.1601, "tax": 0.072, "startsAt": "2024-01-15T14:00:00.000+01:00"}
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    total: Decimal = Field(description="Total price per kWh (energy + tax), can be negative")
    energy: Decimal = Field(description="Spot energy price per kWh")
    tax: Decimal = Field(description="Taxes and fees per kWh")
    starts_at: datetime = Field(alias="startsAt", description="Start of the hour, with UTC offset")

    @field_validator("total", "energy", "tax", mode="before")
    @classmethod
    def _float_to_decimal(cls, value: Any) -> Any:
        # JSON numbers arrive as floats; go through str to keep 0.05 as Decimal("0.05")
        if isinstance(value, float):
            return Decimal(str(value))
        return value

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "PriceRecord":
        """Build a record from one entry of the priceInfo.today list."""
        return cls.model_validate(data)


class NotificationRequest(BaseModel):
    """
    Title and message of one push notification, built fresh for every send.
    """
    model_config = ConfigDict(frozen=True)

    title: str
    message: str


class NotificationResult(BaseModel):
    """
    Outcome of the sendPushNotification mutation.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    successful: bool = False
    pushed_to_number_of_devices: Optional[int] = Field(default=None, alias="pushedToNumberOfDevices")
