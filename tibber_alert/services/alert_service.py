"""
Alert service - one hourly check: fetch today's prices, find the cheapest
hour, and send a notification when the current hour is the cheapest.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from tibber_alert.config import Settings
from tibber_alert.logging_config import get_logger
from tibber_alert.services.notification_service import NotificationService
from tibber_alert.services.price_service import PriceService, find_cheapest
from tibber_alert.services.tibber_client import TibberClient
from tibber_alert.utils.time_utils import current_time, get_timezone, is_current_hour, to_local

logger = get_logger(__name__)


class TickOutcome(str, Enum):
    """How a single price check ended."""
    NO_PRICE_DATA = "NO_PRICE_DATA"
    NO_CHEAPEST_HOUR = "NO_CHEAPEST_HOUR"
    NOT_CHEAPEST_HOUR = "NOT_CHEAPEST_HOUR"
    NOTIFIED = "NOTIFIED"
    NOTIFICATION_FAILED = "NOTIFICATION_FAILED"
    SKIPPED = "SKIPPED"
    FAILED = "FAILED"


class AlertService:
    """Runs the fetch, evaluate, compare, notify sequence."""

    def __init__(
        self,
        price_service: PriceService,
        notification_service: NotificationService,
        local_timezone: Optional[str] = None,
    ):
        self.price_service = price_service
        self.notification_service = notification_service
        self.tz = get_timezone(local_timezone) if local_timezone else None

    @classmethod
    def from_settings(cls, settings: Settings, client: Optional[TibberClient] = None) -> "AlertService":
        """Wire up the client and services from the startup settings."""
        client = client or TibberClient(settings)
        return cls(
            PriceService(client),
            NotificationService(client, settings.price_unit),
            local_timezone=settings.local_timezone,
        )

    async def check_prices_and_notify(self, now: Optional[datetime] = None) -> TickOutcome:
        """
        Fetch today's prices and notify if the current hour is the cheapest.

        Args:
            now: Time to compare against, defaults to the current wall clock

        Returns:
            The outcome of this check. Failures are logged, never raised.
        """
        logger.info("Hourly check: fetching today's prices")

        prices = await self.price_service.fetch_today_prices()
        if not prices.ok:
            logger.warning("Hourly check: could not fetch today's price data", kind=prices.kind.value, reason=prices.reason)
            return TickOutcome.NO_PRICE_DATA

        cheapest = find_cheapest(prices.value)
        if cheapest is None:
            logger.warning("Hourly check: could not determine the cheapest hour for today")
            return TickOutcome.NO_CHEAPEST_HOUR

        logger.info(
            "Hourly check: cheapest hour found",
            starts_at=cheapest.starts_at.isoformat(),
            price=str(cheapest.total),
        )

        now = to_local(now, self.tz) if now is not None else current_time(self.tz)
        current_hour = now.hour

        if not is_current_hour(cheapest.starts_at, now=now, tz=self.tz):
            logger.info("Current hour is not the cheapest hour today, no notification sent", hour=f"{current_hour}:00")
            return TickOutcome.NOT_CHEAPEST_HOUR

        logger.info("Current hour IS the cheapest hour today, sending notification", hour=f"{current_hour}:00")
        sent = await self.notification_service.notify(cheapest)
        if not sent.ok:
            logger.warning("Hourly check: notification not delivered", kind=sent.kind.value, reason=sent.reason)
            return TickOutcome.NOTIFICATION_FAILED

        return TickOutcome.NOTIFIED
