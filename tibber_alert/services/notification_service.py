"""
Notification service - sends the low price push notification through Tibber.
"""

from typing import Optional

from pydantic import ValidationError

from tibber_alert.const import NOTIFICATION_MESSAGE, NOTIFICATION_TITLE, SEND_NOTIFICATION_MUTATION
from tibber_alert.logging_config import get_logger
from tibber_alert.models.price import NotificationRequest, NotificationResult, PriceRecord
from tibber_alert.models.result import Err, ErrorKind, Ok, Result
from tibber_alert.services.tibber_client import TibberClient

logger = get_logger(__name__)


class NotificationService:
    """Sends push notifications to the devices linked to the Tibber account."""

    def __init__(self, client: TibberClient, price_unit: str):
        self.client = client
        self.price_unit = price_unit

    def build_request(self, hour: PriceRecord) -> NotificationRequest:
        """Build the notification texts for the given cheapest hour."""
        return NotificationRequest(
            title=NOTIFICATION_TITLE,
            message=NOTIFICATION_MESSAGE.format(total=hour.total, unit=self.price_unit),
        )

    async def notify(self, hour: Optional[PriceRecord]) -> Result[NotificationResult]:
        """
        Send a low price notification for the cheapest hour.

        Never raises: every failure is logged and returned as Err.
        """
        if hour is None:
            logger.warning("Cannot send notification: cheapest hour data missing")
            return Err(ErrorKind.NO_DATA, "Cheapest hour data missing")

        logger.info("Sending notification for cheapest hour today", starts_at=hour.starts_at.isoformat())

        try:
            notification = self.build_request(hour)
            result = await self.client.request(SEND_NOTIFICATION_MUTATION, notification.model_dump())
            if not result.ok:
                logger.warning("Failed to send notification", reason=result.reason)
                return result

            payload = (result.value or {}).get("sendPushNotification")
            if not payload:
                logger.warning("Failed to send notification or no devices received it", result=result.value)
                return Err(ErrorKind.EVALUATION, "Missing sendPushNotification in response", result.value)

            outcome = NotificationResult.model_validate(payload)
            if not outcome.successful:
                logger.warning("Failed to send notification or no devices received it", result=result.value)
                return Err(ErrorKind.EVALUATION, "Notification was not successful", result.value)

            logger.info("Notification sent successfully", devices=outcome.pushed_to_number_of_devices)
            return Ok(outcome)

        except (AttributeError, TypeError, ValidationError) as e:
            logger.error("Unexpected notification response", error=str(e))
            return Err(ErrorKind.EVALUATION, f"Unexpected notification response: {e}")
        except Exception as e:
            logger.exception("Error during push notification sending process", error=str(e))
            return Err(ErrorKind.UNEXPECTED, f"Notification failed: {e}")
