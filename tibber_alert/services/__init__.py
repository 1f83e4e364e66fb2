"""
Services package for the Tibber price alert service.
Contains the API client, price and notification services, and the hourly check.
"""

from .alert_service import AlertService, TickOutcome
from .notification_service import NotificationService
from .price_service import PriceService, find_cheapest
from .tibber_client import TibberClient

__all__ = [
    "AlertService",
    "TickOutcome",
    "NotificationService",
    "PriceService",
    "find_cheapest",
    "TibberClient",
]
