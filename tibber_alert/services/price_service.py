"""
Price service - fetches today's prices and finds the cheapest hour.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import ValidationError

from tibber_alert.const import GET_TODAY_PRICES_QUERY
from tibber_alert.logging_config import get_logger
from tibber_alert.models.price import PriceRecord
from tibber_alert.models.result import Err, ErrorKind, Ok, Result
from tibber_alert.services.tibber_client import TibberClient

logger = get_logger(__name__)

PriceEntry = Union[PriceRecord, Dict[str, Any]]


def _price_total(entry: PriceEntry) -> Optional[Decimal]:
    """
    Return the entry's total as a finite Decimal, or None if it is not a number.

    Booleans and numeric strings are not accepted as numbers.
    """
    if isinstance(entry, PriceRecord):
        total = entry.total
    else:
        total = entry.get("total")

    if isinstance(total, bool) or not isinstance(total, (int, float, Decimal)):
        return None

    try:
        value = total if isinstance(total, Decimal) else Decimal(str(total))
    except InvalidOperation:
        return None
    return value if value.is_finite() else None


def find_cheapest(records: Iterable[PriceEntry]) -> Optional[PriceRecord]:
    """
    Find the record with the lowest total price.

    Entries whose total is not a finite number are skipped. On ties the first
    entry in input order wins.

    Args:
        records: Today's price entries, raw API mappings or PriceRecord objects

    Returns:
        The cheapest PriceRecord, or None if the input is empty, holds no valid
        totals, or is structurally malformed.
    """
    cheapest = None
    cheapest_total = None

    try:
        for entry in records:
            total = _price_total(entry)
            if total is None:
                logger.warning("Invalid price data encountered, skipping", entry=entry)
                continue
            if cheapest_total is None or total < cheapest_total:
                cheapest, cheapest_total = entry, total

        if cheapest is None:
            return None
        if isinstance(cheapest, PriceRecord):
            return cheapest
        return PriceRecord.from_api(cheapest)

    except (AttributeError, TypeError, ValidationError) as e:
        logger.error("Error finding the cheapest hour", error=str(e))
        return None


class PriceService:
    """Service for fetching today's Tibber prices."""

    def __init__(self, client: TibberClient):
        self.client = client

    async def fetch_today_prices(self) -> Result[List[Dict[str, Any]]]:
        """
        Fetch today's hourly prices for the first home on the account.

        Returns:
            Ok with the raw priceInfo.today entries, or Err if the request
            failed, the response misses the expected fields, or the list is empty.
        """
        result = await self.client.request(GET_TODAY_PRICES_QUERY)
        if not result.ok:
            return result

        today = self._extract_today(result.value)
        if today is None:
            logger.warning("Could not parse today's price data from Tibber API")
            return Err(ErrorKind.DATA_SHAPE, "Response is missing priceInfo.today", result.value)

        if not isinstance(today, list) or not today:
            logger.warning("No price data available for today")
            return Err(ErrorKind.NO_DATA, "No price data available for today", today)

        logger.debug("Fetched today's prices", count=len(today))
        return Ok(today)

    @staticmethod
    def _extract_today(data: Any) -> Any:
        """Navigate viewer.homes[0].currentSubscription.priceInfo.today, None if any step is missing."""
        try:
            home = data["viewer"]["homes"][0]
            return home["currentSubscription"]["priceInfo"]["today"]
        except (KeyError, IndexError, TypeError):
            return None
