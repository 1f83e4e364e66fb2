"""
Health check module for Docker health checks and monitoring.
Verifies that the Tibber API answers the price query with today's prices.
"""

import asyncio
import sys

from tibber_alert.config import Settings, load_settings
from tibber_alert.exceptions import ConfigurationError
from tibber_alert.logging_config import get_logger, setup_logging
from tibber_alert.services.price_service import PriceService
from tibber_alert.services.tibber_client import TibberClient

logger = get_logger(__name__)


async def health_check(settings: Settings) -> bool:
    """
    Check that today's prices can be fetched.
    """
    try:
        result = await PriceService(TibberClient(settings)).fetch_today_prices()
    except Exception as e:
        logger.error("Health check failed", error=str(e))
        return False

    if not result.ok:
        logger.error("Health check failed", kind=result.kind.value, reason=result.reason)
        return False
    return True


async def main():
    """
    Main health check entry point for command line usage.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_format)
    is_healthy = await health_check(settings)

    if is_healthy:
        logger.info("Health check passed")
        sys.exit(0)
    else:
        logger.error("Health check failed")
        sys.exit(1)


def run():
    """Console script wrapper around main."""
    asyncio.run(main())


if __name__ == "__main__":
    run()
