#!/usr/bin/env python3
"""
Development helper scripts for the Tibber price alert service.
Provides utilities for manual checks, inspecting prices and test notifications.
"""

import asyncio
import sys
from datetime import datetime
from pathlib import Path

# Add the project root to Python path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from tibber_alert.config import Settings, load_settings
from tibber_alert.exceptions import ConfigurationError
from tibber_alert.logging_config import setup_logging
from tibber_alert.scheduler.simple_scheduler import SimpleScheduler
from tibber_alert.services.alert_service import AlertService
from tibber_alert.services.notification_service import NotificationService
from tibber_alert.services.price_service import PriceService, find_cheapest
from tibber_alert.services.tibber_client import TibberClient


async def check_prices(settings: Settings):
    """Run one price check now, as the scheduler would."""
    print("Running price check...")
    setup_logging(settings.log_level, settings.log_format)

    scheduler = SimpleScheduler(AlertService.from_settings(settings), settings)
    outcome = await scheduler.run_manual_check()
    print(f"Price check completed: {outcome.value}")


async def show_prices(settings: Settings):
    """Display today's prices, marking the cheapest hour."""
    print("Fetching today's prices...")
    setup_logging(settings.log_level, settings.log_format)

    result = await PriceService(TibberClient(settings)).fetch_today_prices()
    if not result.ok:
        print(f"No price data: {result.reason}")
        return

    cheapest = find_cheapest(result.value)

    print(f"\nFound {len(result.value)} price records:")
    print("-" * 64)
    print(f"{'Starts at':<20} {'Energy':<12} {'Tax':<12} {'Total':<12}")
    print("-" * 64)

    for entry in result.value:
        starts_at = entry.get("startsAt")
        is_cheapest = cheapest is not None and starts_at and datetime.fromisoformat(starts_at) == cheapest.starts_at
        marker = " <- cheapest" if is_cheapest else ""
        print(f"{str(entry.get('startsAt')):<20.19} "
              f"{str(entry.get('energy')):<12} {str(entry.get('tax')):<12} "
              f"{str(entry.get('total')):<12}{marker}")


async def test_notification(settings: Settings):
    """Send the notification for today's cheapest hour, regardless of the clock."""
    print("Sending test notification...")
    setup_logging(settings.log_level, settings.log_format)

    client = TibberClient(settings)
    result = await PriceService(client).fetch_today_prices()
    if not result.ok:
        print(f"No price data: {result.reason}")
        return

    sent = await NotificationService(client, settings.price_unit).notify(find_cheapest(result.value))
    if sent.ok:
        print(f"Notification sent to {sent.value.pushed_to_number_of_devices} devices")
    else:
        print(f"Notification failed: {sent.reason}")


def show_config(settings: Settings):
    """Display current configuration settings."""
    token = settings.tibber_api_token
    masked = f"{token[:4]}...{token[-4:]}" if len(token) > 8 else "****"

    print("Current Configuration:")
    print("-" * 40)
    print(f"API Endpoint: {settings.tibber_api_endpoint}")
    print(f"API Token: {masked}")
    print(f"Schedule: every hour at minute 0 {settings.schedule_timezone}")
    print(f"Compare Timezone: {settings.local_timezone or 'host local time'}")
    print(f"Run On Startup: {settings.run_on_startup}")
    print(f"Price Unit: {settings.price_unit}")
    print(f"Log Level: {settings.log_level}")
    print(f"Log Format: {settings.log_format}")


def main():
    """Main script entry point with command selection."""
    if len(sys.argv) < 2:
        print("Tibber Price Alert Development Scripts")
        print("Usage: python scripts/dev.py <command>")
        print("\nAvailable commands:")
        print("  check             - Run one price check now")
        print("  show-prices       - Display today's prices")
        print("  show-config       - Display current configuration")
        print("  test-notification - Send the notification for today's cheapest hour")
        return

    command = sys.argv[1]

    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    if command == "check":
        asyncio.run(check_prices(settings))
    elif command == "show-prices":
        asyncio.run(show_prices(settings))
    elif command == "show-config":
        show_config(settings)
    elif command == "test-notification":
        asyncio.run(test_notification(settings))
    else:
        print(f"Unknown command: {command}")
        print("Run without arguments to see available commands")


if __name__ == "__main__":
    main()
