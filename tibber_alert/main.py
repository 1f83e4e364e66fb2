"""
Main application entry point for the Tibber price alert service.
Loads the configuration, starts the hourly scheduler and runs until stopped.
"""

import asyncio
import signal
import sys

from tibber_alert.config import Settings, load_settings
from tibber_alert.exceptions import ConfigurationError
from tibber_alert.logging_config import get_logger, setup_logging
from tibber_alert.scheduler.simple_scheduler import SimpleScheduler
from tibber_alert.services.alert_service import AlertService

logger = get_logger(__name__)


def create_scheduler(settings: Settings) -> SimpleScheduler:
    """
    Create the scheduler with its services wired to the given settings.
    """
    return SimpleScheduler(AlertService.from_settings(settings), settings)


async def run(settings: Settings) -> None:
    """
    Run the scheduler until SIGINT or SIGTERM.
    """
    scheduler = create_scheduler(settings)
    stop_event = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop_event.set)
        except NotImplementedError:
            # Signal handlers are unavailable on Windows event loops
            pass

    logger.info("Tibber price alert bot started")
    await scheduler.start()
    logger.info("Waiting for scheduled hourly checks")

    try:
        await stop_event.wait()
    finally:
        await scheduler.stop()


def main() -> None:
    """
    Command line entry point.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings.log_level, settings.log_format)

    try:
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        pass
    logger.info("Tibber price alert bot stopped")


if __name__ == "__main__":
    main()
