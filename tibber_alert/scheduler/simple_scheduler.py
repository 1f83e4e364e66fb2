"""
Simple asyncio scheduler running the price check at the top of every hour.
Runs one check at startup and never lets a failed check stop the loop.
"""

import asyncio
from datetime import datetime
from typing import Optional

from tibber_alert.config import Settings
from tibber_alert.logging_config import get_logger
from tibber_alert.services.alert_service import AlertService, TickOutcome
from tibber_alert.utils.time_utils import current_time, get_next_hour_start, get_timezone

logger = get_logger(__name__)


class SimpleScheduler:
    """Background task scheduler for the hourly price check."""

    def __init__(self, alert_service: AlertService, settings: Settings):
        self.alert_service = alert_service
        self.tz = get_timezone(settings.schedule_timezone)
        self.run_on_startup = settings.run_on_startup
        self._running = False
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    async def start(self) -> None:
        """Start the scheduler background task."""
        if self._running:
            logger.warning("Scheduler already running")
            return

        self._running = True
        self._task = asyncio.create_task(self._scheduler_loop())
        logger.info("Scheduler started", schedule="every hour at minute 0", timezone=self.tz.zone)

    async def stop(self) -> None:
        """Stop the scheduler."""
        if not self._running:
            return

        self._running = False
        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass

        logger.info("Scheduler stopped")

    async def _scheduler_loop(self) -> None:
        """Main scheduler loop."""
        if self.run_on_startup:
            logger.info("Checking prices for the first time")
            await self._check_prices_job()

        while self._running:
            try:
                next_run = self._calculate_next_run()

                # asyncio.sleep can return before the wall clock reaches next_run
                while self._running:
                    sleep_seconds = (next_run - current_time(self.tz)).total_seconds()
                    if sleep_seconds <= 0:
                        break
                    logger.debug("Next price check scheduled", next_run=next_run.isoformat(), sleep_seconds=sleep_seconds)
                    await asyncio.sleep(sleep_seconds)

                if not self._running:
                    break

                await self._check_prices_job()

            except asyncio.CancelledError:
                break
            except Exception as e:
                logger.error("Scheduler loop error", error=str(e))
                # Sleep and continue
                await asyncio.sleep(60)

    def _calculate_next_run(self, now: Optional[datetime] = None) -> datetime:
        """Calculate the next top of the hour in the schedule timezone."""
        return get_next_hour_start(now or current_time(self.tz), self.tz)

    async def _check_prices_job(self) -> TickOutcome:
        """Execute one price check, skipping it if another check is still running."""
        if self._lock.locked():
            logger.warning("Previous price check still running, skipping this trigger")
            return TickOutcome.SKIPPED

        async with self._lock:
            job_start = datetime.now()
            try:
                outcome = await self.alert_service.check_prices_and_notify()
            except Exception as e:
                logger.error(
                    "Price check failed",
                    error=str(e),
                    duration_seconds=(datetime.now() - job_start).total_seconds(),
                )
                return TickOutcome.FAILED

            logger.info(
                "Completed price check",
                outcome=outcome.value,
                duration_seconds=(datetime.now() - job_start).total_seconds(),
            )
            return outcome

    async def run_manual_check(self) -> TickOutcome:
        """Run a manual price check."""
        logger.info("Running manual price check")
        return await self._check_prices_job()

    @property
    def is_running(self) -> bool:
        """Check if scheduler is running."""
        return self._running
