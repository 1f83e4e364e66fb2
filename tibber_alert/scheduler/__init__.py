"""
Scheduler package for the Tibber price alert service.
Contains the hourly background task scheduler.
"""

from .simple_scheduler import SimpleScheduler

__all__ = [
    "SimpleScheduler",
]
