"""
Tibber Price Alert - hourly cheapest-hour push notifications

A small service that polls the Tibber GraphQL API every hour and sends a push
notification when the current hour is the cheapest hour of the day.

Main components:
- Tibber API client returning explicit result values
- Price service with the cheapest-hour evaluator
- Notification service for the push mutation
- Hourly background scheduler
"""

__version__ = "1.0.0"
