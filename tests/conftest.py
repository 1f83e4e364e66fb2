"""
Test configuration and fixtures for the Tibber price alert tests.
Contains shared fixtures and a fake Tibber GraphQL endpoint.
"""

import json
from typing import Any, Dict, List, Optional

import httpx
import pytest

from tibber_alert.config import Settings

TEST_ENDPOINT = "https://api.tibber.test/v1-beta/gql"
TEST_TOKEN = "test-token-1234567890"

# Hourly totals for 2024-01-15: hour 3 is the cheapest, hour 14 the second cheapest
CHEAPEST_HOUR = 3


def make_price_entry(hour: int, total: Any, day: str = "2024-01-15") -> Dict[str, Any]:
    """Build one priceInfo.today entry as returned by the Tibber API."""
    return {
        "total": total,
        "energy": round(total - 0.05, 4) if isinstance(total, float) else total,
        "tax": 0.05,
        "startsAt": f"{day}T{hour:02d}:00:00.000+01:00",
    }


def make_today_prices() -> List[Dict[str, Any]]:
    """24 hourly entries; hour 3 costs 0.05, hour 14 costs 0.30, all others more."""
    entries = []
    for hour in range(24):
        if hour == CHEAPEST_HOUR:
            total = 0.05
        elif hour == 14:
            total = 0.30
        else:
            total = round(0.35 + hour * 0.01, 4)
        entries.append(make_price_entry(hour, total))
    return entries


def price_response(today: Any) -> Dict[str, Any]:
    """Wrap today's entries in the full price query response."""
    return {
        "data": {
            "viewer": {
                "homes": [
                    {"currentSubscription": {"priceInfo": {"today": today}}}
                ]
            }
        }
    }


def notification_response(successful: bool = True, devices: Optional[int] = 2) -> Dict[str, Any]:
    """Build the sendPushNotification mutation response."""
    return {
        "data": {
            "sendPushNotification": {
                "successful": successful,
                "pushedToNumberOfDevices": devices,
            }
        }
    }


class FakeTibberAPI:
    """
    Fake Tibber GraphQL endpoint for httpx.MockTransport.

    Answers the price query with price_body and the notification mutation with
    notify_body, and records every request it receives.
    """

    def __init__(self, price_body: Any = None, notify_body: Any = None, status_code: int = 200):
        self.price_body = price_body if price_body is not None else price_response(make_today_prices())
        self.notify_body = notify_body if notify_body is not None else notification_response()
        self.status_code = status_code
        self.requests: List[httpx.Request] = []

    @property
    def payloads(self) -> List[Dict[str, Any]]:
        return [json.loads(request.content) for request in self.requests]

    @property
    def notification_payloads(self) -> List[Dict[str, Any]]:
        return [p for p in self.payloads if "sendPushNotification" in p["query"]]

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        payload = json.loads(request.content)
        body = self.notify_body if "sendPushNotification" in payload["query"] else self.price_body
        return httpx.Response(self.status_code, json=body)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def settings() -> Settings:
    """
    Settings independent of the environment and any .env file.
    """
    return Settings(
        _env_file=None,
        tibber_api_token=TEST_TOKEN,
        tibber_api_endpoint=TEST_ENDPOINT,
        local_timezone="Europe/Amsterdam",
    )


@pytest.fixture
def today_prices() -> List[Dict[str, Any]]:
    """
    Today's 24 hourly price entries with hour 3 as the cheapest.
    """
    return make_today_prices()


@pytest.fixture
def fake_api() -> FakeTibberAPI:
    """
    Fake Tibber endpoint answering with today's prices and a successful notification.
    """
    return FakeTibberAPI()
