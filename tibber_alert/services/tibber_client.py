"""
Async client for the Tibber GraphQL API.
Sends one POST per call and reports failures as result values.
"""

import json
from typing import Any, Dict, Optional

import httpx

from tibber_alert.config import Settings
from tibber_alert.logging_config import get_logger
from tibber_alert.models.result import Err, ErrorKind, Ok, Result

logger = get_logger(__name__)


class TibberClient:
    """Thin client over the Tibber GraphQL endpoint."""

    def __init__(self, settings: Settings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.endpoint = settings.tibber_api_endpoint
        self._token = settings.tibber_api_token
        self._transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
        }

    async def request(self, query: str, variables: Optional[Dict[str, Any]] = None) -> Result[Any]:
        """
        Make a GraphQL request to the Tibber API.

        Args:
            query: The GraphQL query or mutation document
            variables: Optional variables for the query or mutation

        Returns:
            Ok with the "data" field of the response, or Err describing why no
            data is available. Never raises for network, HTTP or GraphQL errors.
        """
        payload = {"query": query, "variables": variables or {}}

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(self.endpoint, json=payload, headers=self.headers)
        except httpx.HTTPError as e:
            logger.error("Error making Tibber API request", error=str(e), endpoint=self.endpoint)
            return Err(ErrorKind.TRANSPORT, f"Request failed: {e}")

        if not response.is_success:
            logger.error("HTTP error from Tibber API", status=response.status_code, message=response.text)
            return Err(ErrorKind.HTTP, f"HTTP error {response.status_code}", response.text)

        try:
            body = response.json()
        except ValueError as e:
            logger.error("Invalid JSON from Tibber API", error=str(e), message=response.text)
            return Err(ErrorKind.PARSE, f"Invalid JSON: {e}", response.text)

        if not isinstance(body, dict):
            logger.error("Unexpected response body from Tibber API", body=body)
            return Err(ErrorKind.PARSE, "Response body is not a JSON object", body)

        if body.get("errors") is not None:
            logger.error("GraphQL errors", errors=json.dumps(body["errors"], indent=2))
            return Err(ErrorKind.GRAPHQL, "GraphQL errors in response", body["errors"])

        return Ok(body.get("data"))
