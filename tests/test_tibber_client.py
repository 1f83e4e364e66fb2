"""
Unit tests for the Tibber GraphQL client.
Tests request construction and the mapping of failures to result values.
"""

import json

import httpx
import pytest

from tibber_alert.models.result import ErrorKind
from tibber_alert.services.tibber_client import TibberClient

from conftest import TEST_ENDPOINT, TEST_TOKEN


def client_for(settings, handler) -> TibberClient:
    return TibberClient(settings, transport=httpx.MockTransport(handler))


class TestTibberClient:
    """Tests for TibberClient.request."""

    @pytest.mark.asyncio
    async def test_request_sends_query_and_bearer_token(self, settings):
        """Test that the POST carries the query, variables and headers."""
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"data": {"ok": True}})

        result = await client_for(settings, handler).request("{ viewer { name } }", {"a": 1})

        assert result.ok
        assert result.value == {"ok": True}

        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == TEST_ENDPOINT
        assert request.headers["Authorization"] == f"Bearer {TEST_TOKEN}"
        assert request.headers["Content-Type"] == "application/json"
        assert json.loads(request.content) == {"query": "{ viewer { name } }", "variables": {"a": 1}}

    @pytest.mark.asyncio
    async def test_request_defaults_to_empty_variables(self, settings):
        """Test that variables default to an empty object."""
        seen = []

        def handler(request):
            seen.append(json.loads(request.content))
            return httpx.Response(200, json={"data": {}})

        await client_for(settings, handler).request("{ viewer { name } }")

        assert seen[0]["variables"] == {}

    @pytest.mark.asyncio
    async def test_http_error_status(self, settings):
        """Test that a non-success status returns an HTTP error."""
        def handler(request):
            return httpx.Response(500, text="Internal Server Error")

        result = await client_for(settings, handler).request("{ viewer { name } }")

        assert not result.ok
        assert result.kind == ErrorKind.HTTP
        assert "500" in result.reason
        assert result.detail == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_unauthorized_status(self, settings):
        """Test that an invalid token surfaces as an HTTP error, not an exception."""
        def handler(request):
            return httpx.Response(401, json={"message": "invalid token"})

        result = await client_for(settings, handler).request("{ viewer { name } }")

        assert result.kind == ErrorKind.HTTP

    @pytest.mark.asyncio
    async def test_network_error(self, settings):
        """Test that a transport failure returns a transport error."""
        def handler(request):
            raise httpx.ConnectError("Network error", request=request)

        result = await client_for(settings, handler).request("{ viewer { name } }")

        assert not result.ok
        assert result.kind == ErrorKind.TRANSPORT
        assert "Network error" in result.reason

    @pytest.mark.asyncio
    async def test_graphql_errors(self, settings):
        """Test that a top-level errors field returns a GraphQL error."""
        errors = [{"message": "Cannot query field"}]

        def handler(request):
            return httpx.Response(200, json={"errors": errors, "data": None})

        result = await client_for(settings, handler).request("{ viewer { nope } }")

        assert not result.ok
        assert result.kind == ErrorKind.GRAPHQL
        assert result.detail == errors

    @pytest.mark.asyncio
    async def test_empty_errors_list_is_still_an_error(self, settings):
        """Test that an empty errors list counts as a GraphQL error."""
        def handler(request):
            return httpx.Response(200, json={"errors": [], "data": {"viewer": {}}})

        result = await client_for(settings, handler).request("{ viewer { name } }")

        assert result.kind == ErrorKind.GRAPHQL

    @pytest.mark.asyncio
    async def test_invalid_json(self, settings):
        """Test that a body which is not JSON returns a parse error."""
        def handler(request):
            return httpx.Response(200, text="<html>maintenance</html>")

        result = await client_for(settings, handler).request("{ viewer { name } }")

        assert not result.ok
        assert result.kind == ErrorKind.PARSE

    @pytest.mark.asyncio
    async def test_json_that_is_not_an_object(self, settings):
        """Test that a JSON array body returns a parse error."""
        def handler(request):
            return httpx.Response(200, json=[1, 2, 3])

        result = await client_for(settings, handler).request("{ viewer { name } }")

        assert result.kind == ErrorKind.PARSE

    @pytest.mark.asyncio
    async def test_missing_data_field(self, settings):
        """Test that a response without data returns Ok(None)."""
        def handler(request):
            return httpx.Response(200, json={})

        result = await client_for(settings, handler).request("{ viewer { name } }")

        assert result.ok
        assert result.value is None
