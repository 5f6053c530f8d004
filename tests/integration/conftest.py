"""
Integration Test Fixtures.

Fixtures that drive the full ASGI application over httpx. Each test gets
a fresh application with its own NoteStore.
"""

from collections.abc import AsyncGenerator
from typing import Any

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from notes_api.main import create_app
from notes_api.services.note_store import NoteStore


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
def app(note_store: NoteStore) -> FastAPI:
    """Application serving the test's note store."""
    return create_app(store=note_store)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the application.

    Unhandled exceptions are turned into 500 responses instead of being
    re-raised into the test, matching what a real server returns.

    Usage:
        async def test_health_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as test_client:
        yield test_client


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_success(
        response: Any,
        expected_status: int = 200,
        message: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is successful.

        Args:
            response: httpx Response object
            expected_status: Expected HTTP status code
            message: Expected envelope message (optional)

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is True, f"Response not successful: {data}"
        assert "data" in data, f"Missing data: {data}"
        if message is not None:
            assert data.get("message") == message
        return data

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_category: str | None = None,
        message_contains: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert API response is an error.

        Args:
            response: httpx Response object
            expected_status: Expected HTTP status code
            expected_category: Expected error category (optional)
            message_contains: Substring expected in the message (optional)

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert data.get("success") is False, f"Response should be error: {data}"
        assert "data" not in data, f"Error carries data: {data}"

        if expected_category:
            assert data.get("error") == expected_category, (
                f"Expected category {expected_category}, got {data.get('error')}"
            )
        if message_contains:
            assert message_contains in data.get("message", "")

        return data

    @staticmethod
    def assert_validation_error(response: Any, message_contains: str) -> dict[str, Any]:
        """Assert a 400 Validation Error whose message contains the given text."""
        return ApiAssertions.assert_error(response, 400, "Validation Error", message_contains)

    @staticmethod
    def assert_not_found(response: Any) -> dict[str, Any]:
        """Assert the standard missing-note response."""
        data = ApiAssertions.assert_error(response, 404, "Not Found")
        assert data["message"] == "Note not found"
        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()
