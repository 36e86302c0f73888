"""Pytest configuration and fixtures for weatherview tests."""

from __future__ import annotations

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest


@pytest.fixture
def mock_session() -> MagicMock:
    """Create a mock aiohttp ClientSession."""
    import aiohttp

    return MagicMock(spec=aiohttp.ClientSession)


@pytest.fixture
def shanghai_payload() -> dict[str, Any]:
    """Current-weather body for Shanghai."""
    return make_payload("Shanghai", 21.6, "Clear", "açık")


def make_payload(
    name: str,
    temp: float,
    condition: str | None = "Clouds",
    description: str = "parçalı bulutlu",
    humidity: float = 64,
) -> dict[str, Any]:
    """Build an OpenWeatherMap current-weather body.

    Args:
        name: City display name
        temp: Temperature in Celsius
        condition: weather[0].main; None yields an empty weather list
        description: weather[0].description
        humidity: main.humidity

    Returns:
        Response body dict
    """
    weather: list[dict[str, Any]] = []
    if condition is not None:
        weather.append({"id": 800, "main": condition, "description": description})
    return {
        "name": name,
        "main": {"temp": temp, "humidity": humidity},
        "weather": weather,
        "cod": 200,
    }


def create_mock_response(
    status: int = 200,
    json_data: Any = None,
    json_error: Exception | None = None,
) -> AsyncMock:
    """Create a configured mock response.

    Args:
        status: HTTP status code
        json_data: Data to return from json() call
        json_error: Exception raised by json() call

    Returns:
        Configured AsyncMock response
    """
    response = AsyncMock()
    response.status = status

    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = json_data

    response.__aenter__.return_value = response
    response.__aexit__.return_value = None

    return response
