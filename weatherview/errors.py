"""Client error types for weather lookups."""

from __future__ import annotations


class WeatherClientError(Exception):
    """Base error for a failed weather fetch."""


class WeatherTimeout(WeatherClientError):
    """Timeout while communicating with the weather API."""


class WeatherConnectionError(WeatherClientError):
    """Network connection to the weather API failed."""


class WeatherResponseError(WeatherClientError):
    """Non-2xx HTTP response from the weather API."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status


class WeatherParseError(WeatherClientError):
    """Response body is not JSON or is missing required fields."""


class WeatherConfigError(Exception):
    """Required configuration is missing or invalid."""


class BackgroundConfigError(Exception):
    """Background asset mapping could not be loaded."""
