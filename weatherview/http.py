"""HTTP client for the OpenWeatherMap current-weather endpoint."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from .errors import (
    WeatherConnectionError,
    WeatherParseError,
    WeatherResponseError,
    WeatherTimeout,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.openweathermap.org/data/2.5/weather"
DEFAULT_TIMEOUT = 10.0


class WeatherHttpClient:
    """HTTP client wrapper for the current-weather endpoint."""

    def __init__(
        self,
        session: aiohttp.ClientSession,
        api_key: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        units: str = "metric",
        lang: str = "tr",
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._session = session
        self._api_key = api_key
        self._base_url = base_url
        self._units = units
        self._lang = lang
        self._timeout = timeout

    def _params(self, city: str) -> dict[str, str]:
        return {
            "q": city,
            "units": self._units,
            "lang": self._lang,
            "appid": self._api_key,
        }

    async def fetch_current(self, city: str) -> dict[str, Any]:
        """Fetch current conditions for a city.

        The city is sent verbatim; an empty name is left for the API to
        reject.

        Args:
            city: City name as typed by the user.

        Returns:
            Decoded JSON object from the response body.

        Raises:
            WeatherResponseError: If the API returns a non-2xx status
            WeatherParseError: If the body is not a JSON object
            WeatherTimeout: If the request times out
            WeatherConnectionError: If the network request fails
        """
        _LOGGER.debug("Fetching current weather for %r", city)
        try:
            async with self._session.get(
                self._base_url,
                params=self._params(city),
                timeout=aiohttp.ClientTimeout(total=self._timeout),
            ) as resp:
                if not 200 <= resp.status < 300:
                    raise WeatherResponseError(
                        resp.status, await _error_message(resp)
                    )
                try:
                    data = await resp.json(content_type=None)
                except ValueError as err:
                    raise WeatherParseError("Response body is not valid JSON") from err
        except TimeoutError as err:
            raise WeatherTimeout("Weather request timed out") from err
        except aiohttp.ClientError as err:
            raise WeatherConnectionError("Weather request failed") from err

        if not isinstance(data, dict):
            raise WeatherParseError("Response body is not a JSON object")
        return data


async def _error_message(resp: aiohttp.ClientResponse) -> str:
    """Build an error message, including the API's own reason when present."""
    message = f"Weather request failed with status {resp.status}"
    try:
        body = await resp.json(content_type=None)
    except (aiohttp.ClientError, ValueError):
        return message
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return f"{message}: {body['message']}"
    return message
