"""Weather snapshot mapped from an OpenWeatherMap current-weather response.

Only the fields the screen renders are kept. A snapshot is built once per
successful fetch and replaced wholesale, so city, temperature and
description always come from the same response.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from ..errors import WeatherParseError


@dataclass(frozen=True)
class WeatherSnapshot:
    """Display model for one successful fetch.

    Attributes:
        city: City display name as returned by the API.
        temperature: Current temperature in Celsius, rounded to an integer.
        condition: Primary condition label (e.g., "Rain", "Clear"), or None
            when the response carried no condition entries.
        description: Localized human-readable description.
        humidity: Relative humidity percentage, if reported.
    """

    city: str
    temperature: int
    description: str
    condition: str | None = None
    humidity: float | None = None

    @property
    def temperature_label(self) -> str:
        """Temperature as rendered on screen (e.g., "21°")."""
        return f"{self.temperature}°"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, omitting absent values."""
        result: dict[str, Any] = {
            "city": self.city,
            "temperature": self.temperature,
            "description": self.description,
        }
        if self.condition is not None:
            result["condition"] = self.condition
        if self.humidity is not None:
            result["humidity"] = self.humidity
        return result

    @classmethod
    def from_openweather(cls, payload: dict[str, Any]) -> WeatherSnapshot:
        """Create a snapshot from a current-weather response body.

        Args:
            payload: Decoded JSON body.

        Returns:
            WeatherSnapshot populated from the response.

        Raises:
            WeatherParseError: If a required field is missing or mistyped.
        """
        name = payload.get("name")
        if not isinstance(name, str):
            raise WeatherParseError("Response is missing 'name'")

        main = payload.get("main")
        if not isinstance(main, dict):
            raise WeatherParseError("Response is missing 'main'")
        temp = _to_float(main.get("temp"))
        if temp is None:
            raise WeatherParseError("Response is missing 'main.temp'")

        conditions = payload.get("weather")
        if not isinstance(conditions, list):
            raise WeatherParseError("Response is missing 'weather'")

        condition: str | None = None
        description = ""
        if conditions:
            first = conditions[0]
            if not isinstance(first, dict):
                raise WeatherParseError("Malformed 'weather' entry")
            condition = first.get("main")
            description = first.get("description")
            if not isinstance(condition, str):
                raise WeatherParseError("Response is missing 'weather[0].main'")
            if not isinstance(description, str):
                raise WeatherParseError(
                    "Response is missing 'weather[0].description'"
                )

        return cls(
            city=name,
            temperature=_round_half_up(temp),
            description=description,
            condition=condition,
            humidity=_to_float(main.get("humidity")),
        )


def _to_float(value: Any) -> float | None:
    """Convert a JSON number to a finite float, or None.

    bool is not a number here, and integers too large for a float are
    rejected.
    """
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        return None
    try:
        result = float(value)
    except OverflowError:
        return None
    return result if math.isfinite(result) else None


def _round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 20.5 must show as 21.
    return math.floor(value + 0.5)
