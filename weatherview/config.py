"""Runtime configuration for the weather screen.

Values come from the environment (optionally seeded from a ``.env`` file).
The API key is treated as an opaque credential and is never logged.
"""

from __future__ import annotations

import math
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from .background import BackgroundSelector, default_selector, load_backgrounds
from .errors import WeatherConfigError
from .http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

DEFAULT_CITY = "Shanghai"


@dataclass(frozen=True)
class WeatherConfig:
    """Weather screen settings.

    Attributes:
        api_key: OpenWeatherMap application key.
        base_url: Current-weather endpoint.
        default_city: City fetched on first mount.
        units: Unit system requested from the API.
        lang: Language for condition descriptions.
        timeout: Total request timeout (seconds).
        backgrounds_path: Optional YAML background mapping.
    """

    api_key: str
    base_url: str = DEFAULT_BASE_URL
    default_city: str = DEFAULT_CITY
    units: str = "metric"
    lang: str = "tr"
    timeout: float = DEFAULT_TIMEOUT
    backgrounds_path: Path | None = None

    def __repr__(self) -> str:
        return (
            f"WeatherConfig(api_key='***', base_url={self.base_url!r}, "
            f"default_city={self.default_city!r}, units={self.units!r}, "
            f"lang={self.lang!r}, timeout={self.timeout!r}, "
            f"backgrounds_path={self.backgrounds_path!r})"
        )

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> WeatherConfig:
        """Build config from environment variables.

        Args:
            env: Explicit variables; when omitted, ``.env`` is loaded and
                ``os.environ`` is used.

        Raises:
            WeatherConfigError: If the API key is missing or the timeout is
                not a positive number.
        """
        if env is None:
            load_dotenv()
            env = os.environ

        api_key = env.get("OPENWEATHER_API_KEY", "").strip()
        if not api_key:
            raise WeatherConfigError("OPENWEATHER_API_KEY is not set")

        raw_timeout = env.get("WEATHER_TIMEOUT")
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as err:
                raise WeatherConfigError(
                    f"WEATHER_TIMEOUT must be a number, got {raw_timeout!r}"
                ) from err
            if not math.isfinite(timeout) or timeout <= 0:
                raise WeatherConfigError("WEATHER_TIMEOUT must be positive")

        backgrounds = env.get("WEATHER_BACKGROUNDS")
        return cls(
            api_key=api_key,
            base_url=env.get("WEATHER_BASE_URL") or DEFAULT_BASE_URL,
            default_city=env.get("WEATHER_DEFAULT_CITY") or DEFAULT_CITY,
            units=env.get("WEATHER_UNITS") or "metric",
            lang=env.get("WEATHER_LANG") or "tr",
            timeout=timeout,
            backgrounds_path=Path(backgrounds) if backgrounds else None,
        )

    def load_selector(self) -> BackgroundSelector:
        """Background selector for this config."""
        if self.backgrounds_path is None:
            return default_selector()
        return load_backgrounds(self.backgrounds_path)
