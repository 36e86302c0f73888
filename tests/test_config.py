"""Tests for WeatherConfig."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from weatherview.background import DEFAULT_BACKGROUNDS, DEFAULT_KEY
from weatherview.config import DEFAULT_CITY, WeatherConfig
from weatherview.errors import WeatherConfigError
from weatherview.http import DEFAULT_BASE_URL


class TestFromEnv:
    """Tests for environment-driven configuration."""

    def test_defaults(self) -> None:
        """Only the API key is required."""
        config = WeatherConfig.from_env({"OPENWEATHER_API_KEY": "abc"})

        assert config.api_key == "abc"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.default_city == DEFAULT_CITY == "Shanghai"
        assert config.units == "metric"
        assert config.lang == "tr"
        assert config.timeout == 10.0
        assert config.backgrounds_path is None

    def test_overrides(self) -> None:
        """Every setting can be overridden."""
        config = WeatherConfig.from_env(
            {
                "OPENWEATHER_API_KEY": "abc",
                "WEATHER_BASE_URL": "http://localhost/weather",
                "WEATHER_DEFAULT_CITY": "Ankara",
                "WEATHER_UNITS": "imperial",
                "WEATHER_LANG": "en",
                "WEATHER_TIMEOUT": "2.5",
                "WEATHER_BACKGROUNDS": "/etc/weather/backgrounds.yaml",
            }
        )

        assert config.base_url == "http://localhost/weather"
        assert config.default_city == "Ankara"
        assert config.units == "imperial"
        assert config.lang == "en"
        assert config.timeout == 2.5
        assert config.backgrounds_path == Path("/etc/weather/backgrounds.yaml")

    @pytest.mark.parametrize("env", [{}, {"OPENWEATHER_API_KEY": "   "}])
    def test_missing_api_key(self, env: dict[str, str]) -> None:
        """A missing or blank key raises WeatherConfigError."""
        with pytest.raises(WeatherConfigError, match="OPENWEATHER_API_KEY"):
            WeatherConfig.from_env(env)

    @pytest.mark.parametrize("value", ["soon", "0", "-1", "nan", "inf", "-inf"])
    def test_invalid_timeout(self, value: str) -> None:
        """Timeout must be a positive number."""
        with pytest.raises(WeatherConfigError, match="WEATHER_TIMEOUT"):
            WeatherConfig.from_env(
                {"OPENWEATHER_API_KEY": "abc", "WEATHER_TIMEOUT": value}
            )

    def test_loads_dotenv_when_no_env_given(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without an explicit mapping, .env is loaded and os.environ is read."""
        monkeypatch.setenv("OPENWEATHER_API_KEY", "from-environ")
        load = MagicMock()

        with patch("weatherview.config.load_dotenv", load):
            config = WeatherConfig.from_env()

        load.assert_called_once()
        assert config.api_key == "from-environ"

    def test_repr_hides_api_key(self) -> None:
        """The credential never appears in repr."""
        config = WeatherConfig(api_key="super-secret")
        assert "super-secret" not in repr(config)


class TestLoadSelector:
    """Tests for background selector resolution."""

    def test_bundled_selector_without_path(self) -> None:
        """No path means the bundled table."""
        selector = WeatherConfig(api_key="abc").load_selector()
        assert selector.default == DEFAULT_BACKGROUNDS[DEFAULT_KEY]

    def test_selector_from_path(self, tmp_path: Path) -> None:
        """A configured path is loaded from YAML."""
        path = tmp_path / "bg.yaml"
        path.write_text("Default: custom.jpg\n", encoding="utf-8")

        selector = WeatherConfig(api_key="abc", backgrounds_path=path).load_selector()

        assert selector.default == "custom.jpg"
