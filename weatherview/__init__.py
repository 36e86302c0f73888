"""Single-screen weather lookup: fetch, view state and render model."""

__version__ = "0.1.0"

from .background import (
    DEFAULT_KEY,
    BackgroundSelector,
    default_selector,
    load_backgrounds,
    select_background,
)
from .config import WeatherConfig
from .controller import FETCH_FAILED_MESSAGE, WeatherViewController
from .domains.weather import WeatherSnapshot
from .errors import (
    BackgroundConfigError,
    WeatherClientError,
    WeatherConfigError,
    WeatherConnectionError,
    WeatherParseError,
    WeatherResponseError,
    WeatherTimeout,
)
from .http import WeatherHttpClient
from .screen import ScreenContent, ScreenModel, SearchBox, render_screen
from .view_state import ViewState, ViewStateKind

__all__ = [
    "DEFAULT_KEY",
    "FETCH_FAILED_MESSAGE",
    "BackgroundConfigError",
    "BackgroundSelector",
    "ScreenContent",
    "ScreenModel",
    "SearchBox",
    "ViewState",
    "ViewStateKind",
    "WeatherClientError",
    "WeatherConfig",
    "WeatherConfigError",
    "WeatherConnectionError",
    "WeatherHttpClient",
    "WeatherParseError",
    "WeatherResponseError",
    "WeatherSnapshot",
    "WeatherTimeout",
    "WeatherViewController",
    "__version__",
    "default_selector",
    "load_backgrounds",
    "render_screen",
    "select_background",
]
