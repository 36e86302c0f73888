"""View controller for the single weather screen.

The controller owns the screen's ViewState, the search query and the
current snapshot. It issues one fetch per user action and publishes every
state transition to the rendering layer through a single callback.

Overlapping fetches are allowed (a user may re-submit before the previous
request resolves). Each fetch is tagged with a monotonically increasing
sequence number; only the most recently issued fetch may commit state, and
results from older fetches are dropped when they arrive.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from .background import BackgroundSelector, default_selector
from .config import DEFAULT_CITY
from .domains.weather import WeatherSnapshot
from .errors import WeatherClientError
from .http import WeatherHttpClient
from .view_state import ViewState

if TYPE_CHECKING:
    import aiohttp

    from .config import WeatherConfig

_LOGGER = logging.getLogger(__name__)

FETCH_FAILED_MESSAGE = "Aranan şehir bulunamadı veya bir bağlantı sorunu oluştu."


class WeatherViewController:
    """State owner for the weather screen.

    Usage:
        controller = WeatherViewController(client)
        controller.on_state_changed(render)
        await controller.mount()
        controller.set_query("Ankara")
        await controller.submit()
    """

    def __init__(
        self,
        client: WeatherHttpClient,
        *,
        default_city: str = DEFAULT_CITY,
        selector: BackgroundSelector | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            client: HTTP client used for every fetch
            default_city: City fetched on mount; also the initial query
            selector: Background selector (bundled table if omitted)
        """
        self._client = client
        self._default_city = default_city
        self._selector = selector or default_selector()

        self._state = ViewState.idle()
        self._snapshot: WeatherSnapshot | None = None
        self._query = default_city
        self._mounted = False

        # Sequence of the most recently issued fetch
        self._latest_seq = 0

        self._state_callback: Callable[[ViewState], None] | None = None

    @classmethod
    def from_config(
        cls, session: aiohttp.ClientSession, config: WeatherConfig
    ) -> WeatherViewController:
        """Build a controller and its HTTP client from config."""
        client = WeatherHttpClient(
            session,
            config.api_key,
            base_url=config.base_url,
            units=config.units,
            lang=config.lang,
            timeout=config.timeout,
        )
        return cls(
            client,
            default_city=config.default_city,
            selector=config.load_selector(),
        )

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    @property
    def state(self) -> ViewState:
        return self._state

    @property
    def snapshot(self) -> WeatherSnapshot | None:
        """Snapshot from the last successful fetch; None after a failure."""
        return self._snapshot

    @property
    def background(self) -> str:
        return self._selector.select(self._snapshot)

    @property
    def selector(self) -> BackgroundSelector:
        return self._selector

    @property
    def query(self) -> str:
        return self._query

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    def on_state_changed(self, callback: Callable[[ViewState], None]) -> None:
        """Register callback for view state changes.

        Args:
            callback: Function(state) called after every transition
        """
        self._state_callback = callback

    def set_query(self, text: str) -> None:
        """Update the search text (input change handler)."""
        self._query = text

    async def mount(self) -> None:
        """Initial load: fetch the default city once."""
        if self._mounted:
            return
        self._mounted = True
        await self.fetch_weather(self._default_city)

    async def submit(self) -> None:
        """Fetch the current query unless it is blank."""
        if not self._query.strip():
            _LOGGER.debug("Ignoring blank search")
            return
        await self.fetch_weather(self._query)

    async def fetch_weather(self, city: str) -> None:
        """Fetch weather for a city and commit the outcome.

        Never raises for fetch failures; they become the ERROR state.
        """
        self._latest_seq += 1
        seq = self._latest_seq
        self._set_state(ViewState.loading())

        try:
            payload = await self._client.fetch_current(city)
            snapshot = WeatherSnapshot.from_openweather(payload)
        except WeatherClientError as err:
            if self._is_stale(seq):
                return
            _LOGGER.warning(
                "Weather fetch #%d for %r failed (%s): %s",
                seq,
                city,
                type(err).__name__,
                err,
            )
            self._snapshot = None
            self._set_state(ViewState.error(FETCH_FAILED_MESSAGE))
            return

        if self._is_stale(seq):
            return
        _LOGGER.debug("Weather fetch #%d for %r succeeded", seq, city)
        self._snapshot = snapshot
        self._set_state(ViewState.ready(snapshot))

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------

    def _is_stale(self, seq: int) -> bool:
        if seq == self._latest_seq:
            return False
        _LOGGER.debug(
            "Discarding result of fetch #%d (latest is #%d)", seq, self._latest_seq
        )
        return True

    def _set_state(self, state: ViewState) -> None:
        """Update view state and notify callback."""
        if self._state == state:
            return
        _LOGGER.debug("State: %s → %s", self._state, state)
        self._state = state
        if self._state_callback:
            try:
                self._state_callback(state)
            except Exception as err:
                _LOGGER.error("State callback error: %s", err)
