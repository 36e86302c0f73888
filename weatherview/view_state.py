"""View state for the weather screen."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .domains.weather import WeatherSnapshot


class ViewStateKind(Enum):
    """What the screen is currently showing."""

    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


@dataclass(frozen=True)
class ViewState:
    """Tagged union of the screen states.

    Build instances through the classmethods; ``snapshot`` is only set for
    READY and ``message`` only for ERROR.
    """

    kind: ViewStateKind
    snapshot: WeatherSnapshot | None = None
    message: str | None = None

    @classmethod
    def idle(cls) -> ViewState:
        return cls(ViewStateKind.IDLE)

    @classmethod
    def loading(cls) -> ViewState:
        return cls(ViewStateKind.LOADING)

    @classmethod
    def ready(cls, snapshot: WeatherSnapshot) -> ViewState:
        return cls(ViewStateKind.READY, snapshot=snapshot)

    @classmethod
    def error(cls, message: str) -> ViewState:
        return cls(ViewStateKind.ERROR, message=message)

    @property
    def is_busy(self) -> bool:
        """True while nothing has been fetched yet (IDLE renders like LOADING)."""
        return self.kind in (ViewStateKind.IDLE, ViewStateKind.LOADING)

    def __str__(self) -> str:
        return self.kind.value
