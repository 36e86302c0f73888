"""Render model for the weather screen.

Turns a ViewState plus the current search text into the three regions the
host UI draws: a status area, the main content block and the search box.
"""

from __future__ import annotations

from dataclasses import dataclass

from .background import BackgroundSelector, select_background
from .view_state import ViewState, ViewStateKind

LOADING_TEXT = "Hava durumu yükleniyor..."
SEARCH_PLACEHOLDER = "Search any city"


@dataclass(frozen=True)
class ScreenContent:
    """Main content block, always taken from a single snapshot."""

    city: str
    description: str
    temperature_label: str


@dataclass(frozen=True)
class SearchBox:
    """Search input with submit-on-enter."""

    text: str
    placeholder: str = SEARCH_PLACEHOLDER


@dataclass(frozen=True)
class ScreenModel:
    """Everything the host UI needs for one frame.

    Attributes:
        status: Loading or error text; None when content is shown.
        content: City, description and temperature; READY only.
        search: Search box; hidden while loading.
        background: Background asset; READY only (other states use a
            plain backdrop).
    """

    status: str | None = None
    content: ScreenContent | None = None
    search: SearchBox | None = None
    background: str | None = None


def render_screen(
    state: ViewState,
    query: str,
    selector: BackgroundSelector | None = None,
) -> ScreenModel:
    """Build the screen model for a view state."""
    if state.is_busy:
        return ScreenModel(status=LOADING_TEXT)

    search = SearchBox(text=query)
    if state.kind is ViewStateKind.ERROR:
        return ScreenModel(status=state.message, search=search)

    snapshot = state.snapshot
    if snapshot is None:
        raise ValueError("READY state without a snapshot")
    return ScreenModel(
        content=ScreenContent(
            city=snapshot.city,
            description=snapshot.description,
            temperature_label=snapshot.temperature_label,
        ),
        search=search,
        background=select_background(snapshot, selector),
    )
