"""Background asset selection keyed by weather condition label.

The mapping is data: a YAML file of ``label: asset`` pairs loaded at
startup. It must contain a ``Default`` entry, which is used whenever there
is no snapshot or the condition label has no entry of its own. Labels are
matched exactly as the API spells them ("Rain", "Clear", "Clouds").
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .domains.weather import WeatherSnapshot
from .errors import BackgroundConfigError

_LOGGER = logging.getLogger(__name__)

DEFAULT_KEY = "Default"

DEFAULT_BACKGROUNDS: dict[str, str] = {
    "Rain": "assets/images/rainn.jpg",
    "Clear": "assets/images/clean.jpg",
    "Clouds": "assets/images/bulutlu.jpg",
    DEFAULT_KEY: "assets/images/default.jpg",
}


class BackgroundSelector:
    """Stateless lookup from condition label to asset identifier."""

    def __init__(self, mapping: Mapping[str, str]) -> None:
        if DEFAULT_KEY not in mapping:
            raise BackgroundConfigError(
                f"Background mapping must define a '{DEFAULT_KEY}' entry"
            )
        self._mapping = dict(mapping)

    @property
    def default(self) -> str:
        return self._mapping[DEFAULT_KEY]

    @property
    def labels(self) -> tuple[str, ...]:
        return tuple(self._mapping)

    def select(self, snapshot: WeatherSnapshot | None) -> str:
        """Return the asset for a snapshot's condition, or the default."""
        if snapshot is None or snapshot.condition is None:
            return self.default
        return self._mapping.get(snapshot.condition, self.default)


_DEFAULT_SELECTOR = BackgroundSelector(DEFAULT_BACKGROUNDS)


def default_selector() -> BackgroundSelector:
    """Selector over the bundled asset table."""
    return _DEFAULT_SELECTOR


def select_background(
    snapshot: WeatherSnapshot | None,
    selector: BackgroundSelector | None = None,
) -> str:
    """Pick the background asset for a snapshot."""
    return (selector or _DEFAULT_SELECTOR).select(snapshot)


def load_backgrounds(path: Path) -> BackgroundSelector:
    """Load a background mapping from a YAML file.

    Args:
        path: YAML file of ``label: asset`` pairs.

    Returns:
        Selector over the loaded mapping.

    Raises:
        BackgroundConfigError: If the file is missing, is not a mapping of
            strings, or lacks the ``Default`` entry.
    """
    if not path.exists():
        raise BackgroundConfigError(f"File not found: {path}")
    try:
        with path.open(encoding="utf-8") as f:
            data: Any = yaml.safe_load(f) or {}
    except yaml.YAMLError as err:
        raise BackgroundConfigError(f"Invalid YAML in {path}") from err

    if not isinstance(data, dict):
        raise BackgroundConfigError(f"Background mapping must be a mapping: {path}")
    for label, asset in data.items():
        if not isinstance(label, str) or not isinstance(asset, str):
            raise BackgroundConfigError(
                f"Background entries must be strings, got {label!r}: {asset!r}"
            )

    _LOGGER.debug("Loaded %d background entries from %s", len(data), path)
    return BackgroundSelector(data)
