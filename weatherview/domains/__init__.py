"""Domain data structures for weather lookups."""

from .weather import WeatherSnapshot

__all__ = ["WeatherSnapshot"]
