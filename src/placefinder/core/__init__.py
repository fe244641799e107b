"""Core logic: anchor resolution and result formatting."""

from placefinder.core.formatting import format_distance, strip_markup
from placefinder.core.resolver import LocationResolver

__all__ = ["LocationResolver", "format_distance", "strip_markup"]
