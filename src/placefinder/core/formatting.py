"""Display formatting for search results.

How to use:
    from placefinder.core.formatting import format_distance, strip_markup

    format_distance(1500)           # "1 kilometer"
    strip_markup("<b>Cafe</b> &amp; Bar")  # "Cafe  Bar"
"""

import re

TAG_PATTERN = re.compile(r"<[^>]+>")
ENTITY_PATTERN = re.compile(r"&[^;]+;")


def format_distance(meters: int) -> str:
    """Convert a distance in meters into a display string.

    Kilometer values use integer division, so remainders are dropped
    (1500 -> "1 kilometer"), and the whole 1000-1999 band uses the
    singular unit.

    Args:
        meters: Non-negative distance in meters

    Returns:
        Human readable distance label
    """
    if meters == 1:
        return "1 meter"

    if 1000 <= meters < 2000:
        return f"{meters // 1000} kilometer"

    if meters >= 2000:
        return f"{meters // 1000} kilometers"

    return f"{meters} meters"


def strip_markup(text: str) -> str:
    """Remove HTML-like tags, then entity references, from text."""
    without_tags = TAG_PATTERN.sub("", text)
    return ENTITY_PATTERN.sub("", without_tags)
