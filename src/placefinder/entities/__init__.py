"""Entities - Domain models for nearby place search.

This module contains pure domain entities without business logic:
- Coordinate: A latitude/longitude pair
- SearchAnchor: The coordinate a search starts from, tagged with its source
- PlaceResult: A raw place returned by a place-search provider
- DisplayPlace: A place projected for presentation
- ResultSet: The ranked, capped output of one search
"""

from placefinder.entities.anchor import AnchorSource, SearchAnchor
from placefinder.entities.coordinate import Coordinate
from placefinder.entities.place import DisplayPlace, PlaceResult
from placefinder.entities.result_set import MAX_RESULTS, ResultSet

__all__ = [
    "AnchorSource",
    "Coordinate",
    "DisplayPlace",
    "MAX_RESULTS",
    "PlaceResult",
    "ResultSet",
    "SearchAnchor",
]
