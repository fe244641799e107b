"""Search anchor resolution.

Decides which coordinate a search starts from. A persisted position always
wins over a live device fix; with neither available the anchor is NONE and
the search pipeline refuses to run.
"""

from typing import Optional

from placefinder.entities import AnchorSource, Coordinate, SearchAnchor


class LocationResolver:
    """Pick the effective search anchor from the known positions."""

    def resolve(
        self,
        live_position: Optional[Coordinate] = None,
        persisted_position: Optional[Coordinate] = None,
    ) -> SearchAnchor:
        """Resolve the anchor for the next search.

        Args:
            live_position: Most recent device fix, if any
            persisted_position: Position loaded from the coordinate store, if any

        Returns:
            SearchAnchor tagged PERSISTED, LIVE or NONE
        """
        if persisted_position is not None:
            return SearchAnchor(coordinate=persisted_position, source=AnchorSource.PERSISTED)

        if live_position is not None:
            return SearchAnchor(coordinate=live_position, source=AnchorSource.LIVE)

        return SearchAnchor.unavailable()
