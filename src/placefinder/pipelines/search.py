"""Search pipeline: one place search, projected into a ResultSet.

Why this exists:
- Orchestrates the collaborator call for a resolved anchor
- Turns the raw provider response into ranked, display-ready places
- Keeps no result state of its own; callers decide what to do with the output

How to use:
    from placefinder.pipelines.search import SearchPipeline

    pipeline = SearchPipeline(provider)
    result_set = await pipeline.execute(anchor, "cafe")

Processing order matters: the first max_results places are kept in the order
the provider returned them, and only then sorted by distance. A closer place
beyond that cutoff never appears.
"""

from typing import Optional

from placefinder.core.formatting import format_distance, strip_markup
from placefinder.entities import MAX_RESULTS, DisplayPlace, PlaceResult, ResultSet, SearchAnchor
from placefinder.observability.logging import get_logger
from placefinder.providers.base import PlaceSearchProvider

logger = get_logger(__name__)


class SearchPipeline:
    """Pipeline executing a single place search."""

    def __init__(self, provider: PlaceSearchProvider, max_results: int = MAX_RESULTS):
        """Initialize the search pipeline.

        Args:
            provider: Place-search collaborator
            max_results: Places kept from the response, at most MAX_RESULTS
        """
        if not 0 < max_results <= MAX_RESULTS:
            raise ValueError(f"max_results must be between 1 and {MAX_RESULTS}, got {max_results}")

        self.provider = provider
        self.max_results = max_results

    async def execute(self, anchor: SearchAnchor, query: str) -> ResultSet:
        """Run one search and build its ResultSet.

        Args:
            anchor: Resolved search anchor
            query: Free-text query, passed to the provider verbatim

        Returns:
            Places nearest first, at most max_results of them

        Raises:
            AnchorUnavailableError: If the anchor carries no coordinate
            SearchFailedError: If the provider call fails
        """
        if not anchor.is_available or anchor.coordinate is None:
            raise AnchorUnavailableError("No saved or live location to search from")

        logger.info("search_started", query=query, **anchor.describe())

        try:
            raw_places = await self.provider.search(anchor.coordinate, query)
        except Exception as e:
            logger.error("search_failed", query=query, error=str(e))
            raise SearchFailedError(f"Place search failed: {e}", original_error=e) from e

        retained = raw_places[: self.max_results]
        places = sorted(
            (self._to_display_place(place) for place in retained),
            key=lambda place: place.distance_meters,
        )

        logger.info(
            "search_completed",
            query=query,
            received_count=len(raw_places),
            result_count=len(places),
        )

        return ResultSet(places=places, query=query, anchor=anchor)

    @staticmethod
    def _to_display_place(place: PlaceResult) -> DisplayPlace:
        return DisplayPlace(
            title=strip_markup(place.title),
            distance_meters=place.distance_meters,
            distance_label=format_distance(place.distance_meters),
            coordinate=place.coordinate,
        )


class AnchorUnavailableError(Exception):
    """Raised when a search is requested without any location to search from."""

    pass


class SearchFailedError(Exception):
    """Exception raised when the place-search collaborator fails."""

    def __init__(self, message: str, original_error: Optional[Exception] = None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)
