"""Static place-search provider.

Serves a fixed list of places from configuration, ignoring the location and
query. Useful for offline development, demos and tests.

Configuration:
    [place_search]
    provider = "static"

    [[place_search.extra_params.places]]
    title = "<b>Corner</b> Cafe"
    distance_meters = 120
    coordinate = { latitude = 14.5870, longitude = 121.0630 }
"""

from pydantic import ValidationError

from placefinder.entities import Coordinate, PlaceResult
from placefinder.observability.logging import get_logger
from placefinder.providers.base import PlaceSearchProvider, ProviderConfig, ProviderError

logger = get_logger(__name__)


class StaticPlaceSearchProvider(PlaceSearchProvider):
    """Provider returning the same configured places for every search."""

    def __init__(self, config: ProviderConfig) -> None:
        super().__init__(config)
        try:
            self.places = [
                PlaceResult.model_validate(place)
                for place in config.extra_params.get("places", [])
            ]
        except ValidationError as e:
            raise ProviderError(
                message=f"Invalid static place definition: {str(e)}",
                provider="static",
                original_error=e,
            ) from e

    async def search(self, location: Coordinate, query: str) -> list[PlaceResult]:
        logger.debug("static_search", query=query, place_count=len(self.places))
        return list(self.places)
