"""HERE Discover place-search provider.

Queries the HERE Geocoding & Search "discover" endpoint around a coordinate.
Requires an API key and internet connection.

Wire format:
    GET {base_url}/discover?at={lat},{lon}&q={query}&apiKey={key}
    -> {"items": [{"title": ..., "distance": ..., "position": {"lat": ..., "lng": ...}}]}
"""

import os
import re
from typing import Any

import httpx
from pydantic import ValidationError

from placefinder.entities import Coordinate, PlaceResult
from placefinder.observability.logging import get_logger
from placefinder.providers.base import PlaceSearchProvider, ProviderConfig, ProviderError

logger = get_logger(__name__)

DEFAULT_BASE_URL = "https://discover.search.hereapi.com/v1"

# Shape of a value naming an environment variable rather than holding a key
_ENV_VAR_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")


class HerePlaceSearchProvider(PlaceSearchProvider):
    """Place search backed by the HERE Discover REST API.

    Example:
        config = ProviderConfig(provider_type="here", api_key="HERE_API_KEY")
        async with HerePlaceSearchProvider(config) as provider:
            places = await provider.search(Coordinate(latitude=14.58, longitude=121.06), "cafe")
    """

    def __init__(self, config: ProviderConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Initialize the HERE provider.

        Args:
            config: Provider configuration with api_key (literal key or env var name)
            transport: Optional httpx transport, used to stub the network in tests

        Raises:
            ProviderError: If the API key is missing or names an unset environment variable
        """
        super().__init__(config)

        api_key = config.api_key
        if not api_key:
            raise ProviderError(message="API key is required", provider="here")

        # api_key may name an environment variable instead of holding the key
        env_key = os.getenv(api_key)
        if env_key:
            api_key = env_key
        elif _ENV_VAR_NAME.match(api_key):
            raise ProviderError(
                message=f"Environment variable '{api_key}' not set or empty, "
                "or provide the HERE API key directly",
                provider="here",
            )

        self.api_key = api_key
        self.base_url = (config.base_url or DEFAULT_BASE_URL).rstrip("/")

        self.client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=config.timeout,
            transport=transport,
        )

        logger.info("here_provider_initialized", base_url=self.base_url, timeout=config.timeout)

    async def search(self, location: Coordinate, query: str) -> list[PlaceResult]:
        """Search HERE for places around a location.

        Args:
            location: Coordinate to search around
            query: Free-text query, sent verbatim

        Returns:
            Places in the order HERE returned them

        Raises:
            ProviderError: On HTTP errors, transport errors or malformed payloads
        """
        params = {
            "at": f"{location.latitude},{location.longitude}",
            "q": query,
            "apiKey": self.api_key,
        }
        params.update(self.config.extra_params.get("query_params", {}))

        logger.debug("calling_here_discover", query=query, at=params["at"])

        try:
            response = await self.client.get("/discover", params=params)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                message=f"HERE API error: {e.response.status_code} - {e.response.text}",
                provider="here",
                original_error=e,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(
                message=f"Network error connecting to HERE: {str(e)}",
                provider="here",
                original_error=e,
            ) from e
        except ValueError as e:
            raise ProviderError(
                message=f"HERE returned a non-JSON response: {str(e)}",
                provider="here",
                original_error=e,
            ) from e

        try:
            places = [self._parse_item(item) for item in payload.get("items", [])]
        except (AttributeError, KeyError, TypeError, ValueError, ValidationError) as e:
            raise ProviderError(
                message=f"Malformed HERE result: {str(e)}",
                provider="here",
                original_error=e,
            ) from e

        logger.info("here_search_completed", query=query, result_count=len(places))
        return places

    @staticmethod
    def _parse_item(item: dict[str, Any]) -> PlaceResult:
        position = item["position"]
        return PlaceResult(
            title=item["title"],
            distance_meters=int(item["distance"]),
            coordinate=Coordinate(
                latitude=float(position["lat"]),
                longitude=float(position["lng"]),
            ),
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()
