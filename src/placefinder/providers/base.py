"""Abstract base class for place-search providers.

Why this exists:
- Allows swapping between place-search backends (HERE, static fixtures, etc.)
- Enables testing with mock providers
- Keeps the search pipeline independent of any wire format

How to extend:
1. Subclass PlaceSearchProvider
2. Implement search() and close()
3. Register in create_place_search_provider()
4. Add the provider type to PlaceSearchProviderType in the config schema
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel

from placefinder.entities import Coordinate, PlaceResult


class ProviderConfig(BaseModel):
    """Base configuration for all providers."""

    provider_type: str
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    timeout: float = 20.0
    extra_params: dict[str, Any] = {}


class PlaceSearchProvider(ABC):
    """Abstract interface for place-search providers.

    Implementations must:
    - Search around a coordinate for a free-text query
    - Return places in the order the backend ranked them
    - Pass an empty query through unchanged
    - Raise ProviderError on any transport or parsing failure
    """

    def __init__(self, config: ProviderConfig) -> None:
        """Initialize provider with configuration."""
        self.config = config

    @abstractmethod
    async def search(self, location: Coordinate, query: str) -> list[PlaceResult]:
        """Search for places near a location.

        Args:
            location: Coordinate to search around
            query: Free-text query, may be empty

        Returns:
            Places in backend order

        Raises:
            ProviderError: If the search fails
        """
        pass

    async def close(self) -> None:
        """Release any connections held by the provider."""
        pass

    async def __aenter__(self) -> "PlaceSearchProvider":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit with automatic cleanup."""
        await self.close()


class ProviderError(Exception):
    """Base exception for provider errors."""

    def __init__(self, message: str, provider: str, original_error: Optional[Exception] = None):
        self.message = message
        self.provider = provider
        self.original_error = original_error
        super().__init__(self.message)
