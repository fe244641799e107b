"""Abstract base class for coordinate storage backends.

Why this exists:
- Persists the user's saved location independently of any platform
- Enables testing with in-memory implementations
- Keeps the session free of storage mechanics

How to extend:
1. Subclass CoordinateStore
2. Implement all abstract methods
3. Register in create_coordinate_store()
4. Add the store type to CoordinateStoreType in the config schema
"""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel

from placefinder.entities import Coordinate


class StorageConfig(BaseModel):
    """Base configuration for storage backends."""

    store_type: str
    connection_string: str | None = None
    extra_params: dict[str, Any] = {}


class CoordinateStore(ABC):
    """Abstract interface for the saved-location store.

    Values are only ever read and written whole; there is no partial update.
    """

    def __init__(self, config: StorageConfig) -> None:
        """Initialize storage with configuration."""
        self.config = config

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the store (open connections, create tables, etc.)."""
        pass

    @abstractmethod
    async def save(self, coordinate: Coordinate) -> None:
        """Persist a coordinate as the saved location.

        Args:
            coordinate: Coordinate to save

        Raises:
            StorageError: If the write fails
        """
        pass

    @abstractmethod
    async def load(self) -> Coordinate | None:
        """Load the most recently saved coordinate.

        Returns:
            Saved coordinate, or None if nothing was ever saved

        Raises:
            StorageError: If the read fails
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close connections and cleanup resources."""
        pass


class StorageError(Exception):
    """Base exception for storage errors."""

    def __init__(self, message: str, storage_type: str, original_error: Exception | None = None):
        self.message = message
        self.storage_type = storage_type
        self.original_error = original_error
        super().__init__(self.message)
