"""In-memory coordinate store for testing and development.

Keeps the saved location for the lifetime of the process only.
"""

from typing import Optional

from placefinder.entities import Coordinate
from placefinder.storage.base import CoordinateStore, StorageConfig


class InMemoryCoordinateStore(CoordinateStore):
    """In-memory coordinate store implementation."""

    def __init__(self, config: StorageConfig) -> None:
        """Initialize in-memory coordinate store."""
        super().__init__(config)
        self.saved: list[Coordinate] = []

    async def initialize(self) -> None:
        """Initialize the store."""
        pass

    async def save(self, coordinate: Coordinate) -> None:
        """Append a coordinate; the latest one wins on load."""
        self.saved.append(coordinate)

    async def load(self) -> Optional[Coordinate]:
        """Return the most recently saved coordinate."""
        return self.saved[-1] if self.saved else None

    async def close(self) -> None:
        """Nothing to release."""
        pass
