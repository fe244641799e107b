"""SQLite storage implementation for the saved location.

Every save appends a row; load returns the most recent one. Coordinates are
stored as decimal strings. Uses aiosqlite for async operations.
"""

import os
from datetime import datetime, timezone
from typing import Optional

import aiosqlite

from placefinder.entities import Coordinate
from placefinder.storage.base import CoordinateStore, StorageConfig, StorageError


class SQLiteCoordinateStore(CoordinateStore):
    """SQLite coordinate store implementation."""

    def __init__(self, config: StorageConfig) -> None:
        """Initialize SQLite coordinate store."""
        super().__init__(config)

        conn_str = config.connection_string
        if conn_str is None:
            # Default to ~/.placefinder/locations.db
            db_dir = os.path.expanduser("~/.placefinder")
            os.makedirs(db_dir, exist_ok=True)
            self.db_path = os.path.join(db_dir, "locations.db")
        elif conn_str.startswith("sqlite:///"):
            self.db_path = os.path.expanduser(conn_str.replace("sqlite:///", ""))
        else:
            self.db_path = os.path.expanduser(conn_str)

        self.connection: Optional[aiosqlite.Connection] = None

    async def initialize(self) -> None:
        """Open the database and create the locations table."""
        try:
            self.connection = await aiosqlite.connect(self.db_path)
            self.connection.row_factory = aiosqlite.Row

            await self.connection.execute("""
                CREATE TABLE IF NOT EXISTS user_locations (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    latitude TEXT NOT NULL,
                    longitude TEXT NOT NULL,
                    saved_at TEXT NOT NULL
                )
            """)
            await self.connection.commit()

        except Exception as e:
            raise StorageError(
                f"Failed to initialize SQLite coordinate store: {e}",
                storage_type="sqlite",
                original_error=e,
            ) from e

    async def save(self, coordinate: Coordinate) -> None:
        """Append a coordinate row."""
        if not self.connection:
            raise StorageError("Database not initialized", storage_type="sqlite")

        try:
            await self.connection.execute(
                "INSERT INTO user_locations (latitude, longitude, saved_at) VALUES (?, ?, ?)",
                (
                    repr(coordinate.latitude),
                    repr(coordinate.longitude),
                    datetime.now(timezone.utc).isoformat(),
                ),
            )
            await self.connection.commit()
        except Exception as e:
            raise StorageError(
                f"Failed to save coordinate: {e}",
                storage_type="sqlite",
                original_error=e,
            ) from e

    async def load(self) -> Optional[Coordinate]:
        """Return the most recently saved coordinate."""
        if not self.connection:
            raise StorageError("Database not initialized", storage_type="sqlite")

        try:
            cursor = await self.connection.execute(
                "SELECT latitude, longitude FROM user_locations ORDER BY id DESC LIMIT 1"
            )
            row = await cursor.fetchone()

            if not row:
                return None

            return Coordinate(latitude=float(row["latitude"]), longitude=float(row["longitude"]))
        except Exception as e:
            raise StorageError(
                f"Failed to load coordinate: {e}",
                storage_type="sqlite",
                original_error=e,
            ) from e

    async def close(self) -> None:
        """Close connections and cleanup resources."""
        if self.connection:
            await self.connection.close()
            self.connection = None
