"""Storage layer: saved-location stores."""

from placefinder.storage.base import CoordinateStore, StorageConfig, StorageError


def create_coordinate_store(config: StorageConfig) -> CoordinateStore:
    """Factory function to create coordinate stores based on configuration.

    Args:
        config: Storage configuration with store_type

    Returns:
        Coordinate store; call initialize() before use

    Raises:
        ValueError: If store_type is unknown

    Example:
        config = StorageConfig(store_type="sqlite", connection_string="sqlite:///locations.db")
        store = create_coordinate_store(config)
        await store.initialize()
    """
    store_type = config.store_type.lower()

    if store_type == "memory":
        from placefinder.storage.memory import InMemoryCoordinateStore

        return InMemoryCoordinateStore(config)

    elif store_type == "sqlite":
        from placefinder.storage.sqlite import SQLiteCoordinateStore

        return SQLiteCoordinateStore(config)

    else:
        raise ValueError(
            f"Unknown coordinate store type: '{store_type}'. "
            f"Supported types: memory, sqlite"
        )


__all__ = [
    "CoordinateStore",
    "StorageConfig",
    "StorageError",
    "create_coordinate_store",
]
