"""Shared fixtures for placefinder tests."""

from pathlib import Path

import pytest

from placefinder.entities import Coordinate, PlaceResult


@pytest.fixture
def make_place():
    """Factory building a raw place at a given distance."""

    def _make(distance: int, title: str | None = None) -> PlaceResult:
        return PlaceResult(
            title=title if title is not None else f"Place {distance}",
            distance_meters=distance,
            coordinate=Coordinate(latitude=14.5 + distance / 100000, longitude=121.0),
        )

    return _make


@pytest.fixture
def live_position() -> Coordinate:
    return Coordinate(latitude=14.5995, longitude=120.9842)


@pytest.fixture
def persisted_position() -> Coordinate:
    return Coordinate(latitude=14.586716, longitude=121.062449)


@pytest.fixture
def static_config_file(tmp_path: Path) -> Path:
    """Write a config file using the static provider and a temporary SQLite store."""
    config_path = tmp_path / "config.toml"
    config_path.write_text(
        f"""
data_dir = "{tmp_path / 'data'}"
seed_default_location = false

[coordinate_store]
store_type = "sqlite"
connection_string = "sqlite:///{tmp_path / 'locations.db'}"

[place_search]
provider = "static"

[[place_search.extra_params.places]]
title = "<b>Corner</b> Cafe"
distance_meters = 1200
coordinate = {{ latitude = 14.60, longitude = 120.99 }}

[[place_search.extra_params.places]]
title = "Tea &amp; Co"
distance_meters = 50
coordinate = {{ latitude = 14.59, longitude = 120.98 }}
""",
        encoding="utf-8",
    )
    return config_path
