"""Tests for LocationResolver."""

from placefinder.core.resolver import LocationResolver
from placefinder.entities import AnchorSource, Coordinate


class TestLocationResolver:
    """Test anchor resolution priority."""

    def test_persisted_wins_over_live(self, live_position, persisted_position):
        anchor = LocationResolver().resolve(
            live_position=live_position, persisted_position=persisted_position
        )
        assert anchor.source is AnchorSource.PERSISTED
        assert anchor.coordinate == persisted_position

    def test_persisted_only(self, persisted_position):
        anchor = LocationResolver().resolve(persisted_position=persisted_position)
        assert anchor.source is AnchorSource.PERSISTED

    def test_live_only(self, live_position):
        anchor = LocationResolver().resolve(live_position=live_position)
        assert anchor.source is AnchorSource.LIVE
        assert anchor.coordinate == live_position

    def test_none_when_both_absent(self):
        anchor = LocationResolver().resolve()
        assert anchor.source is AnchorSource.NONE
        assert anchor.coordinate is None

    def test_persisted_wins_even_when_equal_latitude(self):
        # Same latitude, different longitude still resolves to the persisted position
        live = Coordinate(latitude=10.0, longitude=20.0)
        persisted = Coordinate(latitude=10.0, longitude=30.0)
        anchor = LocationResolver().resolve(live_position=live, persisted_position=persisted)
        assert anchor.coordinate == persisted
