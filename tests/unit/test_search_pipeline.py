"""Tests for SearchPipeline."""

from unittest.mock import AsyncMock

import pytest

from placefinder.entities import AnchorSource, Coordinate, SearchAnchor
from placefinder.pipelines.search import AnchorUnavailableError, SearchFailedError, SearchPipeline
from placefinder.providers.base import ProviderError


@pytest.fixture
def provider():
    """Mock place-search provider."""
    return AsyncMock()


@pytest.fixture
def live_anchor(live_position):
    return SearchAnchor(coordinate=live_position, source=AnchorSource.LIVE)


class TestSearchPipeline:
    """Test SearchPipeline.execute."""

    async def test_scenario_sorted_and_labelled(self, provider, live_anchor, make_place):
        """Test the cafe scenario: three raw places come back nearest first."""
        provider.search.return_value = [make_place(50), make_place(1200), make_place(10)]

        result_set = await SearchPipeline(provider).execute(live_anchor, "cafe")

        assert [(p.distance_meters, p.distance_label) for p in result_set.places] == [
            (10, "10 meters"),
            (50, "50 meters"),
            (1200, "1 kilometer"),
        ]
        assert result_set.query == "cafe"
        assert result_set.anchor == live_anchor
        provider.search.assert_awaited_once_with(live_anchor.coordinate, "cafe")

    async def test_truncates_before_sorting(self, provider, live_anchor, make_place):
        """Test that places beyond the tenth are dropped even if closer."""
        far = [make_place(1000 + i * 10) for i in range(10)]
        near = [make_place(i + 1) for i in range(5)]
        provider.search.return_value = far + near

        result_set = await SearchPipeline(provider).execute(live_anchor, "cafe")

        distances = [p.distance_meters for p in result_set.places]
        assert len(distances) == 10
        assert all(d >= 1000 for d in distances)
        assert distances == sorted(distances)

    async def test_stable_sort_keeps_provider_order_for_ties(self, provider, live_anchor, make_place):
        provider.search.return_value = [
            make_place(100, title="First"),
            make_place(5),
            make_place(100, title="Second"),
        ]

        result_set = await SearchPipeline(provider).execute(live_anchor, "")

        assert [p.title for p in result_set.places] == ["Place 5", "First", "Second"]

    async def test_titles_stripped(self, provider, live_anchor, make_place):
        provider.search.return_value = [make_place(20, title="<b>Green</b> Bean &amp; Co")]

        result_set = await SearchPipeline(provider).execute(live_anchor, "coffee")

        place = result_set.places[0]
        assert place.title == "Green Bean  Co"
        assert place.coordinate == make_place(20).coordinate

    async def test_empty_query_passed_through(self, provider, live_anchor):
        provider.search.return_value = []

        result_set = await SearchPipeline(provider).execute(live_anchor, "")

        provider.search.assert_awaited_once_with(live_anchor.coordinate, "")
        assert result_set.is_empty

    async def test_custom_max_results(self, provider, live_anchor, make_place):
        provider.search.return_value = [make_place(d) for d in (30, 20, 10)]

        result_set = await SearchPipeline(provider, max_results=2).execute(live_anchor, "x")

        assert [p.distance_meters for p in result_set.places] == [20, 30]

    def test_max_results_above_limit_rejected(self, provider):
        with pytest.raises(ValueError):
            SearchPipeline(provider, max_results=11)

    async def test_unavailable_anchor_skips_provider(self, provider):
        with pytest.raises(AnchorUnavailableError):
            await SearchPipeline(provider).execute(SearchAnchor.unavailable(), "cafe")

        provider.search.assert_not_awaited()

    async def test_provider_failure_wrapped(self, provider, live_anchor):
        cause = ProviderError("boom", provider="mock")
        provider.search.side_effect = cause

        with pytest.raises(SearchFailedError) as exc_info:
            await SearchPipeline(provider).execute(live_anchor, "cafe")

        assert exc_info.value.original_error is cause
        assert provider.search.await_count == 1

    async def test_persisted_anchor_used(self, provider, persisted_position):
        provider.search.return_value = []
        anchor = SearchAnchor(coordinate=persisted_position, source=AnchorSource.PERSISTED)

        await SearchPipeline(provider).execute(anchor, "bank")

        provider.search.assert_awaited_once_with(
            Coordinate(latitude=14.586716, longitude=121.062449), "bank"
        )
