"""Location session: the caller-side owner of location state and results.

Holds the live device fix and the persisted position, talks to the injected
coordinate store, and applies search results. Each search is tagged with a
monotonically increasing invocation id; a completion whose id is no longer the
latest is discarded instead of overwriting newer results.
"""

import itertools
from typing import Optional

from placefinder.core.resolver import LocationResolver
from placefinder.entities import Coordinate, ResultSet, SearchAnchor
from placefinder.observability.logging import get_logger
from placefinder.pipelines.search import AnchorUnavailableError, SearchPipeline
from placefinder.storage.base import CoordinateStore

logger = get_logger(__name__)


class LocationSession:
    """Single-user session tying together resolver, pipeline and store."""

    def __init__(
        self,
        store: CoordinateStore,
        pipeline: SearchPipeline,
        resolver: Optional[LocationResolver] = None,
        default_location: Optional[Coordinate] = None,
    ):
        """Initialize the session.

        Args:
            store: Coordinate store holding the saved location
            pipeline: Search pipeline used for every search
            resolver: Anchor resolver (a plain LocationResolver by default)
            default_location: Coordinate seeded into an empty store on initialize()
        """
        self.store = store
        self.pipeline = pipeline
        self.resolver = resolver or LocationResolver()
        self.default_location = default_location

        self.live_position: Optional[Coordinate] = None
        self.persisted_position: Optional[Coordinate] = None
        self.results: ResultSet = ResultSet.empty()

        self._invocations = itertools.count(1)
        self._latest_invocation = 0

    async def initialize(self) -> None:
        """Load the saved location, seeding the default into an empty store."""
        self.persisted_position = await self.store.load()

        if self.persisted_position is None and self.default_location is not None:
            await self.store.save(self.default_location)
            self.persisted_position = self.default_location
            logger.info("default_location_seeded", location=str(self.default_location))

    def update_live_position(self, coordinate: Coordinate) -> None:
        """Record the most recent device fix."""
        self.live_position = coordinate
        logger.debug("live_position_updated", location=str(coordinate))

    async def load_saved_location(self) -> Optional[Coordinate]:
        """Re-read the saved location from the store.

        Returns:
            The saved coordinate, or None if the store is empty
        """
        self.persisted_position = None
        self.persisted_position = await self.store.load()
        logger.info(
            "saved_location_loaded",
            location=str(self.persisted_position) if self.persisted_position else None,
        )
        return self.persisted_position

    async def save_current_location(self) -> Coordinate:
        """Save the live fix, or the persisted position when there is no fix.

        The in-memory persisted position is left as is; the saved value becomes
        the search anchor after the next load_saved_location().

        Returns:
            The coordinate written to the store

        Raises:
            AnchorUnavailableError: If neither position is known
        """
        coordinate = self.live_position or self.persisted_position
        if coordinate is None:
            raise AnchorUnavailableError("No live or saved location to save")

        await self.store.save(coordinate)
        logger.info("coordinate_saved", location=str(coordinate))
        return coordinate

    def resolve_anchor(self) -> SearchAnchor:
        """Resolve the anchor the next search would use."""
        return self.resolver.resolve(
            live_position=self.live_position,
            persisted_position=self.persisted_position,
        )

    async def search(self, query: str) -> ResultSet:
        """Search from the current anchor and apply the results.

        Results replace the current ones only if no newer search has been
        started in the meantime. A failed latest search clears the results.

        Args:
            query: Free-text query

        Returns:
            The ResultSet produced by this invocation, applied or not

        Raises:
            AnchorUnavailableError: If no location is known
            SearchFailedError: If the place search fails
        """
        invocation_id = next(self._invocations)
        self._latest_invocation = invocation_id
        anchor = self.resolve_anchor()

        try:
            result_set = await self.pipeline.execute(anchor, query)
        except Exception:
            if invocation_id == self._latest_invocation:
                self.results = ResultSet.empty()
            raise

        if invocation_id != self._latest_invocation:
            logger.warning(
                "stale_results_discarded",
                invocation_id=invocation_id,
                latest_invocation=self._latest_invocation,
                query=query,
            )
            return result_set

        self.results = result_set
        return result_set
