"""SearchAnchor entity - the coordinate a search is performed from."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from placefinder.entities.coordinate import Coordinate


class AnchorSource(str, Enum):
    """Where the anchor coordinate came from."""

    PERSISTED = "persisted"
    LIVE = "live"
    NONE = "none"


class SearchAnchor(BaseModel):
    """The coordinate used to perform a search plus its provenance.

    An anchor with source NONE carries no coordinate; every other source must.
    """

    model_config = ConfigDict(frozen=True)

    coordinate: Coordinate | None = None
    source: AnchorSource = AnchorSource.NONE

    @model_validator(mode="after")
    def coordinate_matches_source(self) -> "SearchAnchor":
        if (self.coordinate is None) != (self.source is AnchorSource.NONE):
            raise ValueError(
                f"Anchor source '{self.source.value}' is inconsistent with coordinate={self.coordinate}"
            )
        return self

    @property
    def is_available(self) -> bool:
        return self.source is not AnchorSource.NONE

    @classmethod
    def unavailable(cls) -> "SearchAnchor":
        return cls(coordinate=None, source=AnchorSource.NONE)

    def describe(self) -> dict[str, Any]:
        """Flatten the anchor for structured log context."""
        if self.coordinate is None:
            return {"anchor_source": self.source.value}
        return {
            "anchor_source": self.source.value,
            "latitude": self.coordinate.latitude,
            "longitude": self.coordinate.longitude,
        }
