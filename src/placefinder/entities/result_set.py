"""ResultSet entity - the ranked, capped output of one search."""

import re

from pydantic import BaseModel, ConfigDict, Field, model_validator

from placefinder.entities.anchor import SearchAnchor
from placefinder.entities.place import DisplayPlace

# Upper bound on places held by a single result set
MAX_RESULTS = 10

_MARKUP_PATTERN = re.compile(r"<[^>]+>|&[^;]+;")


class ResultSet(BaseModel):
    """An ordered sequence of at most MAX_RESULTS places, nearest first.

    Created fresh for every search and replaced wholesale; never merged.
    """

    model_config = ConfigDict(frozen=True)

    places: list[DisplayPlace] = Field(default_factory=list)
    query: str = ""
    anchor: SearchAnchor | None = None

    @model_validator(mode="after")
    def check_invariants(self) -> "ResultSet":
        if len(self.places) > MAX_RESULTS:
            raise ValueError(f"ResultSet holds {len(self.places)} places, limit is {MAX_RESULTS}")

        distances = [place.distance_meters for place in self.places]
        if any(a > b for a, b in zip(distances, distances[1:])):
            raise ValueError("ResultSet places must be ordered by ascending distance")

        for place in self.places:
            if _MARKUP_PATTERN.search(place.title):
                raise ValueError(f"Place title still contains markup: {place.title!r}")
        return self

    @classmethod
    def empty(cls) -> "ResultSet":
        return cls()

    def __len__(self) -> int:
        return len(self.places)

    @property
    def is_empty(self) -> bool:
        return not self.places
