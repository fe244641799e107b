"""Coordinate entity - a latitude/longitude pair."""

from pydantic import BaseModel, ConfigDict


class Coordinate(BaseModel):
    """A position in decimal degrees.

    No range validation is applied: callers may supply any float pair.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float

    def __str__(self) -> str:
        return f"{self.latitude}, {self.longitude}"
