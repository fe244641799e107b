"""Place entities - raw collaborator results and their display projection."""

from pydantic import BaseModel, ConfigDict, Field

from placefinder.entities.coordinate import Coordinate


class PlaceResult(BaseModel):
    """A single place as returned by a place-search provider.

    The title may still contain markup (highlighting tags, entity references).
    """

    model_config = ConfigDict(frozen=True)

    title: str
    distance_meters: int = Field(..., ge=0, description="Distance from the search anchor")
    coordinate: Coordinate


class DisplayPlace(BaseModel):
    """A place ready for presentation: clean title plus a formatted distance."""

    model_config = ConfigDict(frozen=True)

    title: str
    distance_meters: int = Field(..., ge=0)
    distance_label: str
    coordinate: Coordinate
