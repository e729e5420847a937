# services/contracts.py
"""Wire contracts of the routing backend. Field names are part of the contract."""

from pydantic import BaseModel, ConfigDict, Field

from waypick.domain.registry import PointRegistry


class GraphRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")
    geojson: dict

    @classmethod
    def from_registry(cls, points: PointRegistry) -> "GraphRequest":
        return cls(geojson=points.to_feature_collection())


class PathRequest(GraphRequest):
    departure: str
    arrival: str

    @classmethod
    def from_selection(cls, points: PointRegistry, departure: str, arrival: str) -> "PathRequest":
        return cls(geojson=points.to_feature_collection(), departure=departure, arrival=arrival)


class EdgeModel(BaseModel):
    source: str
    target: str


class GraphResponse(BaseModel):
    edges: list[EdgeModel]  # required; an empty list is a valid answer, a missing key is not


class PathResponse(BaseModel):
    path: list[str]
    total_distance: float = Field(ge=0, allow_inf_nan=False)  # kilometers
