# domain/entities/point.py
from dataclasses import dataclass, field


@dataclass(frozen=True)
class Coordinate:
    lat: float  # degrees, WGS84
    lng: float

    def lnglat(self) -> list[float]:
        """GeoJSON axis order."""
        return [self.lng, self.lat]


@dataclass(frozen=True)
class PointProperties:
    name: str
    timestamp: str  # ISO-8601, creation time


@dataclass(frozen=True)
class Point:
    id: str  # "Point_<n>"
    coordinate: Coordinate
    properties: PointProperties

    def to_feature(self) -> dict:
        return {
            "type": "Feature",
            "id": self.id,
            "geometry": {"type": "Point", "coordinates": self.coordinate.lnglat()},
            "properties": {
                "id": self.id,
                "name": self.properties.name,
                "timestamp": self.properties.timestamp,
            },
        }


@dataclass(frozen=True)
class GraphEdge:
    source: str
    target: str


@dataclass(frozen=True)
class PathResult:
    path: tuple[str, ...] = field(default_factory=tuple)
    total_distance_km: float = 0.0
