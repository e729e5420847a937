# domain/registry.py
from collections.abc import Iterable, Iterator

from waypick.domain.entities.point import Coordinate, Point, PointProperties

ID_PREFIX = "Point_"


class PointRegistry:
    """
    Owns every user-placed point, keyed by id, in creation order.
    Ids are `Point_<n>` with n counting from 1; the counter survives `clear()`
    so an id is never handed out twice within a session.
    """

    def __init__(self):
        self._points: dict[str, Point] = {}
        self._issued = 0

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points.values())

    def __contains__(self, point_id: object) -> bool:
        return point_id in self._points

    @property
    def issued(self) -> int:
        return self._issued

    def get(self, point_id: str) -> Point | None:
        return self._points.get(point_id)

    def add_point(self, coordinate: Coordinate, *, timestamp: str) -> Point:
        self._issued += 1
        pid = f"{ID_PREFIX}{self._issued}"
        p = Point(pid, coordinate, PointProperties(name=pid, timestamp=timestamp))
        self._points[pid] = p
        return p

    def clear(self) -> None:
        self._points.clear()

    def resolve(self, ids: Iterable[str]) -> list[Coordinate]:
        # unknown ids are dropped, order of the survivors is kept
        return [self._points[i].coordinate for i in ids if i in self._points]

    def to_feature_collection(self) -> dict:
        return {"type": "FeatureCollection", "features": [p.to_feature() for p in self]}
