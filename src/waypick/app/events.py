# app/events.py
from dataclasses import dataclass, field
from typing import Literal

from waypick.domain.state import RequestKind
from waypick.engine.event import BaseEvent


# User input
@dataclass(order=True)
class MapClicked(BaseEvent):
    lat: float
    lng: float


@dataclass(order=True)
class MarkerClicked(BaseEvent):
    point_id: str


@dataclass(order=True)
class ShowConnectionsClicked(BaseEvent):
    pass


@dataclass(order=True)
class ClearSelectionClicked(BaseEvent):
    pass


@dataclass(order=True)
class ClearAllClicked(BaseEvent):
    pass


# Backend round trips
@dataclass(order=True)
class GraphRequested(BaseEvent):
    seq: int  # versioning to make stale responses harmless


@dataclass(order=True)
class PathRequested(BaseEvent):
    seq: int
    departure: str
    arrival: str


@dataclass(order=True)
class GraphReceived(BaseEvent):
    seq: int
    edges: list[tuple[str, str]] = field(default_factory=list)


@dataclass(order=True)
class PathReceived(BaseEvent):
    seq: int
    path: list[str] = field(default_factory=list)
    total_distance_km: float = 0.0


@dataclass(order=True)
class RequestFailed(BaseEvent):
    kind: RequestKind
    seq: int
    reason: str | None = None


# State changes (render triggers)
@dataclass(order=True)
class PointsChanged(BaseEvent):
    count: int


@dataclass(order=True)
class SelectionChanged(BaseEvent):
    selected: tuple[str, ...] = ()


@dataclass(order=True)
class EdgesChanged(BaseEvent):
    count: int


@dataclass(order=True)
class PathChanged(BaseEvent):
    fit: bool = True  # fit the view to the new line


@dataclass(order=True)
class SessionReset(BaseEvent):
    pass


# User-facing
@dataclass(order=True)
class NoticeRaised(BaseEvent):
    message: str
    kind: Literal["precondition", "failure"] = "failure"
