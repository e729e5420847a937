# domain/state.py
from dataclasses import dataclass, field
from typing import Literal

from waypick.domain.entities.point import GraphEdge, PathResult
from waypick.domain.registry import PointRegistry
from waypick.domain.selection import Selection

DistanceMode = Literal["hidden", "zero", "value"]
RequestKind = Literal["graph", "path"]


@dataclass
class DistanceDisplay:
    mode: DistanceMode = "hidden"
    km: float = 0.0

    def text(self) -> str | None:
        if self.mode == "hidden":
            return None
        return f"Total Distance: {self.km:.2f} km"

    def hide(self) -> None:
        self.mode, self.km = "hidden", 0.0

    def zero(self) -> None:
        self.mode, self.km = "zero", 0.0

    def show(self, km: float) -> None:
        self.mode, self.km = "value", float(km)


@dataclass
class SessionState:
    points: PointRegistry = field(default_factory=PointRegistry)
    selection: Selection = field(default_factory=Selection)
    edges: list[GraphEdge] = field(default_factory=list)
    path: PathResult | None = None
    distance: DistanceDisplay = field(default_factory=DistanceDisplay)
    notice: str | None = None

    # latest issued request number per kind; responses carrying an older one are stale
    request_seq: dict[str, int] = field(default_factory=lambda: {"graph": 0, "path": 0})

    def next_seq(self, kind: RequestKind) -> int:
        self.request_seq[kind] += 1
        return self.request_seq[kind]

    def is_current(self, kind: RequestKind, seq: int) -> bool:
        return self.request_seq[kind] == seq

    def invalidate(self, *kinds: RequestKind) -> None:
        for k in kinds:
            self.request_seq[k] += 1

    def reset(self) -> None:
        """Back to the freshly-built state; the point id counter keeps counting."""
        self.points.clear()
        self.selection.clear()
        self.edges = []
        self.path = None
        self.distance.hide()
        self.notice = None
        self.invalidate("graph", "path")
