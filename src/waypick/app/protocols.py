from collections.abc import Sequence
from typing import Literal, Protocol, runtime_checkable

from waypick.domain.entities.point import Coordinate
from waypick.services.contracts import GraphRequest, GraphResponse, PathRequest, PathResponse

Layer = Literal["points", "edges", "path"]
LAYERS: tuple[Layer, ...] = ("points", "edges", "path")


# ------------- Map substrate --------------------
@runtime_checkable
class MapSubstrate(Protocol):
    """
    Drawing capabilities of whatever shows the map.
    Responsibilities:
      • Hold primitives per named layer; `clear_layer` drops everything on one layer.
      • Move the camera (`set_view`, `fit_bounds`).
    Coordinates are WGS84 degrees. No projection or tile work happens on this side.
    """

    def add_marker(
        self, layer: Layer, coordinate: Coordinate, *, color: str, label: str | None = None
    ) -> None: ...
    def add_line(
        self,
        layer: Layer,
        coordinates: Sequence[Coordinate],
        *,
        color: str,
        weight: float,
        opacity: float = 1.0,
    ) -> None: ...
    def clear_layer(self, layer: Layer) -> None: ...
    def fit_bounds(self, south_west: Coordinate, north_east: Coordinate) -> None: ...
    def set_view(self, center: Coordinate, zoom: int) -> None: ...


# ------------- Backend --------------------
@runtime_checkable
class BackendGateway(Protocol):
    """
    Routing/graph service (POST /get_graph, POST /calculate_path).
    Any transport failure, non-2xx status or malformed body raises GatewayError.
    """

    def get_graph(self, req: GraphRequest) -> GraphResponse: ...
    def calculate_path(self, req: PathRequest) -> PathResponse: ...
