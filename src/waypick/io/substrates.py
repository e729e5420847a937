# io/substrates.py
from collections.abc import Sequence
from dataclasses import dataclass

import folium

from waypick.app.protocols import LAYERS, Layer
from waypick.domain.entities.point import Coordinate


@dataclass(frozen=True)
class Marker:
    coordinate: Coordinate
    color: str
    label: str | None = None


@dataclass(frozen=True)
class Line:
    coordinates: tuple[Coordinate, ...]
    color: str
    weight: float
    opacity: float = 1.0


@dataclass
class View:
    center: Coordinate | None = None
    zoom: int | None = None
    bounds: tuple[Coordinate, Coordinate] | None = None  # set by fit_bounds, dropped by set_view


class RecordingSubstrate:
    """
    In-memory map. Keeps what is currently drawn per layer plus a log of every call,
    which is all a headless session or a test needs to look at.
    """

    def __init__(self):
        self.layers: dict[str, list[Marker | Line]] = {name: [] for name in LAYERS}
        self.view = View()
        self.calls: list[tuple] = []

    # ------------- MapSubstrate -----------------

    def add_marker(
        self, layer: Layer, coordinate: Coordinate, *, color: str, label: str | None = None
    ) -> None:
        self.calls.append(("add_marker", layer, coordinate, color, label))
        self.layers[layer].append(Marker(coordinate, color, label))

    def add_line(
        self,
        layer: Layer,
        coordinates: Sequence[Coordinate],
        *,
        color: str,
        weight: float,
        opacity: float = 1.0,
    ) -> None:
        self.calls.append(("add_line", layer, tuple(coordinates), color, weight))
        self.layers[layer].append(Line(tuple(coordinates), color, weight, opacity))

    def clear_layer(self, layer: Layer) -> None:
        self.calls.append(("clear_layer", layer))
        self.layers[layer] = []

    def fit_bounds(self, south_west: Coordinate, north_east: Coordinate) -> None:
        self.calls.append(("fit_bounds", south_west, north_east))
        self.view.bounds = (south_west, north_east)

    def set_view(self, center: Coordinate, zoom: int) -> None:
        self.calls.append(("set_view", center, zoom))
        self.view = View(center=center, zoom=zoom)

    # ------------- inspection -----------------

    def markers(self, layer: Layer = "points") -> list[Marker]:
        return [m for m in self.layers[layer] if isinstance(m, Marker)]

    def lines(self, layer: Layer) -> list[Line]:
        return [ln for ln in self.layers[layer] if isinstance(ln, Line)]

    def is_blank(self) -> bool:
        return not any(self.layers.values())


class FoliumSubstrate(RecordingSubstrate):
    """Same bookkeeping as RecordingSubstrate, rendered to a Leaflet page through folium."""

    def __init__(self, center: Coordinate, zoom: int, *, tiles: str = "OpenStreetMap"):
        super().__init__()
        self.tiles = tiles
        self.view = View(center=center, zoom=zoom)

    def to_map(self) -> folium.Map:
        c = self.view.center
        fmap = folium.Map(
            location=[c.lat, c.lng], zoom_start=self.view.zoom, tiles=self.tiles, control_scale=True
        )
        for name in LAYERS:
            group = folium.FeatureGroup(name=name)
            for item in self.layers[name]:
                if isinstance(item, Marker):
                    folium.CircleMarker(
                        [item.coordinate.lat, item.coordinate.lng],
                        radius=7,
                        color=item.color,
                        fill=True,
                        fill_color=item.color,
                        fill_opacity=0.9,
                        tooltip=item.label,
                    ).add_to(group)
                else:
                    folium.PolyLine(
                        [(p.lat, p.lng) for p in item.coordinates],
                        color=item.color,
                        weight=item.weight,
                        opacity=item.opacity,
                    ).add_to(group)
            group.add_to(fmap)
        folium.LayerControl(collapsed=True).add_to(fmap)
        if self.view.bounds:
            sw, ne = self.view.bounds
            fmap.fit_bounds([[sw.lat, sw.lng], [ne.lat, ne.lng]])
        return fmap

    def save(self, path: str) -> None:
        self.to_map().save(path)
