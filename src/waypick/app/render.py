# app/render.py
from collections.abc import Sequence

import numpy as np

from waypick.app.events import (
    EdgesChanged,
    PathChanged,
    PointsChanged,
    SelectionChanged,
    SessionReset,
)
from waypick.app.protocols import MapSubstrate
from waypick.config.models import MapModel
from waypick.domain.entities.point import Coordinate, Point
from waypick.domain.state import SessionState


def bounds(coords: Sequence[Coordinate]) -> tuple[Coordinate, Coordinate]:
    """(south-west, north-east) corners enclosing `coords`."""
    arr = np.asarray([(c.lat, c.lng) for c in coords], dtype=float)
    lo, hi = arr.min(axis=0), arr.max(axis=0)
    return Coordinate(float(lo[0]), float(lo[1])), Coordinate(float(hi[0]), float(hi[1]))


def selection_panel(state: SessionState) -> list[str]:
    sel = state.selection
    lines = []
    if sel.departure:
        lines.append(f"Departure: {sel.departure}")
    if sel.arrival:
        lines.append(f"Arrival: {sel.arrival}")
    return lines


def distance_panel(state: SessionState) -> str | None:
    return state.distance.text()


class RenderSynchronizer:
    """
    Turns session state into drawing commands. Keeps nothing between calls: every
    redraw clears its layer and rebuilds it from `state`, so repeating one is harmless.
    """

    def __init__(self, state: SessionState, substrate: MapSubstrate, view: MapModel):
        self.state = state
        self.substrate = substrate
        self.view = view
        self.style = view.style

    # ------------- subscriptions -----------------

    def on_points_changed(self, ev: PointsChanged):
        self.draw_points()
        return []

    def on_selection_changed(self, ev: SelectionChanged):
        self.draw_points()
        return []

    def on_edges_changed(self, ev: EdgesChanged):
        self.draw_edges()
        return []

    def on_path_changed(self, ev: PathChanged):
        self.draw_path(fit=ev.fit)
        return []

    def on_session_reset(self, ev: SessionReset):
        self.redraw_all()
        self.reset_view()
        return []

    # ------------- layers -----------------

    def marker_color(self, p: Point) -> str:
        sel = self.state.selection
        if p.id == sel.departure:
            return self.style.departure_color
        if p.id == sel.arrival:
            return self.style.arrival_color
        return self.style.default_color

    def draw_points(self) -> None:
        s = self.substrate
        s.clear_layer("points")
        for p in self.state.points:
            color = self.marker_color(p)
            s.add_marker("points", p.coordinate, color=color, label=p.properties.name)

    def draw_edges(self) -> None:
        s, st = self.substrate, self.style.edge
        s.clear_layer("edges")
        for e in self.state.edges:
            coords = self.state.points.resolve((e.source, e.target))
            if len(coords) == 2:
                s.add_line("edges", coords, color=st.color, weight=st.weight, opacity=st.opacity)

    def draw_path(self, *, fit: bool = False) -> None:
        s, st = self.substrate, self.style.path
        s.clear_layer("path")
        if self.state.path is None:
            return
        coords = self.state.points.resolve(self.state.path.path)
        if len(coords) < 2:
            return
        s.add_line("path", coords, color=st.color, weight=st.weight, opacity=st.opacity)
        if fit:
            s.fit_bounds(*bounds(coords))

    def redraw_all(self) -> None:
        self.draw_points()
        self.draw_edges()
        self.draw_path()

    def reset_view(self) -> None:
        lat, lng = self.view.default_center
        self.substrate.set_view(Coordinate(lat, lng), self.view.default_zoom)
