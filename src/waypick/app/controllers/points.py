# app/controllers/points.py
from waypick.app.events import ClearAllClicked, MapClicked, PointsChanged, SessionReset
from waypick.domain.entities.point import Coordinate
from waypick.domain.state import SessionState
from waypick.engine.clock import SessionClock


class PointsHandler:
    def __init__(self, state: SessionState, clock: SessionClock):
        self.state = state
        self.clock = clock

    def on_map_clicked(self, ev: MapClicked):
        self.state.points.add_point(Coordinate(ev.lat, ev.lng), timestamp=self.clock.iso_at(ev.t))
        return [PointsChanged(t=ev.t, count=len(self.state.points))]

    def on_clear_all(self, ev: ClearAllClicked):
        # selection, edges and path all point into the registry, so they go with it
        self.state.reset()
        return [SessionReset(t=ev.t)]
