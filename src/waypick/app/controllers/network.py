# app/controllers/network.py
import logging

from waypick.app.events import (
    GraphReceived,
    GraphRequested,
    PathReceived,
    PathRequested,
    RequestFailed,
)
from waypick.app.protocols import BackendGateway
from waypick.domain.state import SessionState
from waypick.engine.clock import SessionClock
from waypick.services.backend import GatewayError
from waypick.services.contracts import GraphRequest, PathRequest

log = logging.getLogger("waypick.network")


class NetworkHandler:
    """
    Runs backend calls and turns each outcome into a completion event.
    Completions are queued like any other event; handlers downstream decide if
    they are still wanted.
    """

    def __init__(self, state: SessionState, gateway: BackendGateway, clock: SessionClock):
        self.state = state
        self.gateway = gateway
        self.clock = clock

    def _done_at(self, t: float) -> float:
        return max(t, self.clock.now())

    def on_graph_requested(self, ev: GraphRequested):
        if not self.state.is_current("graph", ev.seq):
            return []  # superseded before it was sent
        req = GraphRequest.from_registry(self.state.points)
        try:
            resp = self.gateway.get_graph(req)
        except GatewayError as exc:
            log.warning("graph request seq=%d failed: %s", ev.seq, exc)
            return [RequestFailed(t=self._done_at(ev.t), kind="graph", seq=ev.seq, reason=str(exc))]
        edges = [(e.source, e.target) for e in resp.edges]
        return [GraphReceived(t=self._done_at(ev.t), seq=ev.seq, edges=edges)]

    def on_path_requested(self, ev: PathRequested):
        if not self.state.is_current("path", ev.seq):
            return []
        req = PathRequest.from_selection(self.state.points, ev.departure, ev.arrival)
        try:
            resp = self.gateway.calculate_path(req)
        except GatewayError as exc:
            log.warning("path request seq=%d failed: %s", ev.seq, exc)
            return [RequestFailed(t=self._done_at(ev.t), kind="path", seq=ev.seq, reason=str(exc))]
        return [
            PathReceived(
                t=self._done_at(ev.t),
                seq=ev.seq,
                path=list(resp.path),
                total_distance_km=resp.total_distance,
            )
        ]
