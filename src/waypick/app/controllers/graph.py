# app/controllers/graph.py
import logging

from waypick.app.events import (
    EdgesChanged,
    GraphReceived,
    GraphRequested,
    NoticeRaised,
    RequestFailed,
    ShowConnectionsClicked,
)
from waypick.domain.entities.point import GraphEdge
from waypick.domain.state import SessionState

log = logging.getLogger("waypick.graph")

NO_POINTS_NOTICE = "Please add points first."
GRAPH_FAILED_NOTICE = "Failed to fetch graph data."


class GraphHandler:
    def __init__(self, state: SessionState):
        self.state = state

    def on_show_connections(self, ev: ShowConnectionsClicked):
        if len(self.state.points) == 0:
            self.state.notice = NO_POINTS_NOTICE
            return [NoticeRaised(t=ev.t, message=NO_POINTS_NOTICE, kind="precondition")]
        return [GraphRequested(t=ev.t, seq=self.state.next_seq("graph"))]

    def on_graph_received(self, ev: GraphReceived):
        if not self.state.is_current("graph", ev.seq):
            log.info("dropping stale graph response seq=%d", ev.seq)
            return []
        # replace wholesale; edges are never merged across responses
        self.state.edges = [GraphEdge(s, t) for s, t in ev.edges]
        return [EdgesChanged(t=ev.t, count=len(self.state.edges))]

    def on_request_failed(self, ev: RequestFailed):
        if ev.kind != "graph" or not self.state.is_current("graph", ev.seq):
            return []
        self.state.notice = GRAPH_FAILED_NOTICE
        return [NoticeRaised(t=ev.t, message=GRAPH_FAILED_NOTICE)]
