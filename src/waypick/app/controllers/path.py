# app/controllers/path.py
import logging

from waypick.app.events import NoticeRaised, PathChanged, PathReceived, RequestFailed
from waypick.domain.entities.point import PathResult
from waypick.domain.state import SessionState

log = logging.getLogger("waypick.path")

PATH_FAILED_NOTICE = "Failed to calculate path."


class PathHandler:
    def __init__(self, state: SessionState):
        self.state = state

    def on_path_received(self, ev: PathReceived):
        if not self.state.is_current("path", ev.seq):
            log.info("dropping stale path response seq=%d", ev.seq)
            return []
        self.state.path = PathResult(tuple(ev.path), ev.total_distance_km)
        self.state.distance.show(ev.total_distance_km)
        return [PathChanged(t=ev.t, fit=True)]

    def on_request_failed(self, ev: RequestFailed):
        # line and distance readout stay as they were
        if ev.kind != "path" or not self.state.is_current("path", ev.seq):
            return []
        self.state.notice = PATH_FAILED_NOTICE
        return [NoticeRaised(t=ev.t, message=PATH_FAILED_NOTICE)]
