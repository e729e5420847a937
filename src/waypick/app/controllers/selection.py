# app/controllers/selection.py
import logging

from waypick.app.events import (
    ClearSelectionClicked,
    MarkerClicked,
    PathChanged,
    PathRequested,
    SelectionChanged,
)
from waypick.domain.state import SessionState

log = logging.getLogger("waypick.selection")


class SelectionHandler:
    def __init__(self, state: SessionState):
        self.state = state

    def on_marker_clicked(self, ev: MarkerClicked):
        sel = self.state.selection
        if ev.point_id not in self.state.points:
            log.debug("ignoring click on unknown point %s", ev.point_id)
            return []
        if not sel.select(ev.point_id):
            # full, or the same point clicked again
            return []

        out: list[object] = [SelectionChanged(t=ev.t, selected=sel.ids)]
        if sel.complete:
            seq = self.state.next_seq("path")
            out.append(
                PathRequested(t=ev.t, seq=seq, departure=sel.departure, arrival=sel.arrival)
            )
        return out

    def on_clear_selection(self, ev: ClearSelectionClicked):
        self.state.selection.clear()
        self.state.path = None
        # a path response still in flight belongs to the old pair
        self.state.invalidate("path")
        self.state.distance.zero()
        return [SelectionChanged(t=ev.t, selected=()), PathChanged(t=ev.t, fit=False)]
