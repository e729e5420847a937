# tests/app/test_kernel_logging.py
import io
import json
import logging

from waypick.app.build import build
from waypick.app.events import MarkerClicked, NoticeRaised
from waypick.io.kernel_logging import JsonFormatter
from waypick.io.recorder import JsonlSink, MemorySink, Recorder


def _logger(buf: io.StringIO) -> logging.Logger:
    lg = logging.getLogger("waypick.test")
    lg.handlers = []
    h = logging.StreamHandler(buf)
    h.setFormatter(JsonFormatter())
    lg.addHandler(h)
    lg.setLevel(logging.DEBUG)
    lg.propagate = False
    return lg


def test_user_events_are_logged_and_recorded(gateway, substrate, clock):
    buf = io.StringIO()
    sink = MemorySink()
    session = build(
        gateway=gateway,
        substrate=substrate,
        clock=clock,
        recorder=Recorder(sink),
        logger=_logger(buf),
    )

    session.show_connections()  # no points: precondition notice
    session.click_map(1.0, 2.0)

    names = [type(ev).__name__ for ev in sink.events]
    assert names == ["ShowConnectionsClicked", "NoticeRaised", "MapClicked"]
    notice = sink.events[1]
    assert isinstance(notice, NoticeRaised)
    assert notice.kind == "precondition"

    lines = [json.loads(line) for line in buf.getvalue().splitlines()]
    assert [ln["msg"] for ln in lines] == ["ShowConnectionsClicked", "NoticeRaised", "MapClicked"]
    assert lines[1]["message"] == "Please add points first."
    assert all(ln["run_id"] == "local" for ln in lines)
    assert lines[0]["wall"].startswith("2025-01-01T00:00:00")


def test_jsonl_sink_writes_event_name_and_fields():
    buf = io.StringIO()
    Recorder(JsonlSink(buf)).emit(MarkerClicked(t=1.5, point_id="Point_2"))
    rec = json.loads(buf.getvalue())
    assert rec == {"name": "MarkerClicked", "t": 1.5, "point_id": "Point_2"}


def test_failing_sink_does_not_break_emit():
    class Broken:
        def write(self, ev):
            raise OSError("disk full")

    mem = MemorySink()
    Recorder(Broken(), mem).emit(MarkerClicked(t=0.0, point_id="Point_1"))
    assert len(mem.events) == 1
