# io/kernel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from waypick.engine.clock import SessionClock
from waypick.engine.hooks import NoopHooks
from waypick.io.recorder import Recorder


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "logger": record.name,
        }
        extra = getattr(record, "extra", None)
        if isinstance(extra, dict):
            payload.update(extra)
        return json.dumps(payload, default=str)


def _default_json_logger(name="waypick", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class KernelLogging(NoopHooks):
    """
    One place to shape and emit structured logs for engine and session events.
    User-facing events also go to the recorder, if one is attached.
    """

    BUSINESS = {
        "MapClicked",
        "MarkerClicked",
        "ShowConnectionsClicked",
        "ClearSelectionClicked",
        "ClearAllClicked",
        "GraphRequested",
        "PathRequested",
        "GraphReceived",
        "PathReceived",
        "RequestFailed",
        "NoticeRaised",
    }

    def __init__(
        self,
        run_id: str = "local",
        clock: SessionClock | None = None,
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1000,
        logger: logging.Logger | None = None,
        recorder: Recorder | None = None,
    ):
        self.run_id, self.clock, self.debug, self.sample_every = (
            run_id,
            clock,
            debug,
            max(1, sample_every),
        )
        self.recorder = recorder
        self.log = logger or _default_json_logger(level=level)
        self._processed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        wall = self.clock.to_wall(extra["t"]) if (self.clock and "t" in extra) else None
        payload = {"run_id": self.run_id}
        if wall:
            payload["wall"] = wall.isoformat()
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _shape_event(self, ev, want_name: bool = False):
        name = type(ev).__name__
        base = {"t": getattr(ev, "t", None)}
        for f in ("point_id", "seq", "kind", "reason", "message"):
            if hasattr(ev, f):
                base[f] = getattr(ev, f)
        if is_dataclass(ev):
            evd = asdict(ev)
            for k in list(base.keys()):
                evd.pop(k, None)
            # geojson-sized payloads stay out of the log line
            evd = {k: v for k, v in evd.items() if not isinstance(v, list) or len(v) <= 16}
            if evd:
                base["data"] = evd
        return (name, base) if want_name else base

    # --------------------------------------------------------

    # engine lifecycle

    def run_start(self, *, until: float | None, max_events: int | None, qsize: int | None):
        if self.debug:
            self._emit("DEBUG", "run_start", until=until, max_events=max_events, qsize=qsize)

    def run_end(self, *, processed: int, **extra):
        if self.debug:
            self._emit("DEBUG", "run_end", processed=processed, **extra)

    def schedule(self, ev, *, now: float, qsize: int):
        if self.debug and (qsize % self.sample_every) == 0:
            self._emit("DEBUG", "schedule", **self._shape_event(ev), now=now, qsize=qsize)

    def dispatch_start(self, ev, *, seq: int, qsize: int, handlers: int):
        self._processed += 1
        name, extra = self._shape_event(ev, want_name=True)
        business = name in self.BUSINESS
        level = "INFO" if business else ("DEBUG" if self.debug else None)
        if level:
            self._emit(level, name, **extra, seq_no=seq, qsize=qsize, handlers=handlers)
        if business:
            self.biz(ev)

    def dispatch_end(self, ev, *, produced: int, qsize: int, **extra):
        if self.debug and (self._processed % self.sample_every) == 0:
            self._emit("DEBUG", "dispatch_done", produced=produced, qsize=qsize, **extra)

    def error(self, ev, *, reason: str, **extra):
        name, shaped = self._shape_event(ev, want_name=True)
        self._emit("ERROR", "kernel_error", **{**shaped, **extra, "event": name, "reason": reason})

    # ------------- Session transcript --------------------------

    def biz(self, ev):
        if self.recorder:
            self.recorder.emit(ev)
