# tests/conftest.py
import pytest

from waypick.app.build import build
from waypick.engine.clock import SessionClock
from waypick.io.substrates import RecordingSubstrate
from waypick.services.backend import GatewayError
from waypick.services.contracts import GraphResponse, PathResponse


class FakeGateway:
    """Scripted backend: canned responses (or GatewayError) and a log of what was asked."""

    def __init__(self, *, edges=None, path=None, total_distance=0.0):
        self.edges = edges or []
        self.path = path
        self.total_distance = total_distance
        self.graph_error: str | None = None
        self.path_error: str | None = None
        self.graph_calls = []
        self.path_calls = []

    def get_graph(self, req):
        self.graph_calls.append(req)
        if self.graph_error:
            raise GatewayError("/get_graph", self.graph_error, status=500)
        return GraphResponse.model_validate(
            {"edges": [{"source": s, "target": t} for s, t in self.edges]}
        )

    def calculate_path(self, req):
        self.path_calls.append(req)
        if self.path_error:
            raise GatewayError("/calculate_path", self.path_error, status=500)
        path = self.path if self.path is not None else [req.departure, req.arrival]
        return PathResponse(path=path, total_distance=self.total_distance)


class Ticker:
    """Manual monotonic source: every call advances by `step` seconds."""

    def __init__(self, step: float = 0.0):
        self.t = 0.0
        self.step = step

    def __call__(self) -> float:
        v = self.t
        self.t += self.step
        return v


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def substrate():
    return RecordingSubstrate()


@pytest.fixture
def clock():
    return SessionClock.utc_epoch(2025, 1, 1, 0, 0, 0, source=Ticker())


@pytest.fixture
def session(gateway, substrate, clock):
    return build(gateway=gateway, substrate=substrate, clock=clock, use_logging=False)
