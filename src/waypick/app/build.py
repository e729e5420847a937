# waypick/app/build.py
import logging
from collections.abc import Mapping
from dataclasses import dataclass

from waypick.app.controllers.graph import GraphHandler
from waypick.app.controllers.network import NetworkHandler
from waypick.app.controllers.path import PathHandler
from waypick.app.controllers.points import PointsHandler
from waypick.app.controllers.selection import SelectionHandler
from waypick.app.events import (
    ClearAllClicked,
    ClearSelectionClicked,
    MapClicked,
    MarkerClicked,
    ShowConnectionsClicked,
)
from waypick.app.protocols import BackendGateway, MapSubstrate
from waypick.app.render import RenderSynchronizer, distance_panel, selection_panel
from waypick.app.wiring import wire
from waypick.config.models import SessionModel
from waypick.domain.entities.point import Point
from waypick.domain.state import SessionState
from waypick.engine.clock import SessionClock
from waypick.engine.event import BaseEvent
from waypick.engine.hooks import NoopHooks
from waypick.engine.kernel import Kernel
from waypick.io.kernel_logging import KernelLogging  # JSON logs
from waypick.io.recorder import Recorder
from waypick.runtime.registries import make_gateway, make_substrate


@dataclass
class Session:
    """
    Everything one map session owns. User actions go in through the methods below;
    each posts an event and drains the queue before returning.

    Backend calls run inside that drain, so an action returns only once its request
    has completed or failed (at most `backend.timeout_s`). To have several actions
    overlap, post their events with `run=False` and call `drain()` once: requests
    superseded in the meantime are never sent, and only the newest response of each
    kind is applied.
    """

    kernel: Kernel
    clock: SessionClock
    state: SessionState
    substrate: MapSubstrate
    gateway: BackendGateway
    render: RenderSynchronizer
    points: PointsHandler
    selection: SelectionHandler
    graph: GraphHandler
    path: PathHandler
    network: NetworkHandler

    def post(self, ev: BaseEvent, *, run: bool = True) -> int:
        self.kernel.schedule(ev)
        return self.kernel.run() if run else 0

    def drain(self) -> int:
        return self.kernel.run()

    def close(self) -> None:
        """Release the gateway (an HTTP client, when built from config)."""
        close = getattr(self.gateway, "close", None)
        if callable(close):
            close()

    def _now(self) -> float:
        # events must not be stamped behind the kernel
        return max(self.clock.now(), self.kernel.now)

    # ------------- user actions -----------------

    def click_map(self, lat: float, lng: float) -> Point:
        self.post(MapClicked(t=self._now(), lat=lat, lng=lng))
        return self.state.points.get(f"Point_{self.state.points.issued}")

    def click_marker(self, point_id: str) -> None:
        self.post(MarkerClicked(t=self._now(), point_id=point_id))

    def show_connections(self) -> None:
        self.post(ShowConnectionsClicked(t=self._now()))

    def clear_selection(self) -> None:
        self.post(ClearSelectionClicked(t=self._now()))

    def clear_all(self) -> None:
        self.post(ClearAllClicked(t=self._now()))

    # ------------- panels -----------------

    @property
    def connections_enabled(self) -> bool:
        return len(self.state.points) > 0

    @property
    def selection_text(self) -> list[str]:
        return selection_panel(self.state)

    @property
    def distance_text(self) -> str | None:
        return distance_panel(self.state)

    @property
    def notice(self) -> str | None:
        return self.state.notice


def build(
    cfg: SessionModel | Mapping | None = None,
    *,
    gateway: BackendGateway | None = None,
    substrate: MapSubstrate | None = None,
    clock: SessionClock | None = None,
    recorder: Recorder | None = None,
    logger: logging.Logger | None = None,
    use_logging: bool = True,
) -> Session:
    # 0) Validate config
    if cfg is None:
        model = SessionModel()
    else:
        model = cfg if isinstance(cfg, SessionModel) else SessionModel.model_validate(cfg)

    # 1) Clock
    if clock is None:
        clock = SessionClock.utc_epoch(*model.epoch) if model.epoch else SessionClock.utc_now()

    # 2) Kernel (with hooks)
    hooks = (
        KernelLogging(
            run_id=model.run_id,
            clock=clock,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
            logger=logger,
            recorder=recorder,
        )
        if use_logging
        else NoopHooks()
    )
    kernel = Kernel(hooks=hooks)

    # 3) Collaborators
    state = SessionState()
    if substrate is None:
        substrate = make_substrate(model.substrate, view=model.map)
    if gateway is None:
        gateway = make_gateway(model.backend)

    # 4) Handlers (inject deps explicitly)
    render = RenderSynchronizer(state, substrate, model.map)
    points = PointsHandler(state, clock)
    selection = SelectionHandler(state)
    graph = GraphHandler(state)
    path = PathHandler(state)
    network = NetworkHandler(state, gateway, clock)

    # 5) Wiring
    wire(
        kernel,
        points=points,
        selection=selection,
        graph=graph,
        path=path,
        network=network,
        render=render,
    )

    # 6) Start from the default view
    render.reset_view()

    return Session(
        kernel, clock, state, substrate, gateway, render, points, selection, graph, path, network
    )
