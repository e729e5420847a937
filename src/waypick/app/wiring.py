# waypick/app/wiring.py
from waypick.app.controllers.graph import GraphHandler
from waypick.app.controllers.network import NetworkHandler
from waypick.app.controllers.path import PathHandler
from waypick.app.controllers.points import PointsHandler
from waypick.app.controllers.selection import SelectionHandler
from waypick.app.events import (
    ClearAllClicked,
    ClearSelectionClicked,
    EdgesChanged,
    GraphReceived,
    GraphRequested,
    MapClicked,
    MarkerClicked,
    PathChanged,
    PathReceived,
    PathRequested,
    PointsChanged,
    RequestFailed,
    SelectionChanged,
    SessionReset,
    ShowConnectionsClicked,
)
from waypick.app.render import RenderSynchronizer
from waypick.engine.kernel import Kernel


def wire(
    kernel: Kernel,
    *,
    points: PointsHandler,
    selection: SelectionHandler,
    graph: GraphHandler,
    path: PathHandler,
    network: NetworkHandler,
    render: RenderSynchronizer,
) -> None:
    k = kernel

    # user input
    k.on(MapClicked, points.on_map_clicked)
    k.on(ClearAllClicked, points.on_clear_all)
    k.on(MarkerClicked, selection.on_marker_clicked)
    k.on(ClearSelectionClicked, selection.on_clear_selection)
    k.on(ShowConnectionsClicked, graph.on_show_connections)

    # backend round trips
    k.on(GraphRequested, network.on_graph_requested)
    k.on(PathRequested, network.on_path_requested)
    k.on(GraphReceived, graph.on_graph_received)
    k.on(PathReceived, path.on_path_received)
    k.on(RequestFailed, graph.on_request_failed)  # each ignores the other kind
    k.on(RequestFailed, path.on_request_failed)

    # state → map
    k.on(PointsChanged, render.on_points_changed)
    k.on(SelectionChanged, render.on_selection_changed)
    k.on(EdgesChanged, render.on_edges_changed)
    k.on(PathChanged, render.on_path_changed)
    k.on(SessionReset, render.on_session_reset)
