# tests/app/test_render_sync.py
from waypick.app.render import RenderSynchronizer, bounds
from waypick.config.models import MapModel
from waypick.domain.entities.point import Coordinate, GraphEdge, PathResult
from waypick.domain.state import SessionState
from waypick.io.substrates import RecordingSubstrate


def _setup(n=3):
    st = SessionState()
    for i in range(n):
        st.points.add_point(Coordinate(10.0 + i, 20.0 - i), timestamp="ts")
    sub = RecordingSubstrate()
    return st, sub, RenderSynchronizer(st, sub, MapModel())


def test_redrawing_points_twice_is_idempotent():
    st, sub, r = _setup()
    r.draw_points()
    first = list(sub.layers["points"])
    r.draw_points()
    assert sub.layers["points"] == first
    assert len(sub.markers()) == 3


def test_edges_are_replaced_not_merged():
    st, sub, r = _setup()
    st.edges = [GraphEdge("Point_1", "Point_2"), GraphEdge("Point_2", "Point_3")]
    r.draw_edges()
    assert len(sub.lines("edges")) == 2

    st.edges = [GraphEdge("Point_1", "Point_3")]
    r.draw_edges()
    (only,) = sub.lines("edges")
    assert only.coordinates == (Coordinate(10.0, 20.0), Coordinate(12.0, 18.0))


def test_edges_with_unknown_endpoint_are_skipped():
    st, sub, r = _setup()
    st.edges = [GraphEdge("Point_1", "Point_7"), GraphEdge("Point_1", "Point_2")]
    r.draw_edges()
    assert len(sub.lines("edges")) == 1


def test_path_drops_unknown_ids():
    st, sub, r = _setup()
    st.path = PathResult(("Point_1", "Point_9", "Point_3"), 5.0)
    r.draw_path(fit=True)
    (line,) = sub.lines("path")
    assert line.coordinates == (Coordinate(10.0, 20.0), Coordinate(12.0, 18.0))
    assert sub.view.bounds == (Coordinate(10.0, 18.0), Coordinate(12.0, 20.0))


def test_path_with_fewer_than_two_resolvable_points_draws_nothing():
    st, sub, r = _setup()
    st.path = PathResult(("Point_1", "Point_9"), 5.0)
    r.draw_path(fit=True)
    assert sub.lines("path") == []
    assert sub.view.bounds is None


def test_at_most_one_path_line():
    st, sub, r = _setup()
    st.path = PathResult(("Point_1", "Point_2"), 1.0)
    r.draw_path()
    st.path = PathResult(("Point_2", "Point_3"), 1.0)
    r.draw_path()
    assert len(sub.lines("path")) == 1
    assert sub.lines("path")[0].weight == 4.0


def test_empty_state_redraw_blanks_every_layer():
    st, sub, r = _setup()
    st.edges = [GraphEdge("Point_1", "Point_2")]
    r.redraw_all()
    assert not sub.is_blank()
    st.reset()
    r.redraw_all()
    assert sub.is_blank()


def test_bounds_single_point():
    c = Coordinate(1.0, 2.0)
    assert bounds([c]) == (c, c)
