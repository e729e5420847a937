from waypick.domain.entities.point import Coordinate, GraphEdge, PathResult
from waypick.domain.state import DistanceDisplay, SessionState


def test_distance_display_modes():
    d = DistanceDisplay()
    assert d.text() is None
    d.show(12.345)
    assert d.text() == "Total Distance: 12.35 km"
    d.zero()
    assert d.text() == "Total Distance: 0.00 km"
    d.hide()
    assert d.text() is None


def test_request_sequences_and_invalidation():
    st = SessionState()
    s1 = st.next_seq("path")
    assert st.is_current("path", s1)
    s2 = st.next_seq("path")
    assert not st.is_current("path", s1)
    assert st.is_current("path", s2)
    st.invalidate("path")
    assert not st.is_current("path", s2)
    # kinds are independent
    g = st.next_seq("graph")
    assert st.is_current("graph", g)


def test_reset_clears_everything_but_the_id_counter():
    st = SessionState()
    st.points.add_point(Coordinate(1.0, 2.0), timestamp="t")
    st.points.add_point(Coordinate(3.0, 4.0), timestamp="t")
    st.selection.select("Point_1")
    st.edges = [GraphEdge("Point_1", "Point_2")]
    st.path = PathResult(("Point_1", "Point_2"), 3.0)
    st.distance.show(3.0)
    st.notice = "x"
    g, p = st.next_seq("graph"), st.next_seq("path")

    st.reset()

    assert len(st.points) == 0
    assert len(st.selection) == 0
    assert st.edges == []
    assert st.path is None
    assert st.distance.text() is None
    assert st.notice is None
    assert not st.is_current("graph", g)
    assert not st.is_current("path", p)
    assert st.points.issued == 2
