# tests/services/test_http_gateway.py
import json

import httpx
import pytest

from waypick.domain.entities.point import Coordinate
from waypick.domain.registry import PointRegistry
from waypick.services.backend import GatewayError, HttpBackendGateway
from waypick.services.contracts import GraphRequest, PathRequest


def _registry():
    reg = PointRegistry()
    reg.add_point(Coordinate(51.5, -0.1), timestamp="2025-01-01T00:00:00.000Z")
    reg.add_point(Coordinate(51.6, -0.2), timestamp="2025-01-01T00:00:01.000Z")
    return reg


def _gateway(handler) -> HttpBackendGateway:
    return HttpBackendGateway("http://backend.test/", transport=httpx.MockTransport(handler))


def test_get_graph_posts_geojson_and_parses_edges():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["method"] = request.method
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"edges": [{"source": "Point_1", "target": "Point_2"}]})

    with _gateway(handler) as gw:
        resp = gw.get_graph(GraphRequest.from_registry(_registry()))

    assert seen["method"] == "POST"
    assert seen["path"] == "/get_graph"
    feats = seen["body"]["geojson"]["features"]
    assert [f["id"] for f in feats] == ["Point_1", "Point_2"]
    assert feats[0]["geometry"]["coordinates"] == [-0.1, 51.5]
    assert set(seen["body"]) == {"geojson"}
    assert [(e.source, e.target) for e in resp.edges] == [("Point_1", "Point_2")]


def test_calculate_path_body_and_response():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"path": ["Point_2", "Point_1"], "total_distance": 12.345})

    gw = _gateway(handler)
    resp = gw.calculate_path(PathRequest.from_selection(_registry(), "Point_2", "Point_1"))
    gw.close()

    assert seen["path"] == "/calculate_path"
    assert seen["body"]["departure"] == "Point_2"
    assert seen["body"]["arrival"] == "Point_1"
    assert "geojson" in seen["body"]
    assert resp.path == ["Point_2", "Point_1"]
    assert resp.total_distance == pytest.approx(12.345)


@pytest.mark.parametrize("status", [400, 404, 500, 503])
def test_non_2xx_raises_gateway_error(status):
    gw = _gateway(lambda request: httpx.Response(status, json={"error": "nope"}))
    with pytest.raises(GatewayError) as info:
        gw.get_graph(GraphRequest.from_registry(_registry()))
    assert info.value.status == status
    assert info.value.endpoint == "/get_graph"


def test_transport_error_raises_gateway_error():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    gw = _gateway(handler)
    with pytest.raises(GatewayError) as info:
        gw.calculate_path(PathRequest.from_selection(_registry(), "Point_1", "Point_2"))
    assert info.value.status is None
    assert "transport" in info.value.reason


@pytest.mark.parametrize(
    "body",
    [
        b"not json",
        b'{"path": "Point_1", "total_distance": 1.0}',
        b'{"path": ["Point_1"]}',
        b'{"path": ["Point_1"], "total_distance": -2}',
        b'{"path": ["Point_1", "Point_2"], "total_distance": NaN}',
        b'{"path": ["Point_1", "Point_2"], "total_distance": Infinity}',
    ],
)
def test_malformed_path_body_raises_gateway_error(body):
    gw = _gateway(lambda request: httpx.Response(200, content=body))
    with pytest.raises(GatewayError, match="malformed"):
        gw.calculate_path(PathRequest.from_selection(_registry(), "Point_1", "Point_2"))


@pytest.mark.parametrize("body", [{}, {"error": "internal"}, {"edges": None}])
def test_graph_body_without_edges_raises_gateway_error(body):
    gw = _gateway(lambda request: httpx.Response(200, json=body))
    with pytest.raises(GatewayError, match="malformed"):
        gw.get_graph(GraphRequest.from_registry(_registry()))


def test_graph_response_with_empty_edge_list_is_valid():
    gw = _gateway(lambda request: httpx.Response(200, json={"edges": []}))
    assert gw.get_graph(GraphRequest.from_registry(_registry())).edges == []
