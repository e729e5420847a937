# runtime/registries.py
from collections.abc import Callable
from typing import Any

from waypick.app.protocols import BackendGateway, MapSubstrate
from waypick.config.models import (
    BackendHttpModel,
    BackendUnion,
    MapModel,
    SubstrateFoliumModel,
    SubstrateRecordingModel,
    SubstrateUnion,
)
from waypick.domain.entities.point import Coordinate
from waypick.io.substrates import FoliumSubstrate, RecordingSubstrate
from waypick.services.backend import HttpBackendGateway

SubstrateFactory = Callable[[SubstrateUnion, dict[str, Any]], MapSubstrate]
GatewayFactory = Callable[[BackendUnion, dict[str, Any]], BackendGateway]

_substrate_registry: dict[str, SubstrateFactory] = {}
_gateway_registry: dict[str, GatewayFactory] = {}


# ------------------- Map substrates ---------------------------


def register_substrate(kind: str):
    def deco(fn: SubstrateFactory):
        _substrate_registry[kind] = fn
        return fn

    return deco


def make_substrate(cfg: SubstrateUnion, *, view: MapModel) -> MapSubstrate:
    try:
        factory = _substrate_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown substrate kind {cfg.kind!r}")
    return factory(cfg, {"view": view})


@register_substrate("recording")
def _make_recording(cfg: SubstrateRecordingModel, deps):
    return RecordingSubstrate()


@register_substrate("folium")
def _make_folium(cfg: SubstrateFoliumModel, deps):
    view: MapModel = deps["view"]
    lat, lng = view.default_center
    return FoliumSubstrate(Coordinate(lat, lng), view.default_zoom, tiles=cfg.tiles)


# ------------------- Backend gateways ---------------------------


def register_gateway(kind: str):
    def deco(fn: GatewayFactory):
        _gateway_registry[kind] = fn
        return fn

    return deco


def make_gateway(cfg: BackendUnion, **deps) -> BackendGateway:
    try:
        factory = _gateway_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown backend kind {cfg.kind!r}")
    return factory(cfg, deps)


@register_gateway("http")
def _make_http(cfg: BackendHttpModel, deps):
    # deps["transport"] lets tests swap the network for httpx.MockTransport
    return HttpBackendGateway(
        cfg.base_url, timeout_s=cfg.timeout_s, transport=deps.get("transport")
    )
