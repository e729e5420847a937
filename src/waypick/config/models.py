from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = 1


# ----------------- BACKEND ---------------------


class BackendHttpModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["http"] = "http"
    base_url: str = "http://localhost:5000"
    timeout_s: float = 10.0

    @field_validator("timeout_s")
    @classmethod
    def _positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("timeout_s must be > 0")
        return v

    @field_validator("base_url")
    @classmethod
    def _scheme(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


BackendUnion = BackendHttpModel  # single kind for now


# ----------------- MAP ---------------------


class LineStyleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    color: str
    weight: float = 1.0
    opacity: float = 1.0


class StyleModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    default_color: str = "blue"
    departure_color: str = "green"
    arrival_color: str = "red"
    edge: LineStyleModel = LineStyleModel(color="gray", weight=1.0, opacity=0.6)
    path: LineStyleModel = LineStyleModel(color="#ff6600", weight=4.0, opacity=0.9)


class MapModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    default_center: tuple[float, float] = (51.505, -0.09)  # lat, lng
    default_zoom: int = 13
    style: StyleModel = StyleModel()

    @field_validator("default_center")
    @classmethod
    def _in_range(cls, v: tuple[float, float]) -> tuple[float, float]:
        lat, lng = v
        if not (-90.0 <= lat <= 90.0 and -180.0 <= lng <= 180.0):
            raise ValueError(f"default_center out of range: {v}")
        return v

    @field_validator("default_zoom")
    @classmethod
    def _zoom(cls, v: int) -> int:
        if not 0 <= v <= 22:
            raise ValueError("default_zoom must be within 0..22")
        return v


# ----------------- SUBSTRATES ---------------------


class SubstrateRecordingModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["recording"] = "recording"


class SubstrateFoliumModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["folium"] = "folium"
    tiles: str = "OpenStreetMap"
    output: str | None = None  # html file written by FoliumSubstrate.save()


SubstrateUnion = Annotated[
    SubstrateRecordingModel | SubstrateFoliumModel, Field(discriminator="kind")
]


# ------------------------------------------------------------------


class SessionModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str = "waypick"
    run_id: str = "local"
    epoch: tuple[int, int, int, int, int, int] | None = None  # None -> wall clock "now"
    log: LogModel = LogModel()
    backend: BackendUnion = Field(default_factory=BackendHttpModel)
    map: MapModel = MapModel()
    substrate: SubstrateUnion = Field(default_factory=SubstrateRecordingModel)
