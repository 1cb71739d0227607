from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False
    sample_every: int = Field(default=1, ge=1)


# ----------------- SEARCH ALGORITHMS ---------------------


class BfsSearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["bfs"] = "bfs"


class DijkstraSearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["dijkstra"] = "dijkstra"


class AStarSearchModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["astar"] = "astar"


SearchUnion = Annotated[
    BfsSearchModel | DijkstraSearchModel | AStarSearchModel,
    Field(discriminator="kind"),
]

# ----------------- SYNTHETIC GRAPHS ---------------------


class GridGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["grid"] = "grid"
    rows: int = Field(default=10, ge=1)
    cols: int = Field(default=10, ge=1)
    origin: tuple[float, float] = (32.86, -117.22)  # (lat, lon)
    spacing_deg: float = Field(default=0.001, gt=0)
    detour: float = Field(default=1.0, ge=1.0)  # >= 1 keeps A* admissible
    road_type: str = "residential"
    bidirectional: bool = True


class RandomGraphModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["random"] = "random"
    nodes: int = Field(default=50, ge=1)
    bbox: tuple[float, float, float, float] = (32.85, -117.24, 32.88, -117.20)
    degree: int = Field(default=3, ge=1)
    detour: tuple[float, float] = (1.0, 1.5)
    seed: int = 123

    @field_validator("bbox")
    @classmethod
    def _check_bbox(cls, v: tuple[float, float, float, float]):
        lat0, lon0, lat1, lon1 = v
        if not (lat0 < lat1 and lon0 < lon1):
            raise ValueError("bbox must be (lat0, lon0, lat1, lon1) with lat0 < lat1 and lon0 < lon1")
        return v

    @field_validator("detour")
    def _detour_range(cls, v: tuple[float, float], info: ValidationInfo):
        lo, hi = v
        if not 1.0 <= lo <= hi:
            raise ValueError(f"{info.field_name} must satisfy 1 <= lo <= hi, got {v}")
        return v


GraphUnion = Annotated[GridGraphModel | RandomGraphModel, Field(discriminator="kind")]


# ------------------------------------------------------------------


class RouterModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    search: SearchUnion = Field(default_factory=DijkstraSearchModel)

    @model_validator(mode="after")
    def _debug_implies_debug_level(self):
        # node_searched events are emitted at DEBUG; keep them visible
        if self.log.debug and self.log.level != "DEBUG":
            self.log = self.log.model_copy(update={"level": "DEBUG"})
        return self
