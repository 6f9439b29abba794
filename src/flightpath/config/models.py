from math import isfinite
from typing import Annotated, Literal

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, ValidationInfo, field_validator


def _finite_pair(v: tuple[float, float]) -> tuple[float, float]:
    if not all(isfinite(c) for c in v):
        raise ValueError("coordinates must be finite")
    return v


Pair = Annotated[tuple[float, float], AfterValidator(_finite_pair)]


class LogModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    debug: bool = False


class PlannerModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    a_max: float = 10.0
    resolution: int = 50  # sampling cache intervals
    vel_scale: float = 1.0  # screen offset -> velocity divisor

    @field_validator("a_max", "vel_scale")
    @classmethod
    def _positive(cls, v: float, info: ValidationInfo) -> float:
        if not isfinite(v) or v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @field_validator("resolution")
    @classmethod
    def _at_least_one(cls, v: int) -> int:
        if v < 1:
            raise ValueError("resolution must be >= 1")
        return v


# ----------------- PATHS ---------------------


class LinePathModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["line"] = "line"
    start: Pair = (0.0, 0.0)
    end: Pair


class BreakPathModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["break"] = "break"
    start: Pair = (0.0, 0.0)
    velocity: Pair


class DirectedPathModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["directed"] = "directed"
    start: Pair = (0.0, 0.0)
    end: Pair
    initial_v: float = 0.0  # signed, along start -> end

    @field_validator("initial_v")
    @classmethod
    def _finite(cls, v: float) -> float:
        if not isfinite(v):
            raise ValueError("initial_v must be finite")
        return v


class InitialVPathModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    kind: Literal["initial_v"] = "initial_v"
    start: Pair = (0.0, 0.0)
    end: Pair
    velocity: Pair = (0.0, 0.0)


PathUnion = Annotated[
    LinePathModel | BreakPathModel | DirectedPathModel | InitialVPathModel,
    Field(discriminator="kind"),
]


# ------------------------------------------------------------------


class ScenarioModel(BaseModel):
    model_config = ConfigDict(extra="forbid")
    name: str
    run_id: str = "local"
    log: LogModel = LogModel()
    planner: PlannerModel = PlannerModel()
    path: PathUnion
