# runtime/registries.py
from collections.abc import Callable

from flightpath.app.protocols import FlightPath
from flightpath.config.models import (
    BreakPathModel,
    DirectedPathModel,
    InitialVPathModel,
    LinePathModel,
    PathUnion,
)
from flightpath.domain.entities.vector import Vec2
from flightpath.domain.flight.flight_break import BreakFlightPath
from flightpath.domain.flight.flight_directed import DirectedInitialVFlightPath
from flightpath.domain.flight.flight_initial_v import InitialVFlightPath
from flightpath.domain.flight.flight_line import LineFlightPath

PathFactory = Callable[[PathUnion, dict], FlightPath]

_path_registry: dict[str, PathFactory] = {}


def register_path(kind: str):
    def deco(fn: PathFactory):
        _path_registry[kind] = fn
        return fn

    return deco


def make_path(cfg: PathUnion, *, a_max: float, resolution: int = 50) -> FlightPath:
    try:
        factory = _path_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown path kind {cfg.kind!r}")
    return factory(cfg, {"a_max": a_max, "resolution": resolution})


def path_kinds() -> list[str]:
    return sorted(_path_registry)


@register_path("line")
def _make_line(cfg: LinePathModel, deps):
    return LineFlightPath(
        Vec2.from_pair(cfg.start),
        Vec2.from_pair(cfg.end),
        deps["a_max"],
        resolution=deps["resolution"],
    )


@register_path("break")
def _make_break(cfg: BreakPathModel, deps):
    return BreakFlightPath(
        Vec2.from_pair(cfg.start),
        deps["a_max"],
        Vec2.from_pair(cfg.velocity),
        resolution=deps["resolution"],
    )


@register_path("directed")
def _make_directed(cfg: DirectedPathModel, deps):
    return DirectedInitialVFlightPath(
        Vec2.from_pair(cfg.start),
        Vec2.from_pair(cfg.end),
        deps["a_max"],
        cfg.initial_v,
        resolution=deps["resolution"],
    )


@register_path("initial_v")
def _make_initial_v(cfg: InitialVPathModel, deps):
    return InitialVFlightPath(
        Vec2.from_pair(cfg.start),
        Vec2.from_pair(cfg.end),
        deps["a_max"],
        Vec2.from_pair(cfg.velocity),
        resolution=deps["resolution"],
    )
