# flightpath/app/experiments.py
from collections.abc import Callable
from dataclasses import dataclass, field

from flightpath.app.protocols import FlightPath
from flightpath.config.models import PlannerModel
from flightpath.domain.entities.vector import Vec2
from flightpath.domain.flight.flight_directed import DirectedInitialVFlightPath
from flightpath.domain.flight.flight_initial_v import InitialVFlightPath


@dataclass
class ExperimentState:
    """What the UI knows when it asks for a path; ``move`` updates it in place."""

    p_start: Vec2
    p_end: Vec2
    click_pos: Vec2
    last_vel: Vec2 = field(default_factory=Vec2.zero)


Experiment = Callable[[ExperimentState, PlannerModel, float], FlightPath]

_experiments: dict[str, Experiment] = {}

DEFAULT_EXPERIMENT = "basic"


def register_experiment(name: str):
    def deco(fn: Experiment):
        _experiments[name] = fn
        return fn

    return deco


def run_experiment(
    name: str, state: ExperimentState, planner: PlannerModel, *, time_fraction: float = 0.0
) -> FlightPath:
    fn = _experiments.get(name, _experiments[DEFAULT_EXPERIMENT])
    return fn(state, planner, time_fraction)


@register_experiment("basic")
def experiment_basic(state: ExperimentState, planner: PlannerModel, _frac: float = 0.0):
    # only the x offset of the click counts, as a speed along start -> end
    initial_v = state.click_pos.sub(state.p_start).x / planner.vel_scale
    return DirectedInitialVFlightPath(
        state.p_start, state.p_end, planner.a_max, initial_v, resolution=planner.resolution
    )


@register_experiment("better")
def experiment_better(state: ExperimentState, planner: PlannerModel, _frac: float = 0.0):
    v0 = state.click_pos.sub(state.p_start).div(planner.vel_scale)
    return InitialVFlightPath(
        state.p_start, state.p_end, planner.a_max, v0, resolution=planner.resolution
    )


@register_experiment("move")
def experiment_move(state: ExperimentState, planner: PlannerModel, time_fraction: float = 0.0):
    """Retarget mid-flight: continue from the current state toward the click."""
    if not state.click_pos.equals(state.p_end):
        cur = InitialVFlightPath(state.p_start, state.p_end, planner.a_max, state.last_vel)
        t = time_fraction * cur.max_duration()
        state.p_start = cur.position(t)
        state.last_vel = cur.velocity(t)
        state.p_end = state.click_pos
    return InitialVFlightPath(
        state.p_start, state.p_end, planner.a_max, state.last_vel, resolution=planner.resolution
    )


def acceleration_at(path: FlightPath, t: float, dt: float = 0.01) -> Vec2:
    """Finite-difference acceleration from the interpolated view."""
    state = path.state_at(t)
    nxt = path.state_at(min(t + dt, path.max_duration()))
    if nxt.time == state.time:
        return Vec2.ZERO
    return nxt.velocity.sub(state.velocity).div(nxt.time - state.time)
