from typing import Protocol, runtime_checkable

from flightpath.domain.entities.motion import TrajectoryState
from flightpath.domain.entities.vector import Vec2


# ------------- Flight paths --------------------
@runtime_checkable
class FlightPath(Protocol):
    """
    Responsibilities:
    • Report the total duration t_max of the maneuver.
    • Evaluate exact position / velocity at any t >= 0 (held at the terminal state past t_max).
    • Offer a cached, evenly spaced sample grid and interpolated lookups on it.
    Units: consistent length unit for positions; seconds for times.
    """

    def max_duration(self) -> float: ...
    def position(self, t: float) -> Vec2: ...
    def velocity(self, t: float) -> Vec2: ...
    def sampled_points(self) -> list[TrajectoryState]:
        """Return resolution + 1 evenly spaced states over [0, t_max] (one state if t_max == 0)."""

    def state_at(self, t: float) -> TrajectoryState:
        """Linearly interpolate the sample grid; t must lie in [0, t_max]."""


@runtime_checkable
class PathLogger(Protocol):
    def path_built(self, kind: str, path: FlightPath, **extra): ...
    def path_error(self, kind: str, *, exc: BaseException, **extra): ...
    def sample(self, state: TrajectoryState, **extra): ...
