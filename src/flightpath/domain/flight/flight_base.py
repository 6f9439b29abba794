from __future__ import annotations

import math

import numpy as np

from flightpath.app.protocols import FlightPath
from flightpath.domain.entities.motion import TrajectoryState
from flightpath.domain.entities.vector import Vec2, _is_number
from flightpath.domain.errors import InvalidInputError, OutOfDomainError

DEFAULT_RESOLUTION = 50


# ---- argument checks shared by the path constructors


def check_vec(v, name: str) -> Vec2:
    if not isinstance(v, Vec2):
        raise InvalidInputError(f"{name} must be Vec2")
    return v


def check_scalar(s, name: str) -> float:
    if not _is_number(s) or not math.isfinite(s):
        raise InvalidInputError(f"{name} must be a finite number")
    return float(s)


def check_a_max(a_max) -> float:
    if not _is_number(a_max) or not math.isfinite(a_max) or a_max <= 0:
        raise InvalidInputError("a_max must be positive number")
    return float(a_max)


def check_time(t) -> float:
    if not _is_number(t) or math.isnan(t):
        raise InvalidInputError("Time must be a number")
    if t < 0:
        raise InvalidInputError("Time cannot be negative")
    return float(t)


class BaseFlightPath(FlightPath):
    """
    Shared behavior of every flight path: duration, time-domain checks and the
    sampling cache.

    Subclasses set ``self._t_max`` in their constructor and implement
    ``_position_at`` / ``_velocity_at`` for t in [0, t_max]. Queries past t_max
    are clamped to the terminal state before reaching the subclass.
    """

    def __init__(self, *, resolution: int = DEFAULT_RESOLUTION):
        if isinstance(resolution, bool) or not isinstance(resolution, int) or resolution < 1:
            raise InvalidInputError("resolution must be a positive integer")
        self._t_max = 0.0
        self._resolution = resolution
        # lazily built once; paths never change after construction
        self._points: list[TrajectoryState] | None = None
        self._times: np.ndarray | None = None
        self._grid: np.ndarray | None = None

    def _position_at(self, t: float) -> Vec2:
        raise NotImplementedError

    def _velocity_at(self, t: float) -> Vec2:
        raise NotImplementedError

    # --------------- query surface --------------------------

    def max_duration(self) -> float:
        return self._t_max

    @property
    def resolution(self) -> int:
        return self._resolution

    def position(self, t: float) -> Vec2:
        return self._position_at(min(check_time(t), self._t_max))

    def velocity(self, t: float) -> Vec2:
        return self._velocity_at(min(check_time(t), self._t_max))

    def sampled_points(self) -> list[TrajectoryState]:
        if self._points is None:
            self._build_cache()
        return self._points

    def state_at(self, t: float) -> TrajectoryState:
        if not _is_number(t) or not (0 <= t <= self._t_max):
            raise OutOfDomainError(f"Time {t} is outside valid range [0, {self._t_max}]")

        points = self.sampled_points()
        if len(points) == 1:
            return points[0]

        times, grid = self._times, self._grid
        i = int(np.searchsorted(times, t, side="right")) - 1
        if i >= len(points) - 1:
            return points[-1]

        alpha = (t - times[i]) / (times[i + 1] - times[i])
        row = grid[i] + (grid[i + 1] - grid[i]) * alpha
        return TrajectoryState(
            position=Vec2(float(row[0]), float(row[1])),
            velocity=Vec2(float(row[2]), float(row[3])),
            time=float(t),
        )

    # --------------- cache ----------------------------------

    def _build_cache(self) -> None:
        if self._t_max == 0:
            times = np.zeros(1)
        else:
            times = np.linspace(0.0, self._t_max, self._resolution + 1)

        points = []
        for t in times:
            t = float(t)
            points.append(
                TrajectoryState(position=self.position(t), velocity=self.velocity(t), time=t)
            )
        self._times = times
        self._grid = np.array(
            [[p.position.x, p.position.y, p.velocity.x, p.velocity.y] for p in points]
        )
        self._points = points

    def __repr__(self) -> str:
        return f"{type(self).__name__}(t_max={self._t_max:.6g})"
