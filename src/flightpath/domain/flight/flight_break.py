from flightpath.domain.entities.vector import Vec2
from flightpath.domain.flight.flight_base import (
    DEFAULT_RESOLUTION,
    BaseFlightPath,
    check_a_max,
    check_vec,
)


class BreakFlightPath(BaseFlightPath):
    """Brakes a moving body to rest at constant deceleration a_max."""

    def __init__(
        self, p_start: Vec2, a_max: float, initial_v: Vec2, *, resolution: int = DEFAULT_RESOLUTION
    ):
        super().__init__(resolution=resolution)
        self.p_start = check_vec(p_start, "p_start")
        initial_v = check_vec(initial_v, "initial_v")
        self.a_max = check_a_max(a_max)

        self._time_to_break = initial_v.length() / self.a_max
        self._dist_to_break = 0.5 * self.a_max * self._time_to_break**2
        self._norm = initial_v.norm_or_zero()
        self._p_end = self.p_start.add(self._norm.mul(self._dist_to_break))
        self._t_max = self._time_to_break

    def _position_at(self, t: float) -> Vec2:
        remaining = self._time_to_break - t
        return self._p_end.sub(self._norm.mul(0.5 * self.a_max * remaining * remaining))

    def _velocity_at(self, t: float) -> Vec2:
        return self._norm.mul(self.a_max * (self._time_to_break - t))

    @property
    def end_position(self) -> Vec2:
        return self._p_end

    @property
    def time_to_break(self) -> float:
        return self._time_to_break

    @property
    def distance_to_break(self) -> float:
        return self._dist_to_break
