import math

from flightpath.domain.entities.vector import Vec2
from flightpath.domain.flight.flight_base import (
    DEFAULT_RESOLUTION,
    BaseFlightPath,
    check_a_max,
    check_vec,
)


class LineFlightPath(BaseFlightPath):
    """
    Rest-to-rest straight line: full acceleration for the first half of t_max,
    full deceleration for the second half.
    """

    def __init__(
        self, p_start: Vec2, p_end: Vec2, a_max: float, *, resolution: int = DEFAULT_RESOLUTION
    ):
        super().__init__(resolution=resolution)
        self.p_start = check_vec(p_start, "p_start")
        self.p_end = check_vec(p_end, "p_end")
        self.a_max = check_a_max(a_max)

        dd = self.p_end.sub(self.p_start)
        self._distance = dd.length()
        if self._distance == 0:
            self._direction = Vec2.ZERO
            self._t_max = 0.0
        else:
            self._direction = dd.div(self._distance)
            self._t_max = 2 * math.sqrt(self._distance / self.a_max)

    def _position_at(self, t: float) -> Vec2:
        if self._distance == 0:
            return self.p_start
        if t == self._t_max:
            return self.p_end
        if t <= self._t_max / 2:
            return self.p_start.add(self._direction.mul(0.5 * self.a_max * t * t))
        t_decel = self._t_max - t
        return self.p_end.sub(self._direction.mul(0.5 * self.a_max * t_decel * t_decel))

    def _velocity_at(self, t: float) -> Vec2:
        if self._distance == 0:
            return Vec2.ZERO
        if t <= self._t_max / 2:
            return self._direction.mul(self.a_max * t)
        return self._direction.mul(self.a_max * (self._t_max - t))

    @property
    def distance(self) -> float:
        return self._distance

    @property
    def direction(self) -> Vec2:
        return self._direction
