from flightpath.app.protocols import FlightPath
from flightpath.domain.entities.vector import Vec2
from flightpath.domain.flight.flight_base import (
    DEFAULT_RESOLUTION,
    BaseFlightPath,
    check_a_max,
    check_scalar,
    check_vec,
)
from flightpath.domain.flight.flight_break import BreakFlightPath
from flightpath.domain.flight.flight_combine import combine_paths
from flightpath.domain.flight.flight_line import LineFlightPath


class DirectedInitialVFlightPath(BaseFlightPath):
    """
    Start with a signed speed along the start -> end axis and arrive at rest.

    Negative speed, or more speed than can be shed before reaching the end,
    means braking first and then flying a fresh line from the stop point.
    Otherwise the trip is the tail of a longer rest-to-rest line whose
    (fictive) start lies behind p_start: that line reaches ``initial_v`` exactly
    at p_start, so we play it back from that instant on.
    """

    def __init__(
        self,
        p_start: Vec2,
        p_end: Vec2,
        a_max: float,
        initial_v: float,
        *,
        resolution: int = DEFAULT_RESOLUTION,
    ):
        super().__init__(resolution=resolution)
        self.p_start = check_vec(p_start, "p_start")
        self.p_end = check_vec(p_end, "p_end")
        self.a_max = check_a_max(a_max)
        self.initial_v = check_scalar(initial_v, "initial_v")

        self._impl: FlightPath
        self._offset = 0.0  # time origin shift into _impl

        dd = self.p_end.sub(self.p_start)
        distance = dd.length()

        if distance == 0:
            # brake in place along the x axis
            self._impl = BreakFlightPath(self.p_start, self.a_max, Vec2(self.initial_v, 0.0))
            self._t_max = self._impl.max_duration()
            self.branch = "in_place"
            return

        direction = dd.div(distance)
        break_path = BreakFlightPath(self.p_start, self.a_max, direction.mul(self.initial_v))

        if self.initial_v < 0 or break_path.distance_to_break > distance:
            final_path = LineFlightPath(break_path.end_position, self.p_end, self.a_max)
            self._impl = combine_paths(break_path, final_path)
            self._t_max = self._impl.max_duration()
            self.branch = "brake_then_line"
        else:
            fictive_start = self.p_start.sub(direction.mul(break_path.distance_to_break))
            line = LineFlightPath(fictive_start, self.p_end, self.a_max)
            self._impl = line
            self._offset = break_path.time_to_break
            self._t_max = max(0.0, line.max_duration() - self._offset)
            self.branch = "line_suffix"

    def _position_at(self, t: float) -> Vec2:
        return self._impl.position(t + self._offset)

    def _velocity_at(self, t: float) -> Vec2:
        return self._impl.velocity(t + self._offset)
