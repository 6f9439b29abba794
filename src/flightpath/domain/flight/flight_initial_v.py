import math

from flightpath.app.protocols import FlightPath
from flightpath.domain.entities.vector import Vec2
from flightpath.domain.flight.flight_base import (
    DEFAULT_RESOLUTION,
    BaseFlightPath,
    check_a_max,
    check_vec,
)
from flightpath.domain.flight.flight_break import BreakFlightPath
from flightpath.domain.flight.flight_combine import combine_paths
from flightpath.domain.flight.flight_directed import DirectedInitialVFlightPath
from flightpath.domain.flight.flight_line import LineFlightPath


def alignment_time(
    p_end: Vec2,
    pos_after_cancel: Vec2,
    v_par_len: float,
    u: Vec2,
    u_perp: Vec2,
    a_max: float,
) -> float | None:
    """
    Duration of the alignment burn, or None if it cannot be aligned.

    Works in the (u, u_perp) basis with origin at ``pos_after_cancel``. Burning
    at a_max along -u_perp while drifting at ``v_par_len`` along u, the
    velocity points at ``p_end`` when

        1/2 a p s^2 - a dx s - p dy = 0

    with p = v_par_len and (dx, dy) the offset to p_end. The smaller root is
    taken; a negative root or a negative axial advance is rejected.
    """
    if v_par_len == 0:
        return None

    def change_base(v: Vec2) -> Vec2:
        return Vec2(v.dot(u), v.dot(u_perp))

    start = change_base(pos_after_cancel)
    delta = change_base(p_end).sub(start)

    inner = (a_max * delta.x) ** 2 + 2 * a_max * v_par_len * v_par_len * delta.y
    if inner < 0:
        return None

    q = (-a_max * delta.x + math.sqrt(inner)) / (-a_max * v_par_len)
    x = v_par_len * q
    return None if (q < 0 or x < 0) else q


class _DriftingBreakPath(BaseFlightPath):
    """Brakes the perpendicular velocity while the axial velocity keeps drifting."""

    def __init__(self, brake: BreakFlightPath, v_par: Vec2):
        super().__init__()
        self.brake, self.v_par = brake, v_par
        self._t_max = brake.max_duration()

    def _position_at(self, t: float) -> Vec2:
        return self.brake.position(t).add(self.v_par.mul(t))

    def _velocity_at(self, t: float) -> Vec2:
        return self.brake.velocity(t).add(self.v_par)


class _AlignPath(BaseFlightPath):
    """Constant burn along -u_perp on top of the axial drift."""

    def __init__(self, p_start: Vec2, v_par: Vec2, u_perp: Vec2, a_max: float, duration: float):
        super().__init__()
        self.p_start, self.v_par, self.u_perp, self.a_max = p_start, v_par, u_perp, a_max
        self._t_max = duration

    def _position_at(self, t: float) -> Vec2:
        return (
            self.p_start.add(self.v_par.mul(t)).sub(self.u_perp.mul(0.5 * self.a_max * t * t))
        )

    def _velocity_at(self, t: float) -> Vec2:
        return self.v_par.sub(self.u_perp.mul(self.a_max * t))


class _HoldAtStart(BaseFlightPath):
    """Brake in place; once stopped, report the original start position."""

    def __init__(self, brake: BreakFlightPath, p_start: Vec2):
        super().__init__()
        self.brake, self.p_start = brake, p_start
        self._t_max = brake.max_duration()

    def _position_at(self, t: float) -> Vec2:
        return self.p_start if t >= self._t_max else self.brake.position(t)

    def _velocity_at(self, t: float) -> Vec2:
        return self.brake.velocity(t)


class InitialVFlightPath(BaseFlightPath):
    """
    Start with an arbitrary velocity vector and arrive at rest at p_end.

    The velocity is split into an axial part (along start -> end) and a
    perpendicular part. Phases:
      1. cancel the perpendicular part at a_max (axial drift continues),
      2. burn sideways until the velocity points at p_end (alignment),
      3. hand off to a DirectedInitialVFlightPath with the resulting speed.
    If no alignment exists, brake fully and fly a line from the stop point.
    """

    def __init__(
        self,
        p_start: Vec2,
        p_end: Vec2,
        a_max: float,
        v0: Vec2,
        *,
        resolution: int = DEFAULT_RESOLUTION,
    ):
        super().__init__(resolution=resolution)
        self.p_start = check_vec(p_start, "p_start")
        self.p_end = check_vec(p_end, "p_end")
        self.a_max = check_a_max(a_max)
        self.v0 = check_vec(v0, "v0")

        self._impl: FlightPath
        self.alignment_time: float | None = None

        dd = self.p_end.sub(self.p_start)
        if dd.length() == 0:
            self._impl = _HoldAtStart(BreakFlightPath(self.p_start, self.a_max, self.v0), self.p_start)
            self._t_max = self._impl.max_duration()
            self.branch = "in_place"
            return

        direction = dd.div(dd.length())

        v_par_len = self.v0.dot(direction)
        v_par = direction.mul(v_par_len)
        v_perp = self.v0.sub(v_par)
        v_perp_len = v_perp.length()

        if v_perp_len == 0:
            self._impl = DirectedInitialVFlightPath(self.p_start, self.p_end, self.a_max, v_par_len)
            self._t_max = self._impl.max_duration()
            self.branch = "axial"
            return

        u_perp = v_perp.div(v_perp_len)

        cancel = BreakFlightPath(self.p_start, self.a_max, v_perp)
        cancel_phase = _DriftingBreakPath(cancel, v_par)
        pos_after_cancel = cancel_phase.position(cancel_phase.max_duration())

        t_align = alignment_time(
            self.p_end, pos_after_cancel, v_par_len, direction, u_perp, self.a_max
        )

        if t_align is None:
            full_break = BreakFlightPath(self.p_start, self.a_max, self.v0)
            final_path = LineFlightPath(full_break.end_position, self.p_end, self.a_max)
            self._impl = combine_paths(full_break, final_path)
            self._t_max = self._impl.max_duration()
            self.branch = "fallback"
            return

        align_phase = _AlignPath(pos_after_cancel, v_par, u_perp, self.a_max, t_align)
        pos_after_align = align_phase.position(t_align)
        vel_after_align = align_phase.velocity(t_align)

        speed = vel_after_align.length()
        if vel_after_align.dot(self.p_end.sub(pos_after_align)) < 0:
            speed = -speed

        final_path = DirectedInitialVFlightPath(pos_after_align, self.p_end, self.a_max, speed)
        self._impl = combine_paths(combine_paths(cancel_phase, align_phase), final_path)
        self._t_max = self._impl.max_duration()
        self.alignment_time = t_align
        self.branch = "aligned"

    def _position_at(self, t: float) -> Vec2:
        return self._impl.position(t)

    def _velocity_at(self, t: float) -> Vec2:
        return self._impl.velocity(t)
