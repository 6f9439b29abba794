import numpy as np
import pytest

from flightpath.app.protocols import FlightPath
from flightpath.domain.entities.vector import Vec2
from flightpath.domain.errors import InvalidInputError, OutOfDomainError
from flightpath.domain.flight.flight_break import BreakFlightPath
from flightpath.domain.flight.flight_combine import CombinedFlightPath, combine_paths
from flightpath.domain.flight.flight_line import LineFlightPath

A_MAX = 10.0


@pytest.fixture
def brake_then_line() -> CombinedFlightPath:
    brake = BreakFlightPath(Vec2(0, 0), A_MAX, Vec2(-10, 0))  # stops at (-5, 0)
    line = LineFlightPath(brake.end_position, Vec2(100, 0), A_MAX)
    return combine_paths(brake, line)


# ---------- composition


def test_combined_duration_is_sum(brake_then_line: CombinedFlightPath):
    p = brake_then_line
    assert abs(p.max_duration() - (p.first.max_duration() + p.second.max_duration())) < 1e-12


def test_combined_delegates_on_each_side_of_seam(brake_then_line: CombinedFlightPath):
    p = brake_then_line
    seam = p.first.max_duration()
    assert p.position(seam) == p.first.position(seam)
    later = seam + 1.0
    assert p.position(later) == p.second.position(1.0)
    assert p.velocity(later) == p.second.velocity(1.0)


def test_combined_is_continuous_and_ends_at_rest(brake_then_line: CombinedFlightPath):
    p = brake_then_line
    seam = p.first.max_duration()
    eps = 1e-9
    assert p.position(seam - eps).sub(p.position(seam + eps)).length() < 1e-6
    assert p.velocity(seam + eps).length() < 1e-6
    end = p.position(p.max_duration())
    assert abs(end.x - 100) < 1e-9 and abs(end.y) < 1e-9
    assert p.velocity(p.max_duration()).length() < 1e-9


def test_combine_rejects_non_paths():
    line = LineFlightPath(Vec2(0, 0), Vec2(1, 0), A_MAX)
    with pytest.raises(InvalidInputError):
        combine_paths(line, "not a path")
    with pytest.raises(InvalidInputError):
        combine_paths(line, line).position(-1)


def test_paths_satisfy_protocol(brake_then_line: CombinedFlightPath):
    assert isinstance(brake_then_line, FlightPath)
    assert isinstance(brake_then_line.first, FlightPath)


# ---------- sampling cache


def test_sampled_points_are_evenly_spaced_and_memoized():
    line = LineFlightPath(Vec2(0, 0), Vec2(100, 0), A_MAX)
    pts = line.sampled_points()
    assert len(pts) == 51
    times = np.array([p.time for p in pts])
    assert np.allclose(np.diff(times), line.max_duration() / 50)
    assert pts[0].time == 0 and pts[-1].time == line.max_duration()
    assert pts[-1].position == Vec2(100, 0)
    assert line.sampled_points() is pts


def test_custom_resolution():
    line = LineFlightPath(Vec2(0, 0), Vec2(10, 0), A_MAX, resolution=4)
    assert len(line.sampled_points()) == 5
    with pytest.raises(InvalidInputError):
        LineFlightPath(Vec2(0, 0), Vec2(10, 0), A_MAX, resolution=0)


def test_zero_duration_path_has_single_point_cache():
    line = LineFlightPath(Vec2(1, 1), Vec2(1, 1), A_MAX)
    pts = line.sampled_points()
    assert len(pts) == 1
    s = line.state_at(0)
    assert s.position == Vec2(1, 1) and s.velocity == Vec2.ZERO and s.time == 0


def test_state_at_interpolates_between_grid_points():
    line = LineFlightPath(Vec2(0, 0), Vec2(100, 0), A_MAX, resolution=10)
    pts = line.sampled_points()
    a, b = pts[3], pts[4]
    t = 0.25 * a.time + 0.75 * b.time
    s = line.state_at(t)
    assert s.time == t
    assert abs(s.position.x - (0.25 * a.position.x + 0.75 * b.position.x)) < 1e-9
    assert abs(s.velocity.x - (0.25 * a.velocity.x + 0.75 * b.velocity.x)) < 1e-9
    # on a grid point the interpolation is exact
    g = line.state_at(pts[6].time)
    assert abs(g.position.x - pts[6].position.x) < 1e-9


def test_state_at_close_to_exact_with_default_resolution():
    line = LineFlightPath(Vec2(0, 0), Vec2(100, 0), A_MAX)
    t = 0.37 * line.max_duration()
    s = line.state_at(t)
    assert abs(s.position.x - line.position(t).x) < 0.5
    assert abs(s.velocity.x - line.velocity(t).x) < 1e-9  # velocity is piecewise linear


def test_state_at_bounds():
    line = LineFlightPath(Vec2(0, 0), Vec2(100, 0), A_MAX)
    end = line.state_at(line.max_duration())
    assert end.position == Vec2(100, 0)
    with pytest.raises(OutOfDomainError):
        line.state_at(line.max_duration() + 1e-6)
    with pytest.raises(OutOfDomainError):
        line.state_at(-0.5)
    # raw evaluation clamps instead
    assert line.position(line.max_duration() + 1.0) == Vec2(100, 0)
