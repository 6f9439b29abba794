from flightpath.app.protocols import FlightPath
from flightpath.domain.entities.vector import Vec2
from flightpath.domain.errors import InvalidInputError
from flightpath.domain.flight.flight_base import DEFAULT_RESOLUTION, BaseFlightPath


class CombinedFlightPath(BaseFlightPath):
    """
    Two paths played back to back. The seam is not smoothed: first's terminal
    state must already equal second's initial state.
    """

    def __init__(self, first: FlightPath, second: FlightPath, *, resolution: int = DEFAULT_RESOLUTION):
        super().__init__(resolution=resolution)
        if not isinstance(first, FlightPath):
            raise InvalidInputError("path1 must be FlightPath")
        if not isinstance(second, FlightPath):
            raise InvalidInputError("path2 must be FlightPath")
        self.first, self.second = first, second
        self._split = first.max_duration()
        self._t_max = self._split + second.max_duration()

    def _position_at(self, t: float) -> Vec2:
        if t <= self._split:
            return self.first.position(t)
        return self.second.position(t - self._split)

    def _velocity_at(self, t: float) -> Vec2:
        if t <= self._split:
            return self.first.velocity(t)
        return self.second.velocity(t - self._split)


def combine_paths(
    path1: FlightPath, path2: FlightPath, *, resolution: int = DEFAULT_RESOLUTION
) -> CombinedFlightPath:
    return CombinedFlightPath(path1, path2, resolution=resolution)
