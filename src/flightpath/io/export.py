# io/export.py
import json
import sys

from flightpath.app.protocols import FlightPath
from flightpath.domain.entities.motion import TrajectoryData, TrajectoryMetadata
from flightpath.domain.entities.vector import Vec2


def trajectory_data(
    path: FlightPath,
    *,
    start: Vec2,
    end: Vec2,
    a_max: float,
    method: str,
) -> TrajectoryData:
    """Bundle a path's cached sample grid with the inputs it was planned from."""
    meta = TrajectoryMetadata(
        start_position=start,
        end_position=end,
        max_acceleration=a_max,
        total_time=path.max_duration(),
        method=method,
    )
    return TrajectoryData(metadata=meta, points=list(path.sampled_points()))


def write_json(data: TrajectoryData, fp=sys.stdout, *, indent: int | None = 2) -> None:
    fp.write(json.dumps(data.to_dict(), indent=indent) + "\n")
