from dataclasses import dataclass, field

from flightpath.domain.entities.vector import Vec2


@dataclass(frozen=True)
class TrajectoryState:
    position: Vec2
    velocity: Vec2
    time: float  # seconds since the path's time origin

    def to_dict(self) -> dict:
        return {
            "position": self.position.to_dict(),
            "velocity": self.velocity.to_dict(),
            "time": self.time,
        }


@dataclass(frozen=True)
class TrajectoryMetadata:
    start_position: Vec2
    end_position: Vec2
    max_acceleration: float
    total_time: float
    method: str

    def to_dict(self) -> dict:
        return {
            "startPosition": self.start_position.to_dict(),
            "endPosition": self.end_position.to_dict(),
            "maxAcceleration": self.max_acceleration,
            "totalTime": self.total_time,
            "method": self.method,
        }


@dataclass
class TrajectoryData:
    metadata: TrajectoryMetadata
    points: list[TrajectoryState] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "metadata": self.metadata.to_dict(),
            "points": [p.to_dict() for p in self.points],
        }
