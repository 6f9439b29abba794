# flightpath/app/build.py
from collections.abc import Mapping
from dataclasses import dataclass

from flightpath.app.protocols import FlightPath, PathLogger
from flightpath.config.models import ScenarioModel
from flightpath.domain.entities.motion import TrajectoryData
from flightpath.domain.entities.vector import Vec2
from flightpath.io.export import trajectory_data
from flightpath.io.path_logging import NoopPathLogging, PathLogging
from flightpath.runtime.registries import make_path


@dataclass
class App:
    scenario: ScenarioModel
    path: FlightPath
    log: PathLogger

    def export(self) -> TrajectoryData:
        cfg = self.scenario.path
        start = Vec2.from_pair(cfg.start)
        # a braking path has no target; it ends where it stops
        end = Vec2.from_pair(cfg.end) if hasattr(cfg, "end") else self.path.position(
            self.path.max_duration()
        )
        return trajectory_data(
            self.path, start=start, end=end, a_max=self.scenario.planner.a_max, method=cfg.kind
        )


def build(cfg: ScenarioModel | Mapping, *, use_logging: bool = True) -> App:
    # 0) Validate config
    model = cfg if isinstance(cfg, ScenarioModel) else ScenarioModel.model_validate(cfg)

    # 1) Logging
    log = (
        PathLogging(run_id=model.run_id, level=model.log.level, debug=model.log.debug)
        if use_logging
        else NoopPathLogging()
    )

    # 2) Path
    kind = model.path.kind
    try:
        path = make_path(model.path, a_max=model.planner.a_max, resolution=model.planner.resolution)
    except (ValueError, ArithmeticError) as exc:
        log.path_error(kind, exc=exc, scenario=model.name)
        raise

    log.path_built(kind, path, scenario=model.name, samples=len(path.sampled_points()))
    if model.log.debug:
        for state in path.sampled_points():
            log.sample(state)

    return App(scenario=model, path=path, log=log)
