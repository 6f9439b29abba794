# io/path_logging.py
import json
import logging
import sys

from flightpath.app.protocols import FlightPath
from flightpath.domain.entities.motion import TrajectoryState


def _default_json_logger(name="flightpath", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class NoopPathLogging:
    def path_built(self, *_, **__):
        pass

    def path_error(self, *_, **__):
        pass

    def sample(self, *_, **__):
        pass


class PathLogging(NoopPathLogging):
    """
    One place to shape and emit structured logs about trajectory construction.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug = run_id, debug
        self.log = logger or _default_json_logger(level=level)

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    # --------------------------------------------------------

    def path_built(self, kind: str, path: FlightPath, **extra):
        branch = getattr(path, "branch", None)
        if branch is not None:
            extra["branch"] = branch
        self._emit("INFO", "path_built", kind=kind, t_max=path.max_duration(), **extra)

    def path_error(self, kind: str, *, exc: BaseException, **extra):
        self._emit("ERROR", "path_error", kind=kind, error=str(exc), **extra)

    def sample(self, state: TrajectoryState, **extra):
        if self.debug:
            self._emit("DEBUG", "state_sample", **state.to_dict(), **extra)
