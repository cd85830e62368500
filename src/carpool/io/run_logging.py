# io/run_logging.py
import json
import logging
import sys

from carpool.engine.hooks import NoopHooks


def _default_json_logger(name="carpool", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        # stdout carries the report
        h = logging.StreamHandler(sys.stderr)

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
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
    logger.setLevel(level)
    return logger


class RunLogging(NoopHooks):
    """
    Structured JSON logs for one selection run.
    """

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        logger: logging.Logger | None = None,
    ):
        self.run_id = run_id
        self.debug = level == "DEBUG"
        self.log = logger or _default_json_logger(level=level)

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    @staticmethod
    def _codes(people) -> str:
        return "".join(p.code for p in people)

    def method_start(self, *, method, people, rides, present):
        self._emit(
            "INFO",
            "method_start",
            method=method.value,
            people=len(people),
            rides=len(rides),
            present=self._codes(present),
        )

    def ride_scored(self, *, method, index, deltas):
        if self.debug:
            self._emit("DEBUG", "ride_scored", method=method.value, index=index, deltas=deltas)

    def method_end(self, *, method, groups, wall_ms):
        self._emit(
            "INFO",
            "method_end",
            method=method.value,
            groups=None if groups is None else [self._codes(g) for g in groups],
            wall_ms=round(wall_ms, 3),
        )

    def error(self, *, method, exc: BaseException):
        self._emit(
            "ERROR", "method_error", method=method.value, error=str(exc), kind=type(exc).__name__
        )
