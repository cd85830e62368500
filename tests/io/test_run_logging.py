# tests/io/test_run_logging.py
import json
import logging

from carpool.domain.roster import Roster
from carpool.io.run_logging import RunLogging, _default_json_logger
from carpool.runtime.types import SelectionMethod

ROSTER = Roster.from_pairs([("A", "Alice"), ("B", "Bob")])
A, B = ROSTER


def test_emits_structured_records(caplog):
    logger = logging.getLogger("carpool.test.records")
    hooks = RunLogging(run_id="r-1", level="INFO", logger=logger)
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        hooks.method_start(method=SelectionMethod.UNITS, people=ROSTER, rides=(), present=[A])
        hooks.ride_scored(method=SelectionMethod.UNITS, index=0, deltas=[1, -1])
        hooks.method_end(method=SelectionMethod.UNITS, groups=((B, A),), wall_ms=1.23456)

    msgs = [r.getMessage() for r in caplog.records]
    # ride_scored is DEBUG-only
    assert msgs == ["method_start", "method_end"]
    start, end = (r.extra for r in caplog.records)
    assert start == {"run_id": "r-1", "method": "units", "people": 2, "rides": 0, "present": "A"}
    assert end["groups"] == ["BA"]
    assert end["wall_ms"] == 1.235


def test_debug_level_logs_rides(caplog):
    logger = logging.getLogger("carpool.test.debug")
    hooks = RunLogging(level="DEBUG", logger=logger)
    with caplog.at_level(logging.DEBUG, logger=logger.name):
        hooks.ride_scored(method=SelectionMethod.POINTS, index=3, deltas=[2, -2])
        hooks.error(method=SelectionMethod.POINTS, exc=ValueError("boom"))
    assert [r.levelname for r in caplog.records] == ["DEBUG", "ERROR"]
    assert caplog.records[1].extra["kind"] == "ValueError"


def test_default_logger_writes_json(capsys):
    logger = _default_json_logger(name="carpool.test.json", level="INFO")
    logger.info("hello", extra={"extra": {"method": "pairs"}})
    line = capsys.readouterr().err.strip().splitlines()[-1]
    assert json.loads(line) == {
        "level": "INFO",
        "msg": "hello",
        "logger": "carpool.test.json",
        "method": "pairs",
    }
