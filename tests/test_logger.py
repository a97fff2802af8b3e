import logging
import sys

from solarazel.compute import run
from solarazel.logger import APP_LOGGER_NAME, get_logger, is_level_name, set_level
from solarazel.models import QueryInput


def _own_handlers():
    parent = logging.getLogger(APP_LOGGER_NAME)
    return [h for h in parent.handlers if getattr(h, "_solarazel_handler", False)]


def test_child_logger_names():
    assert get_logger("compute").name == "solarazel.compute"
    # module __name__ values are not double-prefixed
    assert get_logger("solarazel.compute").name == "solarazel.compute"


def test_single_shared_handler():
    parent = logging.getLogger(APP_LOGGER_NAME)
    previous = parent.level
    try:
        set_level("info")
        set_level("warning")
        get_logger("a")
        own = _own_handlers()
        assert len(own) == 1
        assert isinstance(own[0], logging.StreamHandler)
        assert own[0].stream is sys.stderr
    finally:
        parent.setLevel(previous)


def test_set_level_accepts_names():
    parent = logging.getLogger(APP_LOGGER_NAME)
    previous = parent.level
    try:
        set_level("debug")
        assert parent.level == logging.DEBUG
        set_level(logging.ERROR)
        assert parent.level == logging.ERROR
    finally:
        parent.setLevel(previous)


def test_is_level_name():
    assert is_level_name("debug")
    assert is_level_name("WARNING")
    assert not is_level_name("verbose")


def test_records_reach_host_handlers(caplog):
    # Package records propagate, so a host (or caplog) sees them
    assert logging.getLogger(APP_LOGGER_NAME).propagate
    with caplog.at_level(logging.INFO, logger=APP_LOGGER_NAME):
        run(QueryInput(when="2020-06-21 12:00", lat=52.975, lng=-6.0494))
    messages = [r.getMessage() for r in caplog.records if r.name == "solarazel.compute"]
    assert any("solar position for 2020-06-21T12:00:00+00:00" in m for m in messages)
