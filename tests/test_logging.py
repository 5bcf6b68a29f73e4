"""Tests for the terminal logging setup."""

import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from commitvar.logging import ROOT_LOGGER_NAME, LevelGate, configure_logging


def _record(level: int) -> logging.LogRecord:
    return logging.LogRecord("commitvar.test", level, __file__, 1, "msg", None, None)


@pytest.fixture(autouse=True)
def _reset_handlers():
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class TestLevelGate:
    def test_defaults(self):
        gate = LevelGate()
        assert gate.filter(_record(logging.INFO)) is True
        assert gate.filter(_record(logging.ERROR)) is True
        assert gate.filter(_record(logging.WARNING)) is False
        assert gate.filter(_record(logging.DEBUG)) is False

    def test_enabled(self):
        gate = LevelGate(warnings=True, debug=True)
        assert gate.filter(_record(logging.WARNING)) is True
        assert gate.filter(_record(logging.DEBUG)) is True


class TestConfigureLogging:
    def test_single_handler(self):
        configure_logging()
        logger = configure_logging(debug=True)
        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1
        assert logger.level == logging.DEBUG

    def test_output_respects_flags(self):
        buf = io.StringIO()
        configure_logging(console=Console(file=buf, width=200))
        log = logging.getLogger("commitvar.analysis.engine")
        log.info("collecting")
        log.warning("skipped file")
        log.debug("details")
        out = buf.getvalue()
        assert "collecting" in out
        assert "skipped file" not in out
        assert "details" not in out

    def test_warnings_shown(self):
        buf = io.StringIO()
        configure_logging(warnings=True, console=Console(file=buf, width=200))
        logging.getLogger("commitvar.analysis.dispatch").warning("no hunk")
        assert "no hunk" in buf.getvalue()
