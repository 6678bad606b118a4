from __future__ import annotations

# Standard Library Imports
import logging
import os
from datetime import datetime
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# GEOTIME Imports
from geotime.common import pathSafeTime
from geotime.common.exceptions import UnsafeCastError
from geotime.common.logger import (
    PACKAGE_LOGGER_NAME,
    Logger,
    geotimeLogCritical,
    geotimeLogDebug,
    geotimeLogError,
    geotimeLogInfo,
    geotimeLogWarning,
)
from geotime.time.durations import Milliseconds, Seconds, castTo

# Local Imports
from .. import FIXTURE_DATA_DIR

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from pathlib import Path


CORRECT_OUTPUT: list[list[str | int]] = [
    ["test", logging.DEBUG, "This is a debug message."],
    ["test", logging.INFO, "This is an info message."],
    ["test", logging.WARNING, "This is a warning message."],
    ["test", logging.ERROR, "This is an error message."],
    ["test", logging.CRITICAL, "This is a critical message."],
]

CORRECT_FILE_OUTPUT: list[list[str | int]] = [
    ["test_logger", "DEBUG", "This is a debug message.\n"],
    ["test_logger", "INFO", "This is an info message.\n"],
    ["test_logger", "WARNING", "This is a warning message.\n"],
    ["test_logger", "ERROR", "This is an error message.\n"],
    ["test_logger", "CRITICAL", "This is a critical message.\n"],
]


def testStdout(caplog: pytest.LogCaptureFixture):
    """Test the logger's output to `sys.stdout`."""
    logger = Logger("test")
    assert logger.filename == "stdout"
    logger.debug("This is a debug message.")
    logger.info("This is an info message.")
    logger.warning("This is a warning message.")
    logger.error("This is an error message.")
    logger.critical("This is a critical message.")

    line_count = 0
    for item, record_tuple in enumerate(caplog.record_tuples):
        assert record_tuple == tuple(CORRECT_OUTPUT[item])
        line_count += 1

    assert line_count == 5


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testLogfile(datafiles: Path):
    """Test the logger's output to a logfile."""
    saved_cwd = os.getcwd()
    os.chdir(datafiles)
    file_logger = Logger("logfile-test", path="logs/")

    file_logger.debug("This is a debug message.")
    file_logger.info("This is an info message.")
    file_logger.warning("This is a warning message.")
    file_logger.error("This is an error message.")
    file_logger.critical("This is a critical message.")

    with open(file_logger.filename, encoding="utf-8") as logfile:
        line_count = 0
        for item, line in enumerate(logfile):
            assert line.split(" - ")[1:] == CORRECT_FILE_OUTPUT[item]
            line_count += 1

        assert line_count == 5

    os.chdir(saved_cwd)


def testSingleHandler():
    """Test that a configured logger is not given a second handler by default."""
    first = Logger("single-handler-test")
    handler_count = len(first.handlers)
    second = Logger("single-handler-test")

    assert second.filename is None
    assert len(second.handlers) == handler_count

    Logger("single-handler-test", allow_multiple_handlers=True)
    assert len(first.handlers) == handler_count + 1


def testPackageHelpers(caplog: pytest.LogCaptureFixture):
    """Test that the one-line helpers report to the package logger at the proper level."""
    caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER_NAME)
    geotimeLogDebug("debug")
    geotimeLogInfo("info")
    geotimeLogWarning("warning")
    geotimeLogError("error")
    geotimeLogCritical("critical")

    assert caplog.record_tuples == [
        (PACKAGE_LOGGER_NAME, logging.DEBUG, "debug"),
        (PACKAGE_LOGGER_NAME, logging.INFO, "info"),
        (PACKAGE_LOGGER_NAME, logging.WARNING, "warning"),
        (PACKAGE_LOGGER_NAME, logging.ERROR, "error"),
        (PACKAGE_LOGGER_NAME, logging.CRITICAL, "critical"),
    ]


def testErrorsAreLogged(caplog: pytest.LogCaptureFixture):
    """Test that a refused cast is reported at ERROR before raising."""
    with caplog.at_level(logging.ERROR, logger=PACKAGE_LOGGER_NAME), pytest.raises(TypeError):
        castTo(Seconds(1), Milliseconds)

    assert len(caplog.records) == 1
    assert caplog.records[0].levelno == logging.ERROR
    assert "Seconds -> Milliseconds" in caplog.records[0].getMessage()


def testHandledErrorsStayQuiet(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture):
    """Test that an error the caller handles prints nothing when logging is not configured."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    assert any(isinstance(handler, logging.NullHandler) for handler in package_logger.handlers)

    # Cut off the capture handlers on the root logger, as in an unconfigured application
    monkeypatch.setattr(package_logger, "propagate", False)
    try:
        castTo(Seconds(1), Milliseconds)
    except UnsafeCastError:
        pass

    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def testPackageLoggerConfigurable(monkeypatch: pytest.MonkeyPatch):
    """Test that the package's own null handler does not block configuring its logger."""
    package_logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    monkeypatch.setattr(package_logger, "handlers", list(package_logger.handlers))
    monkeypatch.setattr(package_logger, "level", package_logger.level)

    logger = Logger(PACKAGE_LOGGER_NAME)
    assert logger.filename == "stdout"
    assert any(isinstance(handler, logging.StreamHandler) for handler in package_logger.handlers)


def testPathSafeTime():
    """Test the time stamp used in log file names."""
    stamp = pathSafeTime(datetime(2015, 12, 30, 12, 9, 30, 11))
    assert stamp == "2015-12-30T12-09-30000011"
    assert ":" not in pathSafeTime()
