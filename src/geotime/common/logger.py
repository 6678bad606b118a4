"""Defines the :class:`.Logger` class and the package-level logging helpers."""

from __future__ import annotations

# Standard Library Imports
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Local Imports
from . import pathSafeTime
from .behavioral_config import BehavioralConfig

PACKAGE_LOGGER_NAME: str = "geotime"
"""``str``: name of the logger that every geotime module reports to."""

LOG_FORMAT: str = "%(asctime)s - %(module)s - %(levelname)s - %(message)s"
"""``str``: record layout shared by the stdout and file handlers."""


class Logger:
    """Thin wrapper of :class:`logging.Logger` configured from :class:`.BehavioralConfig`.

    Records go to ``stdout`` or to a rotating, time-stamped log file, depending on
    the ``logging.OutputLocation`` setting.
    """

    def __init__(self, name, level=None, path=None, allow_multiple_handlers=None):
        """Configure the logging information for this Logger instance.

        Args:
            name (``str``): name of the the logger instance
            level (``int``, optional): minimum level of published records. Defaults to the config value.
            path (``str``, optional): ``"stdout"`` or a directory for the log file. Defaults to the config value.
            allow_multiple_handlers (``bool``, optional): whether another handler may be attached
                to an already configured logger. Defaults to the config value.
        """
        settings = BehavioralConfig.getConfig().logging
        if level is None:
            level = settings.Level
        if path is None:
            path = settings.OutputLocation
        if allow_multiple_handlers is None:
            allow_multiple_handlers = settings.AllowMultipleHandlers

        self.filename = None
        self.logger = logging.getLogger(name)
        configured = [
            existing for existing in self.logger.handlers if not isinstance(existing, logging.NullHandler)
        ]
        if configured and not allow_multiple_handlers:
            return

        if path == "stdout":
            self.filename = "stdout"
            handler = logging.StreamHandler(sys.stdout)
        else:
            log_dir = Path(path)
            if not log_dir.exists():
                self.logger.info(f"Path did not exist: {path!r}. Creating path...")
                log_dir.mkdir(parents=True)

            self.filename = str(log_dir / f"{name}_{pathSafeTime()}.log")
            handler = RotatingFileHandler(
                self.filename,
                maxBytes=settings.MaxFileSize,
                backupCount=settings.MaxFileCount,
            )

        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.setLevel(level)
        self.logger.addHandler(handler)

    def __getattr__(self, name):
        """Forward everything else to the wrapped :class:`logging.Logger`."""
        return getattr(self.logger, name)


def _geotimeLog(message: str, level: int):
    """Log a message to the package-level log record.

    One-liner for plain functions that need to report without holding a logger object.

    Args:
        message (``str``): message to record with in the log.
        level (``int``): level at which to log this message, corresponding to `logging.LOG_LEVEL`.
    """
    logging.getLogger(PACKAGE_LOGGER_NAME).log(msg=message, level=level)


def geotimeLogCritical(message: str):
    """Log a CRITICAL message to the package-level log record."""
    _geotimeLog(message, level=logging.CRITICAL)


def geotimeLogError(message: str):
    """Log an ERROR message to the package-level log record."""
    _geotimeLog(message, level=logging.ERROR)


def geotimeLogWarning(message: str):
    """Log a WARNING message to the package-level log record."""
    _geotimeLog(message, level=logging.WARNING)


def geotimeLogInfo(message: str):
    """Log an INFO message to the package-level log record."""
    _geotimeLog(message, level=logging.INFO)


def geotimeLogDebug(message: str):
    """Log a DEBUG message to the package-level log record."""
    _geotimeLog(message, level=logging.DEBUG)
