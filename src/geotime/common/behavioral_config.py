"""Defines the shared, process-wide settings that tune how geotime behaves.

Settings are read from an INI file, falling back to the packaged
``default_behavior.config`` and finally to :attr:`.BehavioralConfig.DEFAULT_SECTIONS`
for any option the file leaves out. The file can be chosen by passing its path to
:meth:`.BehavioralConfig.getConfig` or by setting the ``GEOTIME_BEHAVIOR_CONFIG``
environment variable before the first call.

Settings are read with attribute access, per section:

.. code-block:: python

    BehavioralConfig.getConfig().formatting.FractionalDigits  # 5
"""

from __future__ import annotations

# Standard Library Imports
import logging
import os
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from typing import Any, Final


CONFIG_ENV_VARIABLE: str = "GEOTIME_BEHAVIOR_CONFIG"
"""``str``: environment variable holding the path of a custom config file."""


class SubConfig:
    """Attribute namespace holding the options of a single config section.

    Allows ``config.section.Option`` rather than ``config["section"]["Option"]``.
    """

    def __init__(self, section: str):
        """Create an empty namespace for `section`.

        Args:
            section (``str``): name of the section this object holds
        """
        if not isinstance(section, str):
            raise TypeError(f"Config section name must be a string, got {type(section).__name__}")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set an option, refusing to overwrite one that was already loaded.

        Args:
            name (``str``): option name
            value (``any``): parsed option value

        Raises:
            :class:`AttributeError`: `name` was already set in this section
        """
        if name in vars(self):
            raise AttributeError(
                f"Option {self.section}::{name} is already set to {getattr(self, name)!r}",
            )
        setattr(self, name, value)


class GeotimeConfigParser(ConfigParser):
    """:class:`ConfigParser` with the extra value types used by geotime options."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        name: getattr(logging, name)
        for name in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return the numeric :mod:`logging` level named by an option, ``NOTSET`` if unknown."""
        return self.LOGGING_LEVELS.get(self.getupper(section, option), logging.NOTSET)

    def getupper(self, section: str, option: str) -> str:
        """Return an option as an upper-cased string, used for enumeration names."""
        return self.get(section, option).strip().upper()


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    DEFAULT_SECTIONS: Final[dict[str, dict[str, Any]]] = {
        "logging": {
            "OutputLocation": "stdout",
            "Level": logging.DEBUG,
            "MaxFileSize": 1048576,
            "MaxFileCount": 50,
            "AllowMultipleHandlers": False,
        },
        "time": {
            "DefaultTimeScale": "TAI",
        },
        "formatting": {
            "DateDelimiter": "-",
            "FractionalDigits": 5,
        },
    }

    OPTION_TYPES: Final[dict[str, dict[str, str]]] = {
        "logging": {
            "OutputLocation": "str",
            "Level": "logginglevel",
            "MaxFileSize": "int",
            "MaxFileCount": "int",
            "AllowMultipleHandlers": "boolean",
        },
        "time": {
            "DefaultTimeScale": "upper",
        },
        "formatting": {
            "DateDelimiter": "str",
            "FractionalDigits": "int",
        },
    }
    """``dict``: value type of every option, naming the :class:`.GeotimeConfigParser` getter."""

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Load the settings, and make this object the shared instance.

        Args:
            config_file_path (``str``, optional): custom config file. Defaults to the
                packaged file. A path that does not exist leaves every option at its default.
        """
        self._parser = GeotimeConfigParser()

        if config_file_path is None:
            res = resources.files("geotime.common").joinpath(self.DEFAULT_CONFIG_FILE)
            with (
                resources.as_file(res) as res_filepath,
                open(res_filepath, encoding="utf-8") as config_file,
            ):
                self._parser.read_file(config_file)

        elif Path(config_file_path).exists():
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        for section, defaults in self.DEFAULT_SECTIONS.items():
            sub = SubConfig(section)
            for option, default in defaults.items():
                sub.setonce(option, self._readOption(section, option, default))

            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    def _getter(self, section: str, option: str) -> Callable[[str, str], Any]:
        """Return the parser method that reads `option` as its declared type."""
        try:
            value_type = self.OPTION_TYPES[section][option]
        except KeyError as err:
            raise KeyError(f"Configuration item '{section}::{option}' lacks a type classification.") from err

        if value_type == "str":
            return self._parser.get
        return getattr(self._parser, f"get{value_type}")

    def _readOption(self, section: str, option: str, default: Any) -> Any:
        """Return the parsed value of `option`, or `default` if the file does not set it."""
        getter = self._getter(section, option)
        try:
            return getter(section, option)
        except ConfigError:
            return default

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config.

        The first call creates it from `config_file_path`, else from the file named by
        ``GEOTIME_BEHAVIOR_CONFIG``, else from the packaged defaults.
        """
        if cls.__shared_inst is None:
            if not config_file_path:
                config_file_path = os.environ.get(CONFIG_ENV_VARIABLE) or None
            cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path)

        return cls.__shared_inst
