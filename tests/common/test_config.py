from __future__ import annotations

# Standard Library Imports
from collections import OrderedDict
from logging import DEBUG, INFO
from typing import TYPE_CHECKING

# Third Party Imports
import pytest

# GEOTIME Imports
from geotime.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from geotime.time.durations import Seconds
from geotime.time.epoch import DateTime
from geotime.time.timescale import TimeScale, defaultTimeScale

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    import logging
    from pathlib import Path

CONFIG_FILE_VALID: tuple[str, ...] = (
    "[logging]\n",
    "OutputLocation = ./logs/\n",
    "Level = INFO\n",
    "MaxFileSize = 2048\n",
    "MaxFileCount = 10\n",
    "[time]\n",
    "DefaultTimeScale = gps\n",
    "[formatting]\n",
    "DateDelimiter = /\n",
)

CORRECT_DEFAULTS = OrderedDict(
    {
        "logging": {
            "OutputLocation": "stdout",
            "Level": DEBUG,
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
    },
)


@pytest.fixture(name="file_config")
def mockCustomSettingsFile(tmp_path: Path) -> BehavioralConfig:
    """Write a custom config file, and build a :class:`.BehavioralConfig` from it.

    Args:
        tmp_path (``Path``): temporary directory unique to this test

    Returns:
        :class:`.BehavioralConfig`: non-default configuration object
    """
    config_path = tmp_path / "test.config"
    with open(config_path, "w", encoding="utf-8") as config_file:
        config_file.writelines(CONFIG_FILE_VALID)

    return BehavioralConfig(str(config_path))


def testImported():
    """Test that importing :class:`.BehavioralConfig` results in the default values."""
    config = BehavioralConfig.getConfig()
    for section, section_conf in CORRECT_DEFAULTS.items():
        for option, value in section_conf.items():
            conf_section = getattr(config, section)
            conf_option = getattr(conf_section, option)
            assert value == conf_option


def testSinglePattern():
    """Test that :class:`.BehavioralConfig` is a proper Singleton class."""
    config = BehavioralConfig.getConfig()
    # GEOTIME Imports
    from geotime.common.behavioral_config import BehavioralConfig as SecondConfig

    assert config is SecondConfig.getConfig()


def testOverwrite():
    """Test overwriting the default :class:`.BehavioralConfig` directly with custom settings."""
    custom_config = BehavioralConfig.getConfig()
    custom_config.logging.OutputLocation = "./logs/"
    custom_config.logging.Level = INFO
    custom_config.time.DefaultTimeScale = "UTC"

    # Re-import and check the values
    second_config = BehavioralConfig.getConfig()
    assert second_config.logging.OutputLocation == "./logs/"
    assert second_config.logging.Level == INFO
    assert defaultTimeScale() is TimeScale.UTC

    # Assert singleton condition
    assert custom_config is second_config


def testNonDefaultFile(test_logger: logging.Logger, file_config: BehavioralConfig):
    """Test overwriting the default :class:`.BehavioralConfig` with a custom config file.

    Args:
        test_logger (:class:`logging.Logger`): unit test logger object
        file_config (:class:`.BehavioralConfig`): non-default config object
    """
    test_logger.debug(f"Custom formatting delimiter: {file_config.formatting.DateDelimiter!r}")

    # Check the values
    assert file_config.logging.OutputLocation == "./logs/"
    assert file_config.logging.Level == INFO
    assert file_config.logging.MaxFileSize == 2048
    assert file_config.logging.MaxFileCount == 10
    assert file_config.time.DefaultTimeScale == "GPS"
    assert file_config.formatting.DateDelimiter == "/"

    # Options missing from the file keep their defaults
    assert file_config.logging.AllowMultipleHandlers is False
    assert file_config.formatting.FractionalDigits == 5

    # Check it changed for all imports
    second_config = BehavioralConfig.getConfig()
    assert second_config is file_config


def testConfiguredDefaults(file_config: BehavioralConfig):
    """Test that values built without explicit options pick up the configured defaults."""
    epoch = DateTime.fromHMS(2015, 12, 30, 12, 9, Seconds(30))
    assert epoch.scale is TimeScale.GPS
    assert str(epoch) == "2015/12/30 12:09:30"


def testMissingFile():
    """Test that a missing config file falls back to the default values."""
    config = BehavioralConfig("this/file/does/not/exist.config")
    for section, section_conf in CORRECT_DEFAULTS.items():
        for option, value in section_conf.items():
            assert getattr(getattr(config, section), option) == value


def testEnvironmentVariable(monkeypatch: pytest.MonkeyPatch, tmp_path: Path):
    """Test that the first shared config is read from the file named by the environment.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes
        tmp_path (``Path``): temporary directory unique to this test
    """
    config_path = tmp_path / "env.config"
    with open(config_path, "w", encoding="utf-8") as config_file:
        config_file.writelines(("[time]\n", "DefaultTimeScale = UTC\n"))

    monkeypatch.setattr(BehavioralConfig, "_BehavioralConfig__shared_inst", None)
    monkeypatch.setenv(CONFIG_ENV_VARIABLE, str(config_path))

    config = BehavioralConfig.getConfig()
    assert config.time.DefaultTimeScale == "UTC"
    assert config.logging.Level == DEBUG
    assert DateTime(2016, 1, 1).scale is TimeScale.UTC


def testUnclassifiedOption(monkeypatch: pytest.MonkeyPatch):
    """Test that a default option without a declared type is reported."""
    sections = {"time": {"DefaultTimeScale": "TAI", "LeapSecondFile": "leap.dat"}}
    with monkeypatch.context() as m_patch, pytest.raises(KeyError, match="LeapSecondFile"):
        m_patch.setattr(BehavioralConfig, "DEFAULT_SECTIONS", sections)
        BehavioralConfig()
