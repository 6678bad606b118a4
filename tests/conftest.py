from __future__ import annotations

# Standard Library Imports
import logging
import sys
from typing import TYPE_CHECKING

# Third Party Imports
import pytest
from numpy.random import default_rng

# GEOTIME Imports
from geotime.common.behavioral_config import CONFIG_ENV_VARIABLE, BehavioralConfig
from geotime.time.durations import Nanoseconds, Seconds
from geotime.time.epoch import DateTime
from geotime.time.timescale import TimeScale

# Local Imports
from . import RANDOM_SEED, TEST_DAY, TEST_HOUR, TEST_MINUTE, TEST_MONTH, TEST_SECOND, TEST_YEAR

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy.random import Generator


@pytest.fixture(autouse=True)
def _patchMissingEnvVariables(monkeypatch: pytest.MonkeyPatch) -> None:
    """Automatically delete the config environment variable, if set.

    Args:
        monkeypatch (:class:`pytest.MonkeyPatch`): monkeypatch obj to track changes

    Note:
        This is used so tests can assume a "blank" configuration, and it won't
        overwrite a user's custom-set environment variables. The shared config is
        rebuilt from the defaults after each test, in case a test overwrote a setting.
    """
    with monkeypatch.context() as m_patch:
        m_patch.delenv(CONFIG_ENV_VARIABLE, raising=False)
        yield
    BehavioralConfig()


@pytest.fixture(scope="session", name="test_logger")
def getTestLoggerObject() -> logging.Logger:
    """Create a custom :class:`logging.Logger` object."""
    logger = logging.getLogger("Unit Test Logger")
    logger.setLevel(logging.DEBUG)
    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    return logger


@pytest.fixture(name="rng")
def getRandomGenerator() -> Generator:
    """Return a seeded random generator, so property tests are reproducible."""
    return default_rng(RANDOM_SEED)


@pytest.fixture(name="gps_epoch")
def getGPSEpoch() -> DateTime:
    """Return the common test epoch, 2015-12-30 12:09:30 GPS, at whole second resolution."""
    return DateTime.fromHMS(
        TEST_YEAR,
        TEST_MONTH,
        TEST_DAY,
        TEST_HOUR,
        TEST_MINUTE,
        Seconds(TEST_SECOND),
        scale=TimeScale.GPS,
    )


@pytest.fixture(name="nano_epoch")
def getNanosecondEpoch() -> DateTime:
    """Return the common test epoch, plus 11 microseconds, at nanosecond resolution."""
    return DateTime.fromHMS(
        TEST_YEAR,
        TEST_MONTH,
        TEST_DAY,
        TEST_HOUR,
        TEST_MINUTE,
        Nanoseconds(TEST_SECOND * Nanoseconds.RESOLUTION + 11_000),
        resolution=Nanoseconds,
        scale=TimeScale.GPS,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest options without an .ini file."""
    config.addinivalue_line("markers", "property: mark test as a randomized property test")
