"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"

# Common epoch, 2015-12-30 12:09:30
TEST_YEAR = 2015
TEST_MONTH = 12
TEST_DAY = 30
TEST_HOUR = 12
TEST_MINUTE = 9
TEST_SECOND = 30

RANDOM_SEED = 20151230
"""``int``: seed of the random generators used by the property tests."""
