"""Main Module Documentation.

Exact, integer-based date & time values for geodetic and astrodynamics software.

Values are built from validated calendar scalars plus an integer count of
sub-day ticks, so arithmetic never accumulates floating point error:

.. code-block:: python

    from geotime.time.durations import Seconds
    from geotime.time.epoch import DateTime

    epoch = DateTime.fromHMS(2015, 12, 30, 12, 9, Seconds(30))
    later = epoch + Seconds(216000)
    print(later)  # 2016-01-02 00:09:30

Errors are reported to the ``"geotime"`` logger before being raised. The package
attaches only a :class:`logging.NullHandler`, so nothing is printed unless the
application configures logging, e.g. with :class:`.Logger`.
"""

from __future__ import annotations

# Standard Library Imports
import logging

# Local Imports
from .common.logger import PACKAGE_LOGGER_NAME

__version__ = "1.0.0"

logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())
