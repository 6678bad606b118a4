"""Configuration, logging and error types shared by every geotime module."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a path-safe time stamp, used to name log files.

    Args:
        dt: The date and time to generate a path-safe time stamp from. Defaults to now.

    Returns:
        A string without ``:`` or ``.`` characters.
    """
    if dt is None:
        dt = datetime.now()
    return dt.isoformat().replace(":", "-").replace(".", "")
