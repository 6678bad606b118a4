"""Contains the calendar scalars, durations and composite date/time values.

Submodules build on each other in one direction: :mod:`.fundamentals` and
:mod:`.durations` define the integer building blocks, :mod:`.epoch` combines them
into :class:`.DateTime`, and :mod:`.strings` formats & parses those values.
Conversions between different resolutions are always explicit, see :func:`.castTo`.
"""
