"""Exception types raised by spheresegments."""

from __future__ import annotations


class SpheresegmentsError(Exception):
    """Base class for all package errors."""


class InvalidMeasurementError(SpheresegmentsError, ValueError):
    """A (R, ha, hb) triple that does not describe a spherical segment."""


class InputExhaustedError(SpheresegmentsError, EOFError):
    """The input source ran out before the session finished."""
