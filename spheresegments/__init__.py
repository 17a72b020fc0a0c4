"""spheresegments — surface area and volume of spherical segments."""

from ._sphere_math import cap_area, cap_radius, lateral_area, segment_volume, total_area
from .calculator import evaluate_segments, run_session
from .console import Console, read_measurement, read_segment_count
from .errors import InputExhaustedError, InvalidMeasurementError, SpheresegmentsError
from .measurement import Measurement, is_valid_measurement
from .results import RunningTotals, SegmentResult, SessionSummary
from .schemas import MeasurementInput, SegmentCountInput

__all__ = [
    "Console",
    "InputExhaustedError",
    "InvalidMeasurementError",
    "Measurement",
    "MeasurementInput",
    "RunningTotals",
    "SegmentCountInput",
    "SegmentResult",
    "SessionSummary",
    "SpheresegmentsError",
    "cap_area",
    "cap_radius",
    "evaluate_segments",
    "is_valid_measurement",
    "lateral_area",
    "read_measurement",
    "read_segment_count",
    "run_session",
    "segment_volume",
    "total_area",
]
