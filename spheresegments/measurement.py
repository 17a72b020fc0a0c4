"""Measurement dataclass for a single spherical segment."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ._sphere_math import cap_radius
from .errors import InvalidMeasurementError


def is_valid_measurement(R: float, ha: float, hb: float) -> bool:
    """True when (R, ha, hb) bound a segment: 0 < hb <= ha <= R.

    Non-finite values are never valid.
    """
    if not all(math.isfinite(v) for v in (R, ha, hb)):
        return False
    return R > 0 and ha > 0 and hb > 0 and ha <= R and hb <= R and ha >= hb


@dataclass(frozen=True)
class Measurement:
    """Sphere radius and the two plane heights, all from the sphere centre."""

    R: float   # sphere radius
    ha: float  # height of the top plane
    hb: float  # height of the bottom plane

    def __post_init__(self) -> None:
        if not is_valid_measurement(self.R, self.ha, self.hb):
            raise InvalidMeasurementError(
                f"Invalid segment R={self.R!r} ha={self.ha!r} hb={self.hb!r}: "
                "expected 0 < hb <= ha <= R"
            )

    @property
    def thickness(self) -> float:
        return self.ha - self.hb

    @property
    def top_radius(self) -> float:
        return cap_radius(self.R, self.ha)

    @property
    def bottom_radius(self) -> float:
        return cap_radius(self.R, self.hb)
