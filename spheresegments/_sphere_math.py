"""Closed-form spherical segment geometry.

All heights are measured from the sphere centre. Callers are expected to
pass validated measurements; only ``cap_radius`` guards its radicand.
R² - h² is always evaluated as (R - h)(R + h): exact zero at the pole and
no inf - inf for very large radii.
"""

from __future__ import annotations

import math


def _radius_squared(R: float, h: float) -> float:
    return (R - h) * (R + h)


def cap_radius(R: float, h: float) -> float:
    """Radius of the circular cross-section at height ``h``: sqrt(R² - h²)."""
    radicand = _radius_squared(R, h)
    if radicand < 0.0:
        raise ValueError(f"Height {h!r} lies outside a sphere of radius {R!r}")
    return math.sqrt(radicand)


def cap_area(R: float, h: float) -> float:
    """Area of the flat cap at height ``h``.

    A = π (R² - h²)
    """
    return math.pi * _radius_squared(R, h)


def lateral_area(R: float, ha: float, hb: float) -> float:
    """Curved zone area between the two planes: 2πR(ha - hb)."""
    return 2.0 * math.pi * R * (ha - hb)


def total_area(top: float, bottom: float, lateral: float) -> float:
    return top + bottom + lateral


def segment_volume(R: float, ha: float, hb: float) -> float:
    """Volume of the segment between heights ``hb`` and ``ha``.

    V = (π h / 6)(3a² + 3b² + h²), h = ha - hb,
    a and b being the top and bottom cap radii.
    """
    a = cap_radius(R, ha)
    b = cap_radius(R, hb)
    h = ha - hb
    return (math.pi * h / 6.0) * (3.0 * a * a + 3.0 * b * b + h * h)
