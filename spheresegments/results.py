"""Segment results and running totals."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from ._sphere_math import cap_area, lateral_area, segment_volume, total_area
from .config import DISPLAY_DECIMALS
from .measurement import Measurement

logger = logging.getLogger(__name__)


def format_value(value: float) -> str:
    """Fixed-point display form used by every report line."""
    return f"{value:.{DISPLAY_DECIMALS}f}"


@dataclass(frozen=True)
class SegmentResult:
    """Areas and volume of one evaluated segment."""

    measurement: Measurement
    top_area: float
    bottom_area: float
    lateral_area: float
    total_area: float
    volume: float
    index: int = 0  # 1-based position in the session, 0 when standalone

    @classmethod
    def from_measurement(cls, measurement: Measurement, index: int = 0) -> SegmentResult:
        R, ha, hb = measurement.R, measurement.ha, measurement.hb
        top = cap_area(R, ha)
        bottom = cap_area(R, hb)
        lateral = lateral_area(R, ha, hb)
        result = cls(
            measurement=measurement,
            top_area=top,
            bottom_area=bottom,
            lateral_area=lateral,
            total_area=total_area(top, bottom, lateral),
            volume=segment_volume(R, ha, hb),
            index=index,
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Segment %d computed:\n%s", index, result.describe())
        return result

    def report_line(self) -> str:
        return f"Total Surface Area = {format_value(self.total_area)} Volume = {format_value(self.volume)}."

    def describe(self) -> str:
        """Multi-line breakdown of every computed quantity."""
        m = self.measurement
        return "\n".join([
            f"  R = {format_value(m.R)}   ha = {format_value(m.ha)}   hb = {format_value(m.hb)}",
            f"  a = {format_value(m.top_radius)}   b = {format_value(m.bottom_radius)}   h = {format_value(m.thickness)}",
            f"  Top area      = {self.top_area:>12.{DISPLAY_DECIMALS}f}",
            f"  Bottom area   = {self.bottom_area:>12.{DISPLAY_DECIMALS}f}",
            f"  Lateral area  = {self.lateral_area:>12.{DISPLAY_DECIMALS}f}",
            f"  Total area    = {self.total_area:>12.{DISPLAY_DECIMALS}f}",
            f"  Volume        = {self.volume:>12.{DISPLAY_DECIMALS}f}",
        ])

    def print_summary(self) -> None:
        label = f"Segment {self.index}" if self.index else "Segment"
        print(f"\n=== {label} ===")
        print(self.describe())


@dataclass(frozen=True)
class RunningTotals:
    """Unrounded area and volume sums over the segments seen so far."""

    count: int = 0
    area: float = 0.0
    volume: float = 0.0

    def add(self, result: SegmentResult) -> RunningTotals:
        return RunningTotals(
            count=self.count + 1,
            area=self.area + result.total_area,
            volume=self.volume + result.volume,
        )

    def _require_segments(self) -> None:
        if self.count == 0:
            raise ValueError("No segments accumulated; averages are undefined")

    @property
    def average_area(self) -> float:
        self._require_segments()
        return self.area / self.count

    @property
    def average_volume(self) -> float:
        self._require_segments()
        return self.volume / self.count

    def average_lines(self) -> list[str]:
        return [
            "Total average results:",
            f"Average Surface Area = {format_value(self.average_area)} "
            f"Average Volume = {format_value(self.average_volume)}.",
        ]


@dataclass
class SessionSummary:
    """Everything a finished session produced."""

    results: list[SegmentResult] = field(default_factory=list)
    totals: RunningTotals = field(default_factory=RunningTotals)

    def print_results(self) -> None:
        for result in self.results:
            result.print_summary()

    def print_averages(self) -> None:
        for line in self.totals.average_lines():
            print(line)
