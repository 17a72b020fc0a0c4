"""Session runner: count, then measure/compute/report per segment, then averages."""

from __future__ import annotations

import logging
from typing import Iterable

from .console import Console, read_measurement, read_segment_count
from .measurement import Measurement
from .results import RunningTotals, SegmentResult, SessionSummary

logger = logging.getLogger(__name__)


def evaluate_segments(measurements: Iterable[Measurement]) -> SessionSummary:
    """Compute and accumulate results for already-validated measurements.

    Raises:
        ValueError: if ``measurements`` is empty.
    """
    summary = SessionSummary()
    totals = RunningTotals()
    for index, measurement in enumerate(measurements, start=1):
        result = SegmentResult.from_measurement(measurement, index)
        summary.results.append(result)
        totals = totals.add(result)
    if totals.count == 0:
        raise ValueError("At least one measurement is required")
    summary.totals = totals
    return summary


def run_session(console: Console | None = None) -> SessionSummary:
    """Run one interactive session and return what it produced.

    Each segment's line is written as soon as it is computed; the
    averages are written once after the last segment.
    """
    console = console or Console()
    n = read_segment_count(console)
    logger.info("Evaluating %d segments", n)

    summary = SessionSummary()
    totals = RunningTotals()
    for index in range(1, n + 1):
        measurement = read_measurement(console, index)
        result = SegmentResult.from_measurement(measurement, index)
        console.write(result.report_line())
        summary.results.append(result)
        totals = totals.add(result)

    summary.totals = totals
    for line in totals.average_lines():
        console.write(line)
    logger.info(
        "Session done: area sum %.6f, volume sum %.6f over %d segments",
        totals.area, totals.volume, totals.count,
    )
    return summary
