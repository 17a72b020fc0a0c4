"""Console input: a whitespace token reader and the two prompt loops.

Values are read token by token, so ``5 4 3`` on one line answers three
consecutive prompts. A malformed token is consumed and treated as invalid
input; it never blocks the stream.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Iterable, Iterator

from pydantic import ValidationError

from .config import MAX_SEGMENTS, MIN_SEGMENTS
from .errors import InputExhaustedError, InvalidMeasurementError
from .measurement import Measurement
from .results import format_value
from .schemas import MeasurementInput, SegmentCountInput

logger = logging.getLogger(__name__)

COUNT_PROMPT = f"How many spherical segments you want to evaluate [{MIN_SEGMENTS}-{MAX_SEGMENTS}]?"
SEGMENT_HEADER = "Obtaining data for spherical segment number {index}"
RADIUS_PROMPT = "What is the radius of the sphere (R)?"
TOP_HEIGHT_PROMPT = "What is the height of the top area of the spherical segment (ha)?"
BOTTOM_HEIGHT_PROMPT = "What is the height of the bottom area of the spherical segment (hb)?"
INVALID_INPUT = "Invalid Input."


class Console:
    """Line source plus output sink.

    Args:
        lines: Iterable of input lines. When omitted, lines come from
            ``input()`` (standard input).
        write: Callable receiving each output line. Defaults to ``print``.
    """

    def __init__(
        self,
        lines: Iterable[str] | None = None,
        write: Callable[[str], None] = print,
    ) -> None:
        self._lines: Iterator[str] | None = iter(lines) if lines is not None else None
        self._pending: deque[str] = deque()
        self.write = write

    def _next_line(self) -> str:
        if self._lines is None:
            try:
                return input()
            except EOFError:
                raise InputExhaustedError("Standard input closed") from None
        try:
            return next(self._lines)
        except StopIteration:
            raise InputExhaustedError("Input lines exhausted") from None

    def read_token(self) -> str:
        """Return the next whitespace-separated token, reading lines as needed."""
        while not self._pending:
            self._pending.extend(self._next_line().split())
        return self._pending.popleft()

    def ask(self, prompt: str) -> str:
        self.write(prompt)
        return self.read_token()


def read_segment_count(console: Console) -> int:
    """Prompt until an integer in [MIN_SEGMENTS, MAX_SEGMENTS] is entered."""
    while True:
        token = console.ask(COUNT_PROMPT)
        try:
            return SegmentCountInput(n=token).n
        except ValidationError as exc:
            logger.info("Rejected segment count %r: %s", token, exc.errors()[0]["msg"])


def read_measurement(console: Console, index: int) -> Measurement:
    """Prompt for (R, ha, hb) until the triple describes a valid segment.

    All three values are requested again after any rejection.
    """
    while True:
        console.write(SEGMENT_HEADER.format(index=index))
        R = console.ask(RADIUS_PROMPT)
        ha = console.ask(TOP_HEIGHT_PROMPT)
        hb = console.ask(BOTTOM_HEIGHT_PROMPT)

        try:
            raw = MeasurementInput(R=R, ha=ha, hb=hb)
        except ValidationError as exc:
            bad = ", ".join(str(err["loc"][0]) for err in exc.errors())
            logger.info("Segment %d: malformed value for %s", index, bad)
            console.write(INVALID_INPUT)
            continue

        console.write(
            f"Entered data: R = {format_value(raw.R)} ha = {format_value(raw.ha)} hb = {format_value(raw.hb)}."
        )
        try:
            return raw.to_measurement()
        except InvalidMeasurementError as exc:
            logger.info("Segment %d: %s", index, exc)
            console.write(INVALID_INPUT)
