"""Pydantic models that parse raw console tokens.

String tokens must be plain decimal literals: Python-only spellings such
as ``1_0`` or ``3.0`` for a count are not numbers a user would type.
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .config import MAX_SEGMENTS, MIN_SEGMENTS
from .measurement import Measurement

_INT_TOKEN = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_TOKEN = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _check_token(value: Any, pattern: re.Pattern[str], kind: str) -> Any:
    if isinstance(value, str) and not pattern.fullmatch(value.strip()):
        raise ValueError(f"{value!r} is not a plain {kind} literal")
    return value


class SegmentCountInput(BaseModel):
    n: int = Field(ge=MIN_SEGMENTS, le=MAX_SEGMENTS)

    @field_validator("n", mode="before")
    @classmethod
    def _plain_integer(cls, value: Any) -> Any:
        return _check_token(value, _INT_TOKEN, "integer")


class MeasurementInput(BaseModel):
    """Three finite floats; ordering is checked by ``to_measurement``."""

    model_config = ConfigDict(allow_inf_nan=False, frozen=True)

    R: float
    ha: float
    hb: float

    @field_validator("R", "ha", "hb", mode="before")
    @classmethod
    def _plain_decimal(cls, value: Any) -> Any:
        return _check_token(value, _FLOAT_TOKEN, "decimal")

    def to_measurement(self) -> Measurement:
        return Measurement(R=self.R, ha=self.ha, hb=self.hb)
