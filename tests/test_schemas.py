"""Tests for the pydantic input models."""

import pytest
from pydantic import ValidationError

from spheresegments import InvalidMeasurementError, MeasurementInput, SegmentCountInput


class TestSegmentCountInput:
    """Tests for SegmentCountInput."""

    @pytest.mark.parametrize("raw", ["2", "5", "10"])
    def test_accepts_in_range(self, raw):
        assert SegmentCountInput(n=raw).n == int(raw)

    @pytest.mark.parametrize("raw", ["-3", "0", "1", "11", "100"])
    def test_rejects_out_of_range(self, raw):
        with pytest.raises(ValidationError):
            SegmentCountInput(n=raw)

    @pytest.mark.parametrize("raw", ["abc", "3.5", "", "1_0", "3.0", "0x5"])
    def test_rejects_non_integer(self, raw):
        with pytest.raises(ValidationError):
            SegmentCountInput(n=raw)


class TestMeasurementInput:
    """Tests for MeasurementInput."""

    def test_parses_strings(self):
        raw = MeasurementInput(R="5", ha="4.0", hb="3e0")
        assert (raw.R, raw.ha, raw.hb) == (5.0, 4.0, 3.0)

    @pytest.mark.parametrize("token", [".5", "5.", "+2.5", "1E-3"])
    def test_accepts_plain_decimals(self, token):
        assert MeasurementInput(R=token, ha="0.001", hb="0.001").R == float(token)

    @pytest.mark.parametrize("token", ["1_000", "5,0", "0x10", "5f"])
    def test_rejects_non_decimal_spellings(self, token):
        """Underscore separators and other Python-only forms are not accepted."""
        with pytest.raises(ValidationError):
            MeasurementInput(R=token, ha="4", hb="3")

    def test_rejects_malformed(self):
        with pytest.raises(ValidationError) as info:
            MeasurementInput(R="five", ha="4", hb="3")
        assert info.value.errors()[0]["loc"] == ("R",)

    @pytest.mark.parametrize("token", ["nan", "inf", "-inf"])
    def test_rejects_non_finite(self, token):
        with pytest.raises(ValidationError):
            MeasurementInput(R=token, ha="4", hb="3")

    def test_parse_does_not_check_ordering(self):
        """Ordering is enforced when converting to a Measurement."""
        raw = MeasurementInput(R="5", ha="6", hb="3")
        with pytest.raises(InvalidMeasurementError):
            raw.to_measurement()

    def test_to_measurement(self):
        m = MeasurementInput(R="5", ha="4", hb="3").to_measurement()
        assert (m.R, m.ha, m.hb) == (5.0, 4.0, 3.0)
