#!/usr/bin/env python3
"""
Property-based tests for conversion, formatting and parsing using Hypothesis.

Properties verified:
1. Lossless conversion: from_dm(to_dm(v)) == v and from_dms(to_dms(v)) == v
   within floating-point epsilon when no rounding is applied.
2. Triple invariants: rounded triples always satisfy 0 <= minutes < 60 and
   0 <= seconds < 60 (the carry rule never leaves a 60).
3. Bounded drift: re-parsing a display string moves a value by at most
   half a unit in the last displayed place:
       DD:  0.5 * 10^-p
       DM:  0.5 * 10^-p / 60
       DMS: 0.5 * 10^-p / 3600
4. Idempotence: format(parse(format(x))) == format(x) at the same precision.
5. Sign/hemisphere equivalence: the signed and letter forms parse identically.
"""

from decimal import Decimal

from hypothesis import given, settings, strategies as st

from coordconv.axis import Axis
from coordconv.converter import from_dm, from_dms, to_dm, to_dms
from coordconv.coordinate_format import CoordinateFormat
from coordconv.degree_value import DegreeValue
from coordconv.formatter import format_dd, format_dm, format_dms
from coordconv.parser import parse_to_degree_value
from coordconv.pipeline import round_trip_format

# Floating-point noise allowed on top of the theoretical drift bound
EPSILON = 1e-12

latitude_strategy = st.floats(min_value=-90.0, max_value=90.0, allow_nan=False, allow_infinity=False)
longitude_strategy = st.floats(min_value=-180.0, max_value=180.0, allow_nan=False, allow_infinity=False)
precision_strategy = st.integers(min_value=1, max_value=8)
format_strategy = st.sampled_from(list(CoordinateFormat))


@st.composite
def degree_values(draw):
    """Generate a DegreeValue on either axis."""
    axis = draw(st.sampled_from(list(Axis)))
    strategy = latitude_strategy if axis is Axis.LATITUDE else longitude_strategy
    return DegreeValue(draw(strategy), axis)


def _format(value: DegreeValue, fmt: CoordinateFormat, precision: int) -> str:
    if fmt is CoordinateFormat.DD:
        return format_dd(value, precision)
    if fmt is CoordinateFormat.DM:
        return format_dm(to_dm(value, precision), precision)
    return format_dms(to_dms(value, precision), precision)


class TestConversionProperties:

    @given(degree_values())
    @settings(max_examples=300)
    def test_dm_lossless_without_rounding(self, value):
        """Property: from_dm(to_dm(v)) == v within epsilon."""
        assert abs(from_dm(to_dm(value)).degrees - value.degrees) <= EPSILON

    @given(degree_values())
    @settings(max_examples=300)
    def test_dms_lossless_without_rounding(self, value):
        """Property: from_dms(to_dms(v)) == v within epsilon."""
        assert abs(from_dms(to_dms(value)).degrees - value.degrees) <= EPSILON

    @given(degree_values(), precision_strategy)
    @settings(max_examples=300)
    def test_rounded_triples_stay_valid(self, value, precision):
        """Property: carried triples satisfy their component invariants."""
        dm = to_dm(value, precision)
        dms = to_dms(value, precision)

        assert 0 <= dm.minutes < 60
        assert 0 <= dms.minutes <= 59
        assert 0 <= dms.seconds < 60
        assert dm.is_valid()
        assert dms.is_valid()


class TestDisplayProperties:

    @given(latitude_strategy, longitude_strategy, format_strategy, precision_strategy)
    @settings(max_examples=300)
    def test_drift_is_bounded(self, lat, lon, fmt, precision):
        """Property: |reparsed - original| <= half a unit in the last place."""
        outcome = round_trip_format(lat, lon, fmt, precision)
        bound = fmt.max_drift(precision) + EPSILON

        assert abs(outcome.reparsed[0] - lat) <= bound
        assert abs(outcome.reparsed[1] - lon) <= bound

    @given(degree_values(), format_strategy, precision_strategy)
    @settings(max_examples=300)
    def test_format_parse_format_is_idempotent(self, value, fmt, precision):
        """Property: format(parse(format(x))) == format(x)."""
        text = _format(value, fmt, precision)
        reparsed = parse_to_degree_value(text, value.axis)

        assert _format(reparsed, fmt, precision) == text

    @given(degree_values())
    @settings(max_examples=200)
    def test_sign_and_letter_forms_agree(self, value):
        """Property: '-12.5' and '12.5 S' denote the same value."""
        # positional notation; the text grammar has no exponents
        magnitude = format(Decimal(repr(abs(value.degrees))), "f")
        signed = ("-" if value.degrees < 0 else "") + magnitude
        lettered = f"{magnitude} {value.letter}"

        by_sign = parse_to_degree_value(signed, value.axis)
        by_letter = parse_to_degree_value(lettered, value.axis)

        assert by_sign.degrees == by_letter.degrees == value.degrees
