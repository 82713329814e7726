"""
Display formatting for DD, DM and DMS values.

Output is fixed-point with ASCII digits and '.' as the separator, followed by
a hemisphere letter:

    DD:   48.81666° N
    DM:   48° 48.99972' N
    DMS:  48° 48' 59.98320" N

A component that shows as 60 at the requested precision is carried into the
next component, and a value that shows as all zeros takes the positive letter.
"""

import math
import numbers
from typing import Any, Tuple

from coordconv.axis import Axis, Hemisphere
from coordconv.degree_value import DegreeValue
from coordconv.exceptions import FormatError
from coordconv.precision import MIN_SEXAGESIMAL_PRECISION, round_to
from coordconv.triples import DMSTriple, DMTriple


def _check_precision(precision: Any, minimum: int) -> int:
    if isinstance(precision, bool) or not isinstance(precision, numbers.Integral):
        raise FormatError(f"Precision must be an integer, got {precision!r}")
    if precision < minimum:
        raise FormatError(f"Precision must be at least {minimum}, got {precision}")
    return int(precision)


def _letter(axis: Axis, hemisphere: Hemisphere, *shown: float) -> str:
    if all(value == 0 for value in shown):
        return axis.letter(Hemisphere.POSITIVE)
    return axis.letter(hemisphere)


def format_dd(value: DegreeValue, precision: int) -> str:
    """Format decimal degrees, e.g. "123.50887° W".

    Args:
        value: Degree value to format.
        precision: Digits after the decimal point (0 or more).

    Raises:
        FormatError: If the value is not finite or out of range, or the
            precision is invalid.
    """
    precision = _check_precision(precision, 0)
    if not math.isfinite(value.degrees) or value.magnitude > value.axis.bound:
        raise FormatError(f"Cannot format {value.axis.name.lower()} {value.degrees}")

    shown = round_to(value.magnitude, precision)
    letter = _letter(value.axis, value.hemisphere, shown)
    return f"{shown:.{precision}f}° {letter}"


def format_dm(triple: DMTriple, precision: int) -> str:
    """Format degrees and decimal minutes, e.g. "48° 48.99972' N".

    Raises:
        FormatError: If the triple violates its invariants or precision < 1.
    """
    precision = _check_precision(precision, MIN_SEXAGESIMAL_PRECISION)
    if not triple.is_valid():
        raise FormatError(f"Invalid DM triple: {triple}")

    degrees = triple.degrees
    minutes = round_to(triple.minutes, precision)
    if minutes >= 60:
        minutes = 0.0
        degrees += 1

    letter = _letter(triple.axis, triple.hemisphere, degrees, minutes)
    return f"{degrees}° {minutes:.{precision}f}' {letter}"


def format_dms(triple: DMSTriple, precision: int) -> str:
    """Format degrees, minutes and decimal seconds, e.g. "48° 48' 59.98320\" N".

    Raises:
        FormatError: If the triple violates its invariants or precision < 1.
    """
    precision = _check_precision(precision, MIN_SEXAGESIMAL_PRECISION)
    if not triple.is_valid():
        raise FormatError(f"Invalid DMS triple: {triple}")

    degrees, minutes = triple.degrees, triple.minutes
    seconds = round_to(triple.seconds, precision)
    if seconds >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        degrees += 1

    letter = _letter(triple.axis, triple.hemisphere, degrees, minutes, seconds)
    return f"{degrees}° {minutes}' {seconds:.{precision}f}\" {letter}"


def format_dd_pair(lat: DegreeValue, lon: DegreeValue, precision: int) -> Tuple[str, str]:
    return format_dd(lat, precision), format_dd(lon, precision)


def format_dm_pair(lat: DMTriple, lon: DMTriple, precision: int) -> Tuple[str, str]:
    return format_dm(lat, precision), format_dm(lon, precision)


def format_dms_pair(lat: DMSTriple, lon: DMSTriple, precision: int) -> Tuple[str, str]:
    return format_dms(lat, precision), format_dms(lon, precision)
