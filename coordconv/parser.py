"""
Coordinate parsing.

Turns raw degrees or DD/DM/DMS text into DegreeValue objects. The shape of the
input is classified once by classify_input() into a NumericInput or TextInput;
resolve() then applies the axis rules to that tagged result.

Supported text forms (hemisphere letter as prefix or suffix, or a sign):
    - "48.816662", "-123.508873", "48.81666° N", "W 123.50887°"
    - "48° 48.99972' N", "123°30.5'W"
    - "48° 48' 59.98320\" N", "-123° 30' 31.94''"
    - "48d 48m 59.9832s N" (letter markers, lower case only)
"""

from __future__ import annotations

import logging
import math
import numbers
import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple, Union

from coordconv.axis import Axis, Hemisphere
from coordconv.coordinate_format import CoordinateFormat
from coordconv.degree_value import DegreeValue
from coordconv.exceptions import ParseError
from coordconv.types import Degrees

logger = logging.getLogger(__name__)

_NUMBER = r"(?:\d+(?:\.\d*)?|\.\d+)"

_COORDINATE_PATTERN = re.compile(
    rf"""
    ^\s*
    (?P<prefix>[NSEWnsew])?\s*
    (?P<sign>[+-])?\s*
    (?P<degrees>{_NUMBER})\s*[°ºd]?
    (?:
        (?<=[°ºd\s])\s*
        (?P<minutes>{_NUMBER})\s*['′’m]
        (?:
            \s*(?P<seconds>{_NUMBER})\s*(?:''|"|″|”|s)
        )?
    )?
    \s*(?P<suffix>[NSEWnsew])?
    \s*$
    """,
    re.VERBOSE,
)

_FORMAT_BY_COMPONENT_COUNT = {
    1: CoordinateFormat.DD,
    2: CoordinateFormat.DM,
    3: CoordinateFormat.DMS,
}


@dataclass(frozen=True)
class NumericInput:
    """Raw signed degrees supplied as a number."""

    degrees: float


@dataclass(frozen=True)
class TextInput:
    """Coordinate text split into its components.

    Attributes:
        format: DD, DM or DMS, from the number of components.
        components: (degrees,), (degrees, minutes) or (degrees, minutes, seconds),
            all non-negative.
        sign: '+', '-' or None if no sign token was given.
        letter: Upper-case hemisphere letter, or None.
        text: The original text, for error messages.
    """

    format: CoordinateFormat
    components: Tuple[float, ...]
    sign: Optional[str]
    letter: Optional[str]
    text: str


ParsedInput = Union[NumericInput, TextInput]


def classify_input(value: Any) -> ParsedInput:
    """Classify raw input as numeric degrees or DD/DM/DMS text.

    Args:
        value: int/float degrees or a coordinate string.

    Returns:
        NumericInput or TextInput.

    Raises:
        ParseError: If the value is not a finite number and not recognizable text.
    """
    if isinstance(value, bool):
        raise ParseError(f"Coordinate must be a number or string, got {type(value).__name__}")

    if isinstance(value, numbers.Real):
        if not math.isfinite(value):
            raise ParseError(f"Coordinate must be finite, got {value}")
        return NumericInput(float(value))

    if not isinstance(value, str):
        raise ParseError(f"Coordinate must be a number or string, got {type(value).__name__}")

    match = _COORDINATE_PATTERN.match(value)
    if not match:
        raise ParseError(f"Unrecognized coordinate format: '{value}'")

    prefix, suffix = match.group("prefix"), match.group("suffix")
    if prefix and suffix:
        raise ParseError(f"Coordinate has two hemisphere letters: '{value}'")

    raw_parts = [
        part for part in (match.group("degrees"), match.group("minutes"), match.group("seconds"))
        if part is not None
    ]
    for part in raw_parts[:-1]:
        if "." in part:
            raise ParseError(
                f"Only the last component may have a fractional part: '{value}'"
            )

    letter = prefix or suffix
    return TextInput(
        format=_FORMAT_BY_COMPONENT_COUNT[len(raw_parts)],
        components=tuple(float(part) for part in raw_parts),
        sign=match.group("sign"),
        letter=letter.upper() if letter else None,
        text=value,
    )


def _text_to_degrees(parsed: TextInput, axis: Axis) -> float:
    components = parsed.components
    if len(components) > 1 and components[1] >= 60:
        raise ParseError(f"Minutes must be less than 60: '{parsed.text}'")
    if len(components) > 2 and components[2] >= 60:
        raise ParseError(f"Seconds must be less than 60: '{parsed.text}'")

    magnitude = components[0]
    if len(components) > 1:
        magnitude += components[1] / 60
    if len(components) > 2:
        magnitude += components[2] / 3600

    hemisphere = Hemisphere.NEGATIVE if parsed.sign == "-" else Hemisphere.POSITIVE
    if parsed.letter is not None:
        try:
            letter_hemisphere = axis.hemisphere_for(parsed.letter)
        except KeyError:
            positive, negative = axis.letters
            raise ParseError(
                f"Hemisphere '{parsed.letter}' is not valid for {axis.name.lower()} "
                f"(expected {positive} or {negative}): '{parsed.text}'"
            ) from None
        if parsed.sign is not None and letter_hemisphere is not hemisphere:
            raise ParseError(
                f"Sign '{parsed.sign}' conflicts with hemisphere '{parsed.letter}': '{parsed.text}'"
            )
        hemisphere = letter_hemisphere

    return hemisphere.sign * magnitude


def resolve(parsed: ParsedInput, axis: Axis) -> DegreeValue:
    """Apply axis rules to a classified input.

    Raises:
        ParseError: On out-of-range components, wrong-axis or conflicting
            hemisphere, or a magnitude beyond the axis bound.
    """
    if isinstance(parsed, NumericInput):
        degrees = parsed.degrees
    else:
        degrees = _text_to_degrees(parsed, axis)

    if not math.isfinite(degrees):
        raise ParseError(f"{axis.name.capitalize()} must be finite, got {degrees}")
    if abs(degrees) > axis.bound:
        raise ParseError(
            f"{axis.name.capitalize()} {degrees} outside valid range "
            f"[{-axis.bound}, {axis.bound}]"
        )
    return DegreeValue(Degrees(degrees), axis)


def parse_to_degree_value(value: Any, axis: Axis) -> DegreeValue:
    """Parse a number, coordinate string or DegreeValue for the given axis.

    Examples:
        >>> parse_to_degree_value("48° 48.99972' N", Axis.LATITUDE).degrees
        48.816662
        >>> parse_to_degree_value(-123.508873, Axis.LONGITUDE).letter
        'W'

    Raises:
        ParseError: If the input is malformed or out of range.
    """
    if isinstance(value, DegreeValue):
        if value.axis is not axis:
            raise ParseError(
                f"Expected a {axis.name.lower()} value, got {value.axis.name.lower()}"
            )
        return value

    parsed = classify_input(value)
    result = resolve(parsed, axis)
    logger.debug("Parsed %r as %s %.10f", value, axis.value, result.degrees)
    return result


def parse_pair_to_dd(lat: Any, lon: Any) -> Tuple[DegreeValue, DegreeValue]:
    """Parse a latitude and a longitude; the first failure aborts the pair.

    Raises:
        ParseError: From whichever axis fails first.
    """
    return (
        parse_to_degree_value(lat, Axis.LATITUDE),
        parse_to_degree_value(lon, Axis.LONGITUDE),
    )
