"""
Conversions between decimal degrees and structured DM/DMS triples.

All functions are pure. Rounding, when requested, is applied to the last
component (minutes for DM, seconds for DMS) and any overflow is carried:

    seconds >= 60  ->  seconds = 0, minutes += 1
    minutes >= 60  ->  minutes = 0, degrees += 1

so 10° 14' 59.996" at 2 decimals becomes 10° 15' 0.00", never 60.00".
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from coordconv.axis import Hemisphere
from coordconv.degree_value import DegreeValue
from coordconv.precision import round_to
from coordconv.triples import DMSTriple, DMTriple
from coordconv.types import Degrees, Minutes, Seconds


@dataclass(frozen=True)
class ConversionOptions:
    """Options shared by both axes of a pair conversion.

    Attributes:
        decimals: Digits to round the last component to. None keeps full precision.
    """

    decimals: Optional[int] = None


def _triple_hemisphere(hemisphere: Hemisphere, *components: float) -> Hemisphere:
    # An all-zero triple has no side; keep it positive so it never shows as "0° S".
    if all(component == 0 for component in components):
        return Hemisphere.POSITIVE
    return hemisphere


def to_dm(value: DegreeValue, decimals: Optional[int] = None) -> DMTriple:
    """Convert decimal degrees to degrees and decimal minutes.

    Args:
        value: Validated degree value.
        decimals: Round minutes to this many places, carrying into degrees.

    Returns:
        DMTriple with 0 <= minutes < 60.
    """
    magnitude = value.magnitude
    degrees = math.floor(magnitude)
    minutes = round_to((magnitude - degrees) * 60, decimals)

    if minutes >= 60:
        minutes = 0.0
        degrees += 1

    return DMTriple(
        degrees=int(degrees),
        minutes=Minutes(minutes),
        hemisphere=_triple_hemisphere(value.hemisphere, degrees, minutes),
        axis=value.axis,
    )


def to_dms(value: DegreeValue, decimals: Optional[int] = None) -> DMSTriple:
    """Convert decimal degrees to degrees, whole minutes and decimal seconds.

    Args:
        value: Validated degree value.
        decimals: Round seconds to this many places, carrying into minutes
            and degrees.

    Returns:
        DMSTriple with 0 <= minutes <= 59 and 0 <= seconds < 60.
    """
    magnitude = value.magnitude
    degrees = math.floor(magnitude)
    total_minutes = (magnitude - degrees) * 60
    minutes = math.floor(total_minutes)
    seconds = round_to((total_minutes - minutes) * 60, decimals)

    if seconds >= 60:
        seconds = 0.0
        minutes += 1
    if minutes >= 60:
        minutes = 0
        degrees += 1

    return DMSTriple(
        degrees=int(degrees),
        minutes=int(minutes),
        seconds=Seconds(seconds),
        hemisphere=_triple_hemisphere(value.hemisphere, degrees, minutes, seconds),
        axis=value.axis,
    )


def from_dm(triple: DMTriple) -> DegreeValue:
    """sign * (degrees + minutes / 60)"""
    return DegreeValue(Degrees(triple.sign * (triple.degrees + triple.minutes / 60)), triple.axis)


def from_dms(triple: DMSTriple) -> DegreeValue:
    """sign * (degrees + minutes / 60 + seconds / 3600)"""
    magnitude = triple.degrees + triple.minutes / 60 + triple.seconds / 3600
    return DegreeValue(Degrees(triple.sign * magnitude), triple.axis)


def dd_pair_to_dm(
    lat: DegreeValue, lon: DegreeValue, options: Optional[ConversionOptions] = None
) -> Tuple[DMTriple, DMTriple]:
    decimals = options.decimals if options else None
    return to_dm(lat, decimals), to_dm(lon, decimals)


def dd_pair_to_dms(
    lat: DegreeValue, lon: DegreeValue, options: Optional[ConversionOptions] = None
) -> Tuple[DMSTriple, DMSTriple]:
    decimals = options.decimals if options else None
    return to_dms(lat, decimals), to_dms(lon, decimals)


def dm_pair_to_dd(lat: DMTriple, lon: DMTriple) -> Tuple[DegreeValue, DegreeValue]:
    return from_dm(lat), from_dm(lon)


def dms_pair_to_dd(lat: DMSTriple, lon: DMSTriple) -> Tuple[DegreeValue, DegreeValue]:
    return from_dms(lat), from_dms(lon)
