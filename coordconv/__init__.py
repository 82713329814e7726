"""
Coordinate conversion and formatting engine.

Converts latitude/longitude between Decimal Degrees (DD), Degrees-Minutes (DM)
and Degrees-Minutes-Seconds (DMS), formats them at a chosen precision, parses
formatted text back into degrees, and measures the drift that display
precision introduces.

Example Usage:
    >>> from coordconv import parse_pair_to_dd, dd_pair_to_dm, format_dm_pair
    >>> from coordconv import ConversionOptions
    >>>
    >>> lat, lon = parse_pair_to_dd(48.816662, -123.508873)
    >>> lat_dm, lon_dm = dd_pair_to_dm(lat, lon, ConversionOptions(decimals=5))
    >>> format_dm_pair(lat_dm, lon_dm, 5)
    ("48° 48.99972' N", "123° 30.53238' W")
    >>>
    >>> from coordconv import round_trip, PrecisionSettings, CoordinateFormat
    >>> report = round_trip(48.816662, -123.508873, PrecisionSettings(dd=5, dm=5, dms=1))
    >>> report.drift(CoordinateFormat.DMS)

Available Classes:
    Values:
        - Axis, Hemisphere: axis bounds and hemisphere letters
        - DegreeValue: signed decimal degrees on an axis
        - DMTriple, DMSTriple: structured sexagesimal values
        - PrecisionSettings, ConversionOptions: precision per format / per call

    Pipeline:
        - RoundTripReport, FormatOutcome: per-format round trip results
        - DisplayState: immutable display/marker state built by render()
"""

from coordconv.axis import Axis, Hemisphere
from coordconv.coordinate_format import CoordinateFormat
from coordconv.degree_value import DegreeValue
from coordconv.triples import DMTriple, DMSTriple
from coordconv.exceptions import CoordinateError, ParseError, FormatError, ValidationError

from coordconv.precision import PrecisionSettings, resolve_precision, DEFAULT_PRECISION
from coordconv.validation import is_valid_coordinate, validate_coordinate_pair
from coordconv.parser import parse_to_degree_value, parse_pair_to_dd
from coordconv.converter import (
    ConversionOptions,
    to_dm,
    to_dms,
    from_dm,
    from_dms,
    dd_pair_to_dm,
    dd_pair_to_dms,
    dm_pair_to_dd,
    dms_pair_to_dd,
)
from coordconv.formatter import (
    format_dd,
    format_dm,
    format_dms,
    format_dd_pair,
    format_dm_pair,
    format_dms_pair,
)
from coordconv.pipeline import FormatOutcome, RoundTripReport, round_trip, round_trip_format
from coordconv.display import DisplayState, LayerVisibility, MarkerState, render

__all__ = [
    # Values
    'Axis',
    'Hemisphere',
    'CoordinateFormat',
    'DegreeValue',
    'DMTriple',
    'DMSTriple',
    'PrecisionSettings',
    'ConversionOptions',
    'DEFAULT_PRECISION',

    # Errors
    'CoordinateError',
    'ParseError',
    'FormatError',
    'ValidationError',

    # Parsing and validation
    'parse_to_degree_value',
    'parse_pair_to_dd',
    'is_valid_coordinate',
    'validate_coordinate_pair',
    'resolve_precision',

    # Conversion
    'to_dm',
    'to_dms',
    'from_dm',
    'from_dms',
    'dd_pair_to_dm',
    'dd_pair_to_dms',
    'dm_pair_to_dd',
    'dms_pair_to_dd',

    # Formatting
    'format_dd',
    'format_dm',
    'format_dms',
    'format_dd_pair',
    'format_dm_pair',
    'format_dms_pair',

    # Round trip and display
    'FormatOutcome',
    'RoundTripReport',
    'round_trip',
    'round_trip_format',
    'DisplayState',
    'LayerVisibility',
    'MarkerState',
    'render',
]

__version__ = '0.1.0'
