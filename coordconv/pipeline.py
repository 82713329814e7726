"""
Per-format round trip: convert, format, re-parse.

For one raw (lat, lon) sample, each display format runs its own pipeline:

    raw pair -> DegreeValue pair -> (DD | DM | DMS at precision) -> display strings
             -> parse the display strings -> re-parsed (lat, lon)

The display strings are the lossy representation; re-parsing them (rather
than reusing the rounded triples) is what exposes the drift introduced by the
chosen precision. A failure in one format is recorded on that format's
outcome and does not affect the others.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from coordconv.coordinate_format import CoordinateFormat
from coordconv.converter import ConversionOptions, dd_pair_to_dm, dd_pair_to_dms
from coordconv.exceptions import CoordinateError
from coordconv.formatter import format_dd_pair, format_dm_pair, format_dms_pair
from coordconv.parser import parse_pair_to_dd
from coordconv.precision import PrecisionSettings
from coordconv.validation import validate_coordinate_pair

logger = logging.getLogger(__name__)

CONVERSION_ERROR_TEXT = "Conversion error"

LatLon = Tuple[float, float]


@dataclass(frozen=True)
class FormatOutcome:
    """Result of one format's round trip.

    Exactly one of (display, reparsed) or error is populated.

    Attributes:
        format: The display format.
        precision: Decimal places used.
        display: (lat_text, lon_text) display strings.
        reparsed: (lat, lon) degrees parsed back from the display strings.
        error: Error message if the pipeline failed.
    """

    format: CoordinateFormat
    precision: int
    display: Optional[Tuple[str, str]] = None
    reparsed: Optional[LatLon] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def display_text(self) -> str:
        """Comma-joined display strings, or the conversion error placeholder."""
        if not self.ok or self.display is None:
            return CONVERSION_ERROR_TEXT
        return f"{self.display[0]}, {self.display[1]}"


@dataclass(frozen=True)
class RoundTripReport:
    """Round trip results for all formats of a single sample."""

    source: LatLon
    outcomes: Dict[CoordinateFormat, FormatOutcome] = field(default_factory=dict)

    def __getitem__(self, fmt: CoordinateFormat) -> FormatOutcome:
        return self.outcomes[fmt]

    def drift(self, fmt: CoordinateFormat) -> Optional[LatLon]:
        """Absolute (lat, lon) drift in degrees, or None if the format failed."""
        outcome = self.outcomes[fmt]
        if outcome.reparsed is None:
            return None
        return (
            abs(outcome.reparsed[0] - self.source[0]),
            abs(outcome.reparsed[1] - self.source[1]),
        )


def format_pair(lat: Any, lon: Any, fmt: CoordinateFormat, precision: int) -> Tuple[str, str]:
    """Parse a raw pair and format it in `fmt` at `precision`.

    Raises:
        ParseError: If either input cannot be parsed.
        FormatError: If the converted values cannot be formatted.
    """
    lat_dd, lon_dd = parse_pair_to_dd(lat, lon)

    if fmt is CoordinateFormat.DD:
        return format_dd_pair(lat_dd, lon_dd, precision)

    options = ConversionOptions(decimals=precision)
    if fmt is CoordinateFormat.DM:
        lat_dm, lon_dm = dd_pair_to_dm(lat_dd, lon_dd, options)
        return format_dm_pair(lat_dm, lon_dm, precision)

    lat_dms, lon_dms = dd_pair_to_dms(lat_dd, lon_dd, options)
    return format_dms_pair(lat_dms, lon_dms, precision)


def round_trip_format(lat: Any, lon: Any, fmt: CoordinateFormat, precision: int) -> FormatOutcome:
    """Run one format's pipeline; errors propagate to the caller.

    Raises:
        CoordinateError: ParseError or FormatError from any step.
    """
    display = format_pair(lat, lon, fmt, precision)
    lat_back, lon_back = parse_pair_to_dd(*display)
    logger.debug(
        "%s round trip at %d decimals: %s -> (%.10f, %.10f)",
        fmt.label, precision, display, lat_back.degrees, lon_back.degrees,
    )
    return FormatOutcome(
        format=fmt,
        precision=precision,
        display=display,
        reparsed=(lat_back.degrees, lon_back.degrees),
    )


def round_trip(
    lat: Any,
    lon: Any,
    precisions: Optional[PrecisionSettings] = None,
) -> RoundTripReport:
    """Round trip a (lat, lon) sample through DD, DM and DMS.

    Args:
        lat: Latitude in signed decimal degrees.
        lon: Longitude in signed decimal degrees.
        precisions: Decimal places per format (defaults to 5 for each).

    Returns:
        RoundTripReport with one FormatOutcome per format.

    Raises:
        ValidationError: If the pair is not a valid coordinate. No format is
            processed in that case.
    """
    validate_coordinate_pair(lat, lon)
    precisions = precisions or PrecisionSettings()

    outcomes: Dict[CoordinateFormat, FormatOutcome] = {}
    for fmt in CoordinateFormat:
        precision = precisions.for_format(fmt)
        try:
            outcomes[fmt] = round_trip_format(lat, lon, fmt, precision)
        except CoordinateError as e:
            logger.error("Error converting coordinates to %s format: %s", fmt.label, e)
            outcomes[fmt] = FormatOutcome(format=fmt, precision=precision, error=str(e))

    return RoundTripReport(source=(float(lat), float(lon)), outcomes=outcomes)
