"""
Coordinate validation.

Pair-level bounds checking used before any conversion is attempted, plus the
finite-number check shared by the parser and formatter.
"""

import logging
import math
import numbers
from typing import Any

from coordconv.exceptions import ValidationError

logger = logging.getLogger(__name__)


MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0

INVALID_COORDINATES_MESSAGE = (
    "Please enter valid coordinates. Latitude must be between -90 and 90, "
    "longitude between -180 and 180."
)


def is_finite_number(value: Any) -> bool:
    """Check if a value is a finite real number (int, float, or numpy numeric).

    Booleans and complex numbers are rejected.

    Args:
        value: Value to check

    Returns:
        True if value is a finite real number, False otherwise
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False

    try:
        return math.isfinite(value)
    except (TypeError, ValueError):
        return False


def is_valid_coordinate(lat: Any, lon: Any) -> bool:
    """Check that lat/lon are finite numbers within their axis ranges.

    Examples:
        >>> is_valid_coordinate(48.816662, -123.508873)
        True
        >>> is_valid_coordinate(91, 0)
        False
    """
    return (
        is_finite_number(lat)
        and is_finite_number(lon)
        and MIN_LATITUDE <= lat <= MAX_LATITUDE
        and MIN_LONGITUDE <= lon <= MAX_LONGITUDE
    )


def validate_coordinate_pair(lat: Any, lon: Any) -> None:
    """Validate a raw (lat, lon) pair before conversion.

    Raises:
        ValidationError: With a single user-facing message if either value is
            not a finite number or is out of range.
    """
    if not is_valid_coordinate(lat, lon):
        logger.debug("Rejected coordinate pair (%r, %r)", lat, lon)
        raise ValidationError(INVALID_COORDINATES_MESSAGE)
