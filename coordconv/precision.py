"""
Display precision handling.

Precision values usually come from free-form fields, so they are read the way
a form reads an integer: leading digits only, anything else is "not a number".
DD and the sexagesimal formats fall back differently:

    DD:      not a number or <= 0  -> DEFAULT_PRECISION
    DM/DMS:  not a number or 0     -> DEFAULT_PRECISION, then at least 1
"""

import math
import numbers
import re
from dataclasses import dataclass
from typing import Any, Optional

from coordconv.coordinate_format import CoordinateFormat
from coordconv.types import Decimals

DEFAULT_PRECISION = 5
MIN_SEXAGESIMAL_PRECISION = 1

_LEADING_INTEGER = re.compile(r'^\s*([+-]?\d+)')


def read_integer(raw: Any) -> Optional[int]:
    """Read an integer from a form-style value.

    Args:
        raw: int, float (truncated toward zero), string (leading integer), or None.

    Returns:
        The integer, or None if raw holds no leading integer.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, numbers.Integral):
        return int(raw)
    if isinstance(raw, numbers.Real):
        if not math.isfinite(raw):
            return None
        return int(raw)
    match = _LEADING_INTEGER.match(str(raw))
    return int(match.group(1)) if match else None


def resolve_precision(raw: Any, fmt: CoordinateFormat) -> Decimals:
    """Resolve a raw precision value for a format.

    Examples:
        >>> resolve_precision("abc", CoordinateFormat.DD)
        5
        >>> resolve_precision(-3, CoordinateFormat.DD)
        5
        >>> resolve_precision(-3, CoordinateFormat.DMS)
        1
        >>> resolve_precision("7 digits", CoordinateFormat.DM)
        7
    """
    value = read_integer(raw)
    if fmt is CoordinateFormat.DD:
        if value is None or value <= 0:
            return Decimals(DEFAULT_PRECISION)
        return Decimals(value)

    if not value:
        value = DEFAULT_PRECISION
    return Decimals(max(MIN_SEXAGESIMAL_PRECISION, value))


def round_to(value: float, decimals: Optional[int]) -> float:
    """Round to `decimals` places; None leaves the value untouched."""
    if decimals is None:
        return value
    return round(value, decimals)


@dataclass(frozen=True)
class PrecisionSettings:
    """Decimal places per display format, shared by latitude and longitude.

    Attributes:
        dd: Digits after the point for decimal degrees.
        dm: Digits after the point for minutes.
        dms: Digits after the point for seconds.
    """

    dd: Decimals = Decimals(DEFAULT_PRECISION)
    dm: Decimals = Decimals(DEFAULT_PRECISION)
    dms: Decimals = Decimals(DEFAULT_PRECISION)

    @classmethod
    def from_raw(cls, dd: Any = None, dm: Any = None, dms: Any = None) -> 'PrecisionSettings':
        """Build settings from unvalidated values, applying the fallback rules."""
        return cls(
            dd=resolve_precision(dd, CoordinateFormat.DD),
            dm=resolve_precision(dm, CoordinateFormat.DM),
            dms=resolve_precision(dms, CoordinateFormat.DMS),
        )

    def for_format(self, fmt: CoordinateFormat) -> Decimals:
        return getattr(self, fmt.value)
