"""Signed decimal-degree value bound to an axis."""

from __future__ import annotations

import math
from dataclasses import dataclass

from coordconv.axis import Axis, Hemisphere
from coordconv.types import Degrees


@dataclass(frozen=True)
class DegreeValue:
    """A latitude or longitude in signed decimal degrees.

    The hemisphere is derived from the sign: negative values lie south of the
    equator (latitude) or west of the prime meridian (longitude).

    Attributes:
        degrees: Signed decimal degrees. Must be finite and within the axis bound.
        axis: The axis this value belongs to.

    Raises:
        ValueError: If degrees is not finite or exceeds the axis bound.
    """

    degrees: Degrees
    axis: Axis

    def __post_init__(self) -> None:
        if not math.isfinite(self.degrees):
            raise ValueError(f"{self.axis.name.lower()} must be finite, got {self.degrees}")
        if abs(self.degrees) > self.axis.bound:
            raise ValueError(
                f"{self.axis.name.lower()} {self.degrees} outside valid range "
                f"[{-self.axis.bound}, {self.axis.bound}]"
            )

    @classmethod
    def latitude(cls, degrees: float) -> DegreeValue:
        return cls(Degrees(float(degrees)), Axis.LATITUDE)

    @classmethod
    def longitude(cls, degrees: float) -> DegreeValue:
        return cls(Degrees(float(degrees)), Axis.LONGITUDE)

    @property
    def hemisphere(self) -> Hemisphere:
        return Hemisphere.of(self.degrees)

    @property
    def magnitude(self) -> Degrees:
        """Absolute value of degrees."""
        return Degrees(abs(self.degrees))

    @property
    def letter(self) -> str:
        """Hemisphere letter (N/S/E/W)."""
        return self.axis.letter(self.hemisphere)
