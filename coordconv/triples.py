"""Structured degrees-minutes and degrees-minutes-seconds values."""

from __future__ import annotations

import math
from dataclasses import dataclass

from coordconv.axis import Axis, Hemisphere
from coordconv.types import Minutes, Seconds


@dataclass(frozen=True)
class DMTriple:
    """Degrees and decimal minutes.

    Triples do not validate on construction so that defective values can be
    detected downstream; see is_valid().

    Attributes:
        degrees: Whole degrees of the magnitude.
        minutes: Decimal minutes, 0 <= minutes < 60.
        hemisphere: Sign of the value.
        axis: Axis the value belongs to.
    """

    degrees: int
    minutes: Minutes
    hemisphere: Hemisphere
    axis: Axis

    @property
    def sign(self) -> int:
        return self.hemisphere.sign

    @property
    def letter(self) -> str:
        return self.axis.letter(self.hemisphere)

    def is_valid(self) -> bool:
        """True if components are in range and the magnitude fits the axis."""
        if not math.isfinite(self.minutes):
            return False
        if self.degrees < 0 or not 0 <= self.minutes < 60:
            return False
        return self.degrees + self.minutes / 60 <= self.axis.bound


@dataclass(frozen=True)
class DMSTriple:
    """Degrees, whole minutes and decimal seconds.

    Attributes:
        degrees: Whole degrees of the magnitude.
        minutes: Whole minutes, 0-59.
        seconds: Decimal seconds, 0 <= seconds < 60.
        hemisphere: Sign of the value.
        axis: Axis the value belongs to.
    """

    degrees: int
    minutes: int
    seconds: Seconds
    hemisphere: Hemisphere
    axis: Axis

    @property
    def sign(self) -> int:
        return self.hemisphere.sign

    @property
    def letter(self) -> str:
        return self.axis.letter(self.hemisphere)

    def is_valid(self) -> bool:
        """True if components are in range and the magnitude fits the axis."""
        if not math.isfinite(self.seconds):
            return False
        if self.degrees < 0 or not 0 <= self.minutes <= 59:
            return False
        if not 0 <= self.seconds < 60:
            return False
        return self.degrees + self.minutes / 60 + self.seconds / 3600 <= self.axis.bound
