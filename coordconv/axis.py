"""Coordinate axes and hemispheres."""

import math
from enum import Enum

from coordconv.types import Degrees


class Hemisphere(Enum):
    """Side of the equator or prime meridian, expressed as a sign."""

    POSITIVE = 1
    """North for latitude, East for longitude."""

    NEGATIVE = -1
    """South for latitude, West for longitude."""

    @property
    def sign(self) -> int:
        return self.value

    @classmethod
    def of(cls, degrees: float) -> 'Hemisphere':
        """Hemisphere of a signed degree value (-0.0 counts as negative)."""
        if math.copysign(1.0, degrees) < 0:
            return cls.NEGATIVE
        return cls.POSITIVE


class Axis(Enum):
    """Latitude or longitude, with its magnitude bound and hemisphere letters."""

    LATITUDE = "lat"
    LONGITUDE = "lon"

    @property
    def bound(self) -> Degrees:
        """Largest allowed magnitude in degrees."""
        return Degrees(90.0) if self is Axis.LATITUDE else Degrees(180.0)

    @property
    def letters(self) -> tuple[str, str]:
        """(positive, negative) hemisphere letters."""
        return ("N", "S") if self is Axis.LATITUDE else ("E", "W")

    def letter(self, hemisphere: Hemisphere) -> str:
        positive, negative = self.letters
        return positive if hemisphere is Hemisphere.POSITIVE else negative

    def hemisphere_for(self, letter: str) -> Hemisphere:
        """Resolve a hemisphere letter for this axis.

        Args:
            letter: One of the axis letters, case-insensitive.

        Returns:
            The matching Hemisphere.

        Raises:
            KeyError: If the letter does not belong to this axis.
        """
        positive, negative = self.letters
        lookup = {positive: Hemisphere.POSITIVE, negative: Hemisphere.NEGATIVE}
        return lookup[letter.upper()]

    @classmethod
    def parse(cls, name: str) -> 'Axis':
        """Parse 'lat'/'latitude'/'lon'/'longitude' (any case) into an Axis."""
        key = name.strip().lower()
        if key in ("lat", "latitude"):
            return cls.LATITUDE
        if key in ("lon", "lng", "longitude"):
            return cls.LONGITUDE
        raise ValueError(f"Unknown axis '{name}'. Valid options: lat, lon")
