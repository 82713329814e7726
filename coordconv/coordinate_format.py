"""Supported textual coordinate formats."""

from enum import Enum


class CoordinateFormat(Enum):
    """Display formats, in the order the round trip processes them."""

    DD = "dd"
    """Decimal degrees: 48.81666° N"""

    DM = "dm"
    """Degrees and decimal minutes: 48° 48.99972' N"""

    DMS = "dms"
    """Degrees, minutes and decimal seconds: 48° 48' 59.98320\" N"""

    @property
    def label(self) -> str:
        return self.name

    @property
    def units_per_degree(self) -> int:
        """How many units of the last displayed component make one degree."""
        return {CoordinateFormat.DD: 1, CoordinateFormat.DM: 60, CoordinateFormat.DMS: 3600}[self]

    def max_drift(self, precision: int) -> float:
        """Largest drift in degrees that rounding to `precision` digits can introduce."""
        return 0.5 * 10 ** -precision / self.units_per_degree

    @classmethod
    def parse(cls, name: str) -> 'CoordinateFormat':
        try:
            return cls(name.strip().lower())
        except ValueError:
            valid = ", ".join(f.value for f in cls)
            raise ValueError(f"Unknown format '{name}'. Valid options: {valid}") from None
