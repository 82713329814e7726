"""
Unit type annotations for coordinate components.

NewType aliases used across coordconv so that function signatures document
which angular unit a number carries. They are erased at runtime.

Usage Example:
    >>> from coordconv.types import Degrees, Minutes, Decimals
    >>>
    >>> def minutes_of(value: Degrees) -> Minutes:
    ...     return Minutes((abs(value) % 1) * 60)
"""

from typing import NewType

# Angular units
Degrees = NewType('Degrees', float)
"""Signed angle in decimal degrees (latitude or longitude)"""

Minutes = NewType('Minutes', float)
"""Arc-minutes, 1/60 of a degree"""

Seconds = NewType('Seconds', float)
"""Arc-seconds, 1/3600 of a degree"""

# Display
Decimals = NewType('Decimals', int)
"""Number of digits shown after the decimal point"""

Meters = NewType('Meters', float)
"""Ground distance in meters (used for approximate drift reporting)"""
