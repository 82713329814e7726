"""Exception hierarchy for coordinate parsing, formatting and validation."""


class CoordinateError(ValueError):
    """Base class for all coordconv errors."""


class ParseError(CoordinateError):
    """Raised when numeric or textual coordinate input is malformed or out of range."""


class FormatError(CoordinateError):
    """Raised when a value or triple cannot be formatted for display."""


class ValidationError(CoordinateError):
    """Raised by the pair-level bounds check before any conversion runs."""
