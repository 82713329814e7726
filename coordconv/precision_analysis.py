"""
Precision diagnostics for batches of coordinates.

Detects common precision problems in coordinate data:
1. Too few decimal places (fewer than 6 gives > 0.1m error)
2. Arc-second quantization (values that were typed in as DMS)
3. Display drift: how far values move when shown at a given precision and
   parsed back
"""

import logging
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

import numpy as np

from coordconv.coordinate_format import CoordinateFormat
from coordconv.exceptions import CoordinateError
from coordconv.pipeline import round_trip_format
from coordconv.precision import PrecisionSettings
from coordconv.types import Meters
from coordconv.validation import is_finite_number

logger = logging.getLogger(__name__)

MIN_RECOMMENDED_DECIMAL_PLACES = 6
METERS_PER_DEGREE_LAT = 111320  # Approximate meters per degree latitude
ARC_SECOND = 1.0 / 3600.0
QUANTIZATION_TOLERANCE_DEG = 1e-7
QUANTIZED_FRACTION_THRESHOLD = 0.8

# Decimal places of DD -> approximate ground precision in meters
PRECISION_BY_DECIMALS = {
    8: 0.001,
    7: 0.01,
    6: 0.1,
    5: 1.0,
    4: 11.0,
    3: 111.0,
}


@dataclass(frozen=True)
class DriftStatistics:
    """Round trip drift over a batch for one format and precision.

    Attributes:
        format: Display format.
        precision: Decimal places used.
        count: Points that completed the round trip.
        failures: Points whose round trip raised.
        max_drift_deg: Largest per-axis drift in degrees.
        mean_drift_deg: Mean per-axis drift in degrees.
        max_drift_m: Largest ground displacement in meters (equirectangular).
        bound_deg: Theoretical per-axis drift bound for this format/precision.
    """

    format: CoordinateFormat
    precision: int
    count: int
    failures: int
    max_drift_deg: float
    mean_drift_deg: float
    max_drift_m: Meters
    bound_deg: float


@dataclass(frozen=True)
class PrecisionAnalysis:
    """Summary returned by analyze_precision()."""

    decimal_places: Optional[int]
    estimated_precision_m: Optional[float]
    quantization_detected: bool
    drift: Dict[CoordinateFormat, DriftStatistics] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)


def count_decimal_places(value: float) -> int:
    """Count significant decimal places in the shortest repr of a float.

    Examples:
        >>> count_decimal_places(48.816662)
        6
        >>> count_decimal_places(-123.5)
        1
    """
    exponent = Decimal(repr(float(value))).normalize().as_tuple().exponent
    return max(0, -exponent)


def is_arc_second_quantized(values: Sequence[float]) -> bool:
    """True if most values lie on a whole arc-second."""
    arr = np.abs(np.asarray(values, dtype=np.float64))
    if arr.size == 0:
        return False
    seconds = arr / ARC_SECOND
    on_grid = np.abs(seconds - np.round(seconds)) * ARC_SECOND < QUANTIZATION_TOLERANCE_DEG
    return bool(np.count_nonzero(on_grid) > arr.size * QUANTIZED_FRACTION_THRESHOLD)


def drift_statistics(
    lats: Sequence[float],
    lons: Sequence[float],
    fmt: CoordinateFormat,
    precision: int,
) -> DriftStatistics:
    """Round trip every point in `fmt` at `precision` and summarize the drift.

    Args:
        lats: Latitudes in decimal degrees.
        lons: Longitudes in decimal degrees, same length as lats.
        fmt: Display format.
        precision: Decimal places.

    Returns:
        DriftStatistics for the batch.

    Raises:
        ValueError: If lats and lons differ in length.
    """
    if len(lats) != len(lons):
        raise ValueError(f"Got {len(lats)} latitudes but {len(lons)} longitudes")

    sources: List[tuple] = []
    reparsed: List[tuple] = []
    failures = 0
    for lat, lon in zip(lats, lons):
        try:
            outcome = round_trip_format(lat, lon, fmt, precision)
        except CoordinateError as e:
            logger.warning("Skipping (%s, %s) in %s drift analysis: %s", lat, lon, fmt.label, e)
            failures += 1
            continue
        sources.append((lat, lon))
        reparsed.append(outcome.reparsed)

    if not sources:
        return DriftStatistics(fmt, precision, 0, failures, 0.0, 0.0, Meters(0.0), fmt.max_drift(precision))

    src = np.asarray(sources, dtype=np.float64)
    back = np.asarray(reparsed, dtype=np.float64)
    drift = np.abs(back - src)

    cos_lat = np.cos(np.radians(src[:, 0]))
    dy = drift[:, 0] * METERS_PER_DEGREE_LAT
    dx = drift[:, 1] * METERS_PER_DEGREE_LAT * cos_lat
    ground = np.hypot(dx, dy)

    return DriftStatistics(
        format=fmt,
        precision=precision,
        count=len(sources),
        failures=failures,
        max_drift_deg=float(drift.max()),
        mean_drift_deg=float(drift.mean()),
        max_drift_m=Meters(float(ground.max())),
        bound_deg=fmt.max_drift(precision),
    )


def analyze_precision(
    lats: Sequence[float],
    lons: Sequence[float],
    precisions: Optional[PrecisionSettings] = None,
) -> PrecisionAnalysis:
    """Analyze input precision and display drift for a batch of coordinates.

    Args:
        lats: Latitudes in decimal degrees.
        lons: Longitudes in decimal degrees.
        precisions: Display precision per format (defaults to 5 each).

    Returns:
        PrecisionAnalysis with per-format drift and warnings.

    Raises:
        ValueError: If any value is not a finite number.
    """
    bad = [v for v in list(lats) + list(lons) if not is_finite_number(v)]
    if bad:
        raise ValueError(f"Coordinates must be finite numbers, got: {bad!r}")

    if len(lats) == 0:
        return PrecisionAnalysis(decimal_places=None, estimated_precision_m=None, quantization_detected=False)

    precisions = precisions or PrecisionSettings()
    warnings: List[str] = []

    decimal_places = min(count_decimal_places(v) for v in list(lats) + list(lons))
    estimated_precision = PRECISION_BY_DECIMALS.get(
        min(decimal_places, max(PRECISION_BY_DECIMALS)), 1000.0
    )

    quantized = is_arc_second_quantized(lats) or is_arc_second_quantized(lons)
    if quantized:
        estimated_precision = max(estimated_precision, METERS_PER_DEGREE_LAT * ARC_SECOND)

    if decimal_places < MIN_RECOMMENDED_DECIMAL_PLACES:
        warnings.append(
            f"Coordinates have only {decimal_places} decimal places. "
            f"Recommend at least {MIN_RECOMMENDED_DECIMAL_PLACES} for sub-meter precision."
        )
    if quantized:
        warnings.append(
            "Coordinates appear to be arc-second quantized (~30m precision). "
            "They were probably entered as degrees-minutes-seconds."
        )

    drift = {}
    for fmt in CoordinateFormat:
        stats = drift_statistics(lats, lons, fmt, precisions.for_format(fmt))
        drift[fmt] = stats
        if stats.max_drift_m > estimated_precision:
            warnings.append(
                f"{fmt.label} display at {stats.precision} decimals moves points by up to "
                f"{stats.max_drift_m:.3f}m, more than the input precision ({estimated_precision:g}m)."
            )

    return PrecisionAnalysis(
        decimal_places=decimal_places,
        estimated_precision_m=estimated_precision,
        quantization_detected=quantized,
        drift=drift,
        warnings=warnings,
    )
