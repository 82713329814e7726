"""Round trip and precision analysis commands."""

from pathlib import Path

import typer
import yaml

from coordconv.cli.main import app
from coordconv.config import CoordConfig, get_default_config
from coordconv.coordinate_format import CoordinateFormat
from coordconv.display import render
from coordconv.exceptions import ValidationError
from coordconv.pipeline import round_trip
from coordconv.precision import PrecisionSettings
from coordconv.precision_analysis import analyze_precision
from coordconv.validation import is_finite_number


def _load_config(config: Path | None) -> CoordConfig:
    if config is None:
        return get_default_config()
    try:
        return CoordConfig.from_yaml(config)
    except (FileNotFoundError, ValueError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)


@app.command("convert")
def convert_command(
    lat: float | None = typer.Option(None, help="Latitude in decimal degrees"),
    lon: float | None = typer.Option(None, help="Longitude in decimal degrees"),
    dd_precision: str | None = typer.Option(None, help="Decimal places for DD (default 5)"),
    dm_precision: str | None = typer.Option(None, help="Decimal places for DM minutes (min 1)"),
    dms_precision: str | None = typer.Option(None, help="Decimal places for DMS seconds (min 1)"),
    config: Path | None = typer.Option(None, help="YAML configuration file"),
) -> None:
    """
    Show a coordinate in DD, DM and DMS, and where each display parses back to.

    Without --lat/--lon the configured default location is used. Precision
    options override the configuration.

    Example:
        coordconv convert --lat 48.816662 --lon -123.508873
        coordconv convert --lat 48.816662 --lon -123.508873 --dms-precision 1
    """
    cfg = _load_config(config)

    if (lat is None) != (lon is None):
        typer.echo("Error: --lat and --lon must be given together", err=True)
        raise typer.Exit(1)
    if lat is None:
        lat, lon = cfg.default_location

    precisions = PrecisionSettings.from_raw(
        dd=dd_precision if dd_precision is not None else cfg.precision.dd,
        dm=dm_precision if dm_precision is not None else cfg.precision.dm,
        dms=dms_precision if dms_precision is not None else cfg.precision.dms,
    )

    try:
        report = round_trip(lat, lon, precisions)
    except ValidationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)

    state = render(report, cfg.layers)

    typer.echo(f"Input: {state.input_text}")
    for fmt in CoordinateFormat:
        typer.echo(f"{fmt.label} ({precisions.for_format(fmt)}): {state.format_texts[fmt]}")
    typer.echo("")
    for layer, marker in state.markers.items():
        if marker.visible:
            typer.echo(f"  [{layer}] {marker.tooltip}")


@app.command("analyze")
def analyze_command(
    points_file: Path = typer.Argument(..., help="YAML file with a 'points' list of {lat, lon}"),
    config: Path | None = typer.Option(None, help="YAML configuration file"),
) -> None:
    """
    Report input precision and display drift for a batch of points.

    The points file looks like:

        points:
          - lat: 48.816662
            lon: -123.508873
          - lat: 39.640472
            lon: -0.230194
    """
    cfg = _load_config(config)

    try:
        with open(points_file, 'r') as f:
            data = yaml.safe_load(f) or {}
        points = data['points']
        lats = [point['lat'] for point in points]
        lons = [point['lon'] for point in points]
    except FileNotFoundError:
        typer.echo(f"Error: Points file not found: {points_file}", err=True)
        raise typer.Exit(1)
    except (yaml.YAMLError, KeyError, TypeError) as e:
        typer.echo(f"Error: Failed to load points: {e}", err=True)
        raise typer.Exit(1)

    for i, (lat, lon) in enumerate(zip(lats, lons), start=1):
        if not (is_finite_number(lat) and is_finite_number(lon)):
            typer.echo(
                f"Error: Point {i} must have numeric lat/lon, got lat={lat!r}, lon={lon!r}",
                err=True,
            )
            raise typer.Exit(1)

    analysis = analyze_precision(lats, lons, cfg.precision)

    typer.echo(f"Points: {len(lats)}")
    typer.echo(f"Decimal places: {analysis.decimal_places}")
    typer.echo(f"Estimated precision: {analysis.estimated_precision_m}m")
    typer.echo(f"Arc-second quantized: {'yes' if analysis.quantization_detected else 'no'}")
    for fmt, stats in analysis.drift.items():
        typer.echo(
            f"{fmt.label} ({stats.precision}): max drift {stats.max_drift_deg:.3e}° "
            f"(bound {stats.bound_deg:.3e}°), {stats.max_drift_m:.4f}m, "
            f"{stats.failures} failed"
        )
    for warning in analysis.warnings:
        typer.echo(f"Warning: {warning}")
