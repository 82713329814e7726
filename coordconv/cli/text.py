"""Single-value parse and format commands."""

import typer

from coordconv.axis import Axis
from coordconv.cli.main import app
from coordconv.converter import to_dm, to_dms
from coordconv.coordinate_format import CoordinateFormat
from coordconv.exceptions import CoordinateError
from coordconv.formatter import format_dd, format_dm, format_dms
from coordconv.parser import parse_to_degree_value
from coordconv.precision import resolve_precision


def _axis(name: str) -> Axis:
    try:
        return Axis.parse(name)
    except ValueError as e:
        raise typer.BadParameter(str(e))


@app.command("parse")
def parse_command(
    text: str = typer.Argument(..., help="Coordinate text, e.g. \"48° 48.99972' N\""),
    axis: str = typer.Option("lat", help="Axis: lat or lon"),
) -> None:
    """
    Parse DD, DM or DMS text and print signed decimal degrees.

    Example:
        coordconv parse "123° 30' 31.94\\" W" --axis lon
        coordconv parse -- -48.5 --axis lat
    """
    try:
        value = parse_to_degree_value(text, _axis(axis))
    except CoordinateError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(f"{value.degrees:.8f}")


@app.command("format")
def format_command(
    value: str = typer.Argument(..., help="Coordinate as a number or DD/DM/DMS text"),
    axis: str = typer.Option("lat", help="Axis: lat or lon"),
    to: str = typer.Option("dd", help="Target format: dd, dm or dms"),
    precision: str | None = typer.Option(None, help="Decimal places (default 5)"),
) -> None:
    """
    Format a single coordinate in DD, DM or DMS.

    Example:
        coordconv format 48.816662 --to dms --precision 2
    """
    try:
        fmt = CoordinateFormat.parse(to)
    except ValueError as e:
        raise typer.BadParameter(str(e))
    decimals = resolve_precision(precision, fmt)

    try:
        degrees = parse_to_degree_value(value, _axis(axis))
        if fmt is CoordinateFormat.DD:
            result = format_dd(degrees, decimals)
        elif fmt is CoordinateFormat.DM:
            result = format_dm(to_dm(degrees, decimals), decimals)
        else:
            result = format_dms(to_dms(degrees, decimals), decimals)
    except CoordinateError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    typer.echo(result)
