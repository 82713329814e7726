"""Main Typer CLI application for coordinate conversion."""

import logging

import typer

app = typer.Typer(
    help="Convert coordinates between DD, DM and DMS and inspect precision drift",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Coordinate conversion tools."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(name)s: %(message)s",
    )


def _register_commands() -> None:
    """
    Import command modules to register commands with the app.

    Commands use the @app.command() decorator, which registers them when the
    module is imported.
    """
    from coordconv.cli import convert, text

    _ = convert
    _ = text


_register_commands()


if __name__ == "__main__":
    app()
