"""Main CLI application."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Annotated

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console

from doslocale import __version__
from doslocale.core.country.catalog import UnknownCountryError
from doslocale.core.models.config import Config

# Create main app
app = typer.Typer(
    name="doslocale",
    help="Map the host locale to DOS country settings",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        console.print(f"[bold blue]doslocale[/bold blue] v{__version__}")
        raise typer.Exit()


def configure_logging(level: str) -> None:
    """Set the structlog level for the whole process.

    Logs go to stderr so command output such as JSON stays parseable.
    """
    structlog.configure(
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level),
        ),
    )


def load_config(config_file: Path | None) -> Config:
    """Load configuration, reporting problems as a CLI error."""
    try:
        if config_file is None:
            return Config()
        return Config.from_yaml(config_file)
    except (FileNotFoundError, ValidationError) as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1) from None


def apply_logging(ctx: typer.Context, settings: Config) -> None:
    """Configure logging from settings, --verbose wins."""
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    configure_logging("DEBUG" if verbose else settings.logs.level)


@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log resolution details"),
    ] = False,
) -> None:
    """doslocale - DOS country detection from the host locale."""
    ctx.obj = {"verbose": verbose}
    apply_logging(ctx, load_config(None))


@app.command()
def detect(
    ctx: typer.Context,
    source: Annotated[
        str | None,
        typer.Option("--source", "-s", help="Locale source (setlocale, environment)"),
    ] = None,
    config: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Config file path"),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print JSON instead of a table"),
    ] = False,
) -> None:
    """Detect DOS country settings from the host locale."""
    from doslocale.cli.commands.detect import run_detect

    settings = load_config(config)
    apply_logging(ctx, settings)
    if source is not None:
        if source not in ("setlocale", "environment"):
            console.print(f"[red]Unknown source: {source}[/red]")
            console.print("Available sources: setlocale, environment")
            raise typer.Exit(code=1)
        settings.detection.source = source

    run_detect(settings, as_json=as_json)


@app.command()
def resolve(
    locale_name: Annotated[
        str,
        typer.Argument(help="Locale identifier, e.g. 'de_DE.UTF-8'"),
    ],
    fallback: Annotated[
        str,
        typer.Option("--fallback", "-f", help="Country used when nothing matches"),
    ] = "INTERNATIONAL",
) -> None:
    """Resolve a single locale identifier to a DOS country."""
    from doslocale.cli.commands.detect import run_resolve

    try:
        run_resolve(locale_name, fallback)
    except UnknownCountryError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1) from None


@app.command()
def countries() -> None:
    """List the known DOS countries."""
    from doslocale.cli.commands.countries import list_countries

    list_countries()


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
