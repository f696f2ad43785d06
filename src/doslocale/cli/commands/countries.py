"""Countries command implementation."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

from doslocale.core.country.catalog import DosCountry
from doslocale.core.locale.aliases import DEFAULT_ALIASES

console = Console()


def list_countries() -> None:
    """List DOS countries with the territories mapping to them."""
    table = Table(title="DOS countries")
    table.add_column("Code", style="dim", justify="right")
    table.add_column("Country", style="cyan")
    table.add_column("Territories", style="yellow")

    for country in DosCountry:
        aliases = DEFAULT_ALIASES.aliases_for(country)
        table.add_row(
            str(country.value),
            country.display_name,
            ", ".join(aliases) or "-",
        )

    console.print(table)
    console.print(f"[dim]{len(DosCountry)} countries[/dim]")
