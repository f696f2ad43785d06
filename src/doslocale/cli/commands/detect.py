"""Detect and resolve command implementation."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table

from doslocale.core.country.catalog import DosCountry, lookup_country
from doslocale.core.locale.detector import HostLocaleDetector
from doslocale.core.locale.parser import parse_locale
from doslocale.core.locale.resolver import CountryResolver
from doslocale.core.locale.source import StaticLocaleSource
from doslocale.core.models.config import Config
from doslocale.core.models.locale import LocaleCategory

if TYPE_CHECKING:
    from doslocale.core.interfaces.locale_source import ILocaleSource

console = Console()


class RecordedLocaleSource:
    """Wraps a source and keeps the value returned for each category."""

    def __init__(self, source: ILocaleSource) -> None:
        self._source = source
        self.name = source.name
        self.values: dict[LocaleCategory, str | None] = {}

    def query(self, category: LocaleCategory) -> str | None:
        value = self._source.query(category)
        self.values[category] = value
        return value


def _country_cell(country: DosCountry) -> str:
    return f"{country.display_name} ({country.value})"


def run_detect(config: Config, as_json: bool = False) -> None:
    """Run the detect command."""
    source = RecordedLocaleSource(config.build_source())
    host_locale = HostLocaleDetector(source=source).detect()

    if as_json:
        console.print_json(json.dumps(host_locale.to_dict()))
        return

    table = Table(title=f"Host locale ({source.name})")
    table.add_column("Category", style="cyan")
    table.add_column("Host locale", style="yellow")
    table.add_column("DOS country", style="green")

    rows = (
        ("General", LocaleCategory.GENERAL, host_locale.country),
        ("Numeric", LocaleCategory.NUMERIC, host_locale.numeric),
        ("Time/date", LocaleCategory.TIME, host_locale.time_date),
        ("Currency", LocaleCategory.MONETARY, host_locale.currency),
    )
    for label, category, country in rows:
        table.add_row(label, source.values.get(category) or "-", _country_cell(country))

    console.print(table)


def run_resolve(locale_name: str, fallback: str) -> None:
    """Run the resolve command."""
    fallback_country = lookup_country(fallback)
    parts = parse_locale(locale_name)

    resolver = CountryResolver(StaticLocaleSource(default=locale_name))
    country = resolver.resolve(LocaleCategory.GENERAL, fallback_country)

    console.print(f"[bold]Locale:[/bold] {locale_name}")
    console.print(f"  Language: {parts.language or '-'}")
    console.print(f"  Territory: {parts.territory or '-'}")
    console.print(f"  DOS country: [green]{_country_cell(country)}[/green]")
    matched = resolver.aliases.lookup(parts.language, parts.territory)
    if matched is None and not parts.is_generic:
        console.print("[dim]No alias matched, fallback used[/dim]")
