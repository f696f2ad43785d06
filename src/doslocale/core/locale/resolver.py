"""Per-category DOS country resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from doslocale.core.country.catalog import DosCountry
from doslocale.core.locale.aliases import DEFAULT_ALIASES, TerritoryAliasTable
from doslocale.core.locale.parser import parse_locale

if TYPE_CHECKING:
    from doslocale.core.interfaces.locale_source import ILocaleSource
    from doslocale.core.models.locale import LocaleCategory

logger = structlog.get_logger(__name__)


class CountryResolver:
    """Turns a host locale into a DOS country.

    Nothing here raises: a missing locale or an unknown territory gives
    back the fallback, a C/POSIX locale gives INTERNATIONAL.
    """

    def __init__(
        self,
        source: ILocaleSource,
        aliases: TerritoryAliasTable = DEFAULT_ALIASES,
    ) -> None:
        self.source = source
        self.aliases = aliases

    def resolve(self, category: LocaleCategory, fallback: DosCountry) -> DosCountry:
        """
        Resolve the DOS country for one locale category.

        Args:
            category: Locale facet to query
            fallback: Returned when the host gives no usable answer

        Returns:
            Resolved DOS country
        """
        value = self.source.query(category)
        if not value:
            logger.debug(
                "No host locale, using fallback",
                category=category.value,
                source=self.source.name,
                country=fallback.name,
            )
            return fallback

        country = self.resolve_locale(value, fallback)
        logger.debug(
            "Resolved DOS country",
            category=category.value,
            locale=value,
            country=country.name,
        )
        return country

    def resolve_locale(self, value: str | None, fallback: DosCountry) -> DosCountry:
        """Resolve a locale identifier without querying the host."""
        if not value:
            return fallback

        parts = parse_locale(value)
        if parts.is_generic:
            return DosCountry.INTERNATIONAL

        country = self.aliases.lookup(parts.language, parts.territory)
        if country is None:
            return fallback
        return country
