"""Host locale detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from doslocale.core.country.catalog import DosCountry
from doslocale.core.locale.aliases import DEFAULT_ALIASES
from doslocale.core.locale.resolver import CountryResolver
from doslocale.core.locale.source import SetlocaleLocaleSource
from doslocale.core.models.locale import HostLocale, LocaleCategory

if TYPE_CHECKING:
    from doslocale.core.interfaces.locale_source import ILocaleSource
    from doslocale.core.locale.aliases import TerritoryAliasTable
    from doslocale.core.models.config import Config

logger = structlog.get_logger(__name__)


class HostLocaleDetector:
    """Builds a HostLocale from the host's locale settings.

    The general country is resolved first and seeds the fallback of the
    numeric, time/date and currency categories, so a category the host
    says nothing about follows the general setting.

    Usage:
        detector = HostLocaleDetector()
        host_locale = detector.detect()
    """

    def __init__(
        self,
        source: ILocaleSource | None = None,
        aliases: TerritoryAliasTable | None = None,
    ) -> None:
        """
        Initialize detector.

        Args:
            source: Where to read the host locale, setlocale by default
            aliases: Territory alias table, the built-in one by default
        """
        self.resolver = CountryResolver(
            source or SetlocaleLocaleSource(),
            aliases or DEFAULT_ALIASES,
        )

    @classmethod
    def from_config(cls, config: Config) -> HostLocaleDetector:
        """Create a detector using the configured locale source."""
        return cls(source=config.build_source())

    def detect(self) -> HostLocale:
        """Detect the DOS regional settings of the host."""
        resolve = self.resolver.resolve

        country = resolve(LocaleCategory.GENERAL, DosCountry.INTERNATIONAL)
        host_locale = HostLocale(
            country=country,
            numeric=resolve(LocaleCategory.NUMERIC, country),
            time_date=resolve(LocaleCategory.TIME, country),
            currency=resolve(LocaleCategory.MONETARY, country),
        )

        logger.info(
            "Detected host locale",
            source=self.resolver.source.name,
            country=host_locale.country.name,
            numeric=host_locale.numeric.name,
            time_date=host_locale.time_date.name,
            currency=host_locale.currency.name,
        )
        return host_locale


def detect_host_locale(config: Config | None = None) -> HostLocale:
    """Detect the host locale, optionally with a configured source."""
    if config is None:
        return HostLocaleDetector().detect()
    return HostLocaleDetector.from_config(config).detect()
