"""Host locale to DOS country resolution."""

from doslocale.core.locale.aliases import (
    DEFAULT_ALIASES,
    TERRITORY_ALIASES,
    TerritoryAliasEntry,
    TerritoryAliasTable,
)
from doslocale.core.locale.detector import HostLocaleDetector, detect_host_locale
from doslocale.core.locale.parser import LocaleParts, parse_locale
from doslocale.core.locale.resolver import CountryResolver
from doslocale.core.locale.source import (
    EnvironmentLocaleSource,
    SetlocaleLocaleSource,
    StaticLocaleSource,
)

__all__ = [
    "DEFAULT_ALIASES",
    "TERRITORY_ALIASES",
    "CountryResolver",
    "EnvironmentLocaleSource",
    "HostLocaleDetector",
    "LocaleParts",
    "SetlocaleLocaleSource",
    "StaticLocaleSource",
    "TerritoryAliasEntry",
    "TerritoryAliasTable",
    "detect_host_locale",
    "parse_locale",
]
