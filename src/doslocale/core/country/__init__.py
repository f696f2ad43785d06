"""DOS country catalog."""

from doslocale.core.country.catalog import (
    COUNTRY_NAMES,
    LEGACY_COUNTRY_CODES,
    DosCountry,
    UnknownCountryError,
    lookup_country,
)

__all__ = [
    "COUNTRY_NAMES",
    "LEGACY_COUNTRY_CODES",
    "DosCountry",
    "UnknownCountryError",
    "lookup_country",
]
