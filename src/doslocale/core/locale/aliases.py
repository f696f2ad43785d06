"""Territory to DOS country alias table.

Keys are ISO 3166 alpha-2 territory codes, including a number of historic,
reserved and exceptionally reserved ones. Where a territory alone is not
enough, a compound ``language_TERRITORY`` key selects the country instead;
compound keys always win over the bare territory.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from types import MappingProxyType

from doslocale.core.country.catalog import DosCountry


@dataclass(frozen=True)
class TerritoryAliasEntry:
    """Single alias rule."""

    key: str
    country: DosCountry
    note: str = ""

    @property
    def is_compound(self) -> bool:
        return "_" in self.key


class TerritoryAliasTable:
    """Read-only lookup of locale territories.

    Compound and bare keys live in separate mappings, so lookup precedence
    never depends on entry order.
    """

    def __init__(self, entries: Iterable[TerritoryAliasEntry]) -> None:
        compound: dict[str, DosCountry] = {}
        territories: dict[str, DosCountry] = {}
        self._entries: tuple[TerritoryAliasEntry, ...] = tuple(entries)

        for entry in self._entries:
            target = compound if entry.is_compound else territories
            if entry.key in target:
                raise ValueError(f"Duplicate alias key: {entry.key}")
            target[entry.key] = entry.country

        self._compound = MappingProxyType(compound)
        self._territories = MappingProxyType(territories)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TerritoryAliasEntry]:
        return iter(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._compound or key in self._territories

    def lookup(self, language: str, territory: str) -> DosCountry | None:
        """Find the country for a parsed locale, None if there is no match."""
        if not territory:
            return None

        country = self._compound.get(f"{language}_{territory}")
        if country is not None:
            return country

        return self._territories.get(territory)

    def aliases_for(self, country: DosCountry) -> list[str]:
        """All keys mapping to the given country, in table order."""
        return [entry.key for entry in self._entries if entry.country is country]


def _alias(key: str, country: DosCountry, note: str = "") -> TerritoryAliasEntry:
    return TerritoryAliasEntry(key=key, country=country, note=note)


TERRITORY_ALIASES: tuple[TerritoryAliasEntry, ...] = (
    # Supranational and user-assigned codes
    _alias("EU", DosCountry.INTERNATIONAL, "European Union"),
    _alias("EZ", DosCountry.INTERNATIONAL, "Eurozone"),
    _alias("UN", DosCountry.INTERNATIONAL, "United Nations"),
    _alias("XX", DosCountry.INTERNATIONAL, "unknown state"),
    _alias("XZ", DosCountry.INTERNATIONAL, "international waters"),
    # Americas
    _alias("US", DosCountry.UNITED_STATES),
    _alias("QM", DosCountry.UNITED_STATES, "used by ISRC"),
    _alias("fr_CA", DosCountry.CANADA_FRENCH),
    _alias("CA", DosCountry.CANADA_ENGLISH),
    _alias("MX", DosCountry.MEXICO),
    _alias("AR", DosCountry.ARGENTINA),
    _alias("BR", DosCountry.BRAZIL),
    _alias("CL", DosCountry.CHILE),
    _alias("CO", DosCountry.COLOMBIA),
    _alias("VE", DosCountry.VENEZUELA),
    _alias("GT", DosCountry.GUATEMALA),
    _alias("SV", DosCountry.EL_SALVADOR),
    _alias("HN", DosCountry.HONDURAS),
    _alias("NI", DosCountry.NICARAGUA),
    _alias("CR", DosCountry.COSTA_RICA),
    _alias("PA", DosCountry.PANAMA),
    _alias("BO", DosCountry.BOLIVIA),
    _alias("EC", DosCountry.ECUADOR),
    _alias("PY", DosCountry.PARAGUAY),
    _alias("UY", DosCountry.URUGUAY),
    # Europe
    _alias("RU", DosCountry.RUSSIA),
    _alias("SU", DosCountry.RUSSIA, "Soviet Union"),
    _alias("GR", DosCountry.GREECE),
    _alias("NL", DosCountry.NETHERLANDS),
    _alias("AN", DosCountry.NETHERLANDS, "Netherlands Antilles"),
    _alias("BE", DosCountry.BELGIUM),
    _alias("FR", DosCountry.FRANCE),
    _alias("CP", DosCountry.FRANCE, "Clipperton Island"),
    _alias("FQ", DosCountry.FRANCE, "French Southern and Antarctic Territories"),
    _alias("FX", DosCountry.FRANCE, "France, Metropolitan"),
    _alias("ES", DosCountry.SPAIN),
    _alias("EA", DosCountry.SPAIN, "Ceuta, Melilla"),
    _alias("IC", DosCountry.SPAIN, "Canary Islands"),
    _alias("XA", DosCountry.SPAIN, "Canary Islands, used by Switzerland"),
    _alias("HU", DosCountry.HUNGARY),
    _alias("YU", DosCountry.YUGOSLAVIA),
    _alias("IT", DosCountry.ITALY),
    _alias("VA", DosCountry.ITALY, "Vatican City"),
    _alias("RO", DosCountry.ROMANIA),
    _alias("CH", DosCountry.SWITZERLAND),
    _alias("CZ", DosCountry.CZECHIA),
    _alias("CS", DosCountry.CZECHIA, "Czechoslovakia"),
    _alias("AT", DosCountry.AUSTRIA),
    _alias("GB", DosCountry.UNITED_KINGDOM),
    _alias("UK", DosCountry.UNITED_KINGDOM),
    _alias("AC", DosCountry.UNITED_KINGDOM, "Ascension Island"),
    _alias("CQ", DosCountry.UNITED_KINGDOM, "Island of Sark"),
    _alias("DG", DosCountry.UNITED_KINGDOM, "Diego Garcia"),
    _alias("TA", DosCountry.UNITED_KINGDOM, "Tristan da Cunha"),
    _alias("XI", DosCountry.UNITED_KINGDOM, "Northern Ireland"),
    _alias("DK", DosCountry.DENMARK),
    _alias("SE", DosCountry.SWEDEN),
    _alias("NO", DosCountry.NORWAY),
    _alias("NQ", DosCountry.NORWAY, "Dronning Maud Land"),
    _alias("PL", DosCountry.POLAND),
    _alias("DE", DosCountry.GERMANY),
    _alias("DD", DosCountry.GERMANY, "German Democratic Republic"),
    _alias("FO", DosCountry.FAROE_ISLANDS),
    _alias("PT", DosCountry.PORTUGAL),
    _alias("LU", DosCountry.LUXEMBOURG),
    _alias("IE", DosCountry.IRELAND),
    _alias("IS", DosCountry.ICELAND),
    _alias("AL", DosCountry.ALBANIA),
    _alias("MT", DosCountry.MALTA),
    _alias("FI", DosCountry.FINLAND),
    _alias("AX", DosCountry.FINLAND, "Aland Islands"),
    _alias("BG", DosCountry.BULGARIA),
    _alias("LT", DosCountry.LITHUANIA),
    _alias("LV", DosCountry.LATVIA),
    _alias("EE", DosCountry.ESTONIA),
    _alias("AM", DosCountry.ARMENIA),
    _alias("BY", DosCountry.BELARUS),
    _alias("UA", DosCountry.UKRAINE),
    _alias("RS", DosCountry.SERBIA),
    _alias("ME", DosCountry.MONTENEGRO),
    _alias("HR", DosCountry.CROATIA),
    _alias("SI", DosCountry.SLOVENIA),
    _alias("sr_BA", DosCountry.BOSNIA_CYRILLIC, "Serbian is written in Cyrillic"),
    _alias("BA", DosCountry.BOSNIA_LATIN),
    _alias("MK", DosCountry.NORTH_MACEDONIA),
    _alias("SK", DosCountry.SLOVAKIA),
    # Africa
    _alias("EG", DosCountry.EGYPT),
    _alias("ZA", DosCountry.SOUTH_AFRICA),
    _alias("MA", DosCountry.MOROCCO),
    _alias("DZ", DosCountry.ALGERIA),
    _alias("TN", DosCountry.TUNISIA),
    _alias("NE", DosCountry.NIGER),
    _alias("BJ", DosCountry.BENIN),
    _alias("DY", DosCountry.BENIN, "Dahomey"),
    _alias("NG", DosCountry.NIGERIA),
    # Asia and Oceania
    _alias("MY", DosCountry.MALAYSIA),
    _alias("AU", DosCountry.AUSTRALIA),
    _alias("ID", DosCountry.INDONESIA),
    _alias("PH", DosCountry.PHILIPPINES),
    _alias("NZ", DosCountry.NEW_ZEALAND),
    _alias("SG", DosCountry.SINGAPORE),
    _alias("TH", DosCountry.THAILAND),
    _alias("KZ", DosCountry.KAZAKHSTAN),
    _alias("JP", DosCountry.JAPAN),
    _alias("KR", DosCountry.SOUTH_KOREA),
    _alias("VN", DosCountry.VIETNAM),
    _alias("VD", DosCountry.VIETNAM, "North Vietnam"),
    _alias("CN", DosCountry.CHINA),
    _alias("HK", DosCountry.HONG_KONG),
    _alias("TW", DosCountry.TAIWAN),
    _alias("TR", DosCountry.TURKEY),
    _alias("IN", DosCountry.INDIA),
    _alias("PK", DosCountry.PAKISTAN),
    _alias("MN", DosCountry.MONGOLIA),
    _alias("TJ", DosCountry.TAJIKISTAN),
    _alias("TM", DosCountry.TURKMENISTAN),
    _alias("AZ", DosCountry.AZERBAIJAN),
    _alias("GE", DosCountry.GEORGIA),
    _alias("KG", DosCountry.KYRGYZSTAN),
    _alias("UZ", DosCountry.UZBEKISTAN),
    # Middle East
    _alias("LB", DosCountry.LEBANON),
    _alias("JO", DosCountry.JORDAN),
    _alias("SY", DosCountry.SYRIA),
    _alias("KW", DosCountry.KUWAIT),
    _alias("SA", DosCountry.SAUDI_ARABIA),
    _alias("YE", DosCountry.YEMEN),
    _alias("YD", DosCountry.YEMEN, "South Yemen"),
    _alias("OM", DosCountry.OMAN),
    _alias("AE", DosCountry.EMIRATES),
    _alias("IL", DosCountry.ISRAEL),
    _alias("BH", DosCountry.BAHRAIN),
    _alias("QA", DosCountry.QATAR),
)

DEFAULT_ALIASES = TerritoryAliasTable(TERRITORY_ALIASES)
