"""Legacy DOS country codes.

Country numbers were collected from:
- MS-DOS 6.22, COUNTRY.TXT
- PC-DOS 2000, HELP COUNTRY information table
- DR-DOS 7.03, Table 9-2: Country Codes and Code Pages
- FreeDOS 1.3, country.asm
- Paragon PTS DOS 2000 Pro manual
- OS/2 Warp 4.52, keyboard.pdf
- international calling codes, for the remaining countries

Several DOS flavours used different numbers for the same country. Those are
collapsed into a single member here, see LEGACY_COUNTRY_CODES.
"""

from __future__ import annotations

from enum import Enum


class UnknownCountryError(LookupError):
    """Raised when a value does not name any DOS country."""


class DosCountry(int, Enum):
    """DOS country code."""

    INTERNATIONAL = 0  # internal, not used by any DOS
    UNITED_STATES = 1  # also Canada English in OS/2
    CANADA_FRENCH = 2
    LATIN_AMERICA = 3
    CANADA_ENGLISH = 4  # not used by OS/2
    RUSSIA = 7
    EGYPT = 20
    SOUTH_AFRICA = 27
    GREECE = 30
    NETHERLANDS = 31
    BELGIUM = 32
    FRANCE = 33
    SPAIN = 34  # also Catalunya in OS/2
    HUNGARY = 36
    YUGOSLAVIA = 38
    ITALY = 39
    ROMANIA = 40
    SWITZERLAND = 41
    CZECHIA = 42  # Czechoslovakia in FreeDOS
    AUSTRIA = 43
    UNITED_KINGDOM = 44
    DENMARK = 45
    SWEDEN = 46
    NORWAY = 47
    POLAND = 48
    GERMANY = 49
    MEXICO = 52
    ARGENTINA = 54
    BRAZIL = 55
    CHILE = 56
    COLOMBIA = 57
    VENEZUELA = 58
    MALAYSIA = 60
    AUSTRALIA = 61  # also International English in MS-DOS and PC-DOS
    INDONESIA = 62
    PHILIPPINES = 63
    NEW_ZEALAND = 64
    SINGAPORE = 65
    THAILAND = 66
    KAZAKHSTAN = 77
    JAPAN = 81
    SOUTH_KOREA = 82
    VIETNAM = 84
    CHINA = 86
    TURKEY = 90
    INDIA = 91
    PAKISTAN = 92
    ASIA_ENGLISH = 99
    MOROCCO = 212
    ALGERIA = 213
    TUNISIA = 216
    NIGER = 227
    BENIN = 229
    NIGERIA = 234
    FAROE_ISLANDS = 298
    PORTUGAL = 351
    LUXEMBOURG = 352
    IRELAND = 353
    ICELAND = 354
    ALBANIA = 355
    MALTA = 356
    FINLAND = 358
    BULGARIA = 359
    LITHUANIA = 370
    LATVIA = 371
    ESTONIA = 372
    ARMENIA = 374
    BELARUS = 375
    UKRAINE = 380
    SERBIA = 381  # Serbia and Montenegro, Yugoslavia Cyrillic in PC-DOS
    MONTENEGRO = 382
    CROATIA = 385
    SLOVENIA = 386
    BOSNIA_LATIN = 387
    BOSNIA_CYRILLIC = 388
    NORTH_MACEDONIA = 389
    SLOVAKIA = 421  # Czechia in PC-DOS and OS/2
    GUATEMALA = 502
    EL_SALVADOR = 503
    HONDURAS = 504
    NICARAGUA = 505
    COSTA_RICA = 506
    PANAMA = 507
    BOLIVIA = 591
    ECUADOR = 593
    PARAGUAY = 595
    URUGUAY = 598
    ARABIC = 785  # Middle-East in FreeDOS, Arabic South in MS-DOS
    HONG_KONG = 852
    TAIWAN = 886
    LEBANON = 961
    JORDAN = 962
    SYRIA = 963
    KUWAIT = 965
    SAUDI_ARABIA = 966
    YEMEN = 967
    OMAN = 968
    EMIRATES = 971
    ISRAEL = 972
    BAHRAIN = 973
    QATAR = 974
    MONGOLIA = 976
    TAJIKISTAN = 992
    TURKMENISTAN = 993
    AZERBAIJAN = 994
    GEORGIA = 995
    KYRGYZSTAN = 996
    UZBEKISTAN = 998

    @property
    def display_name(self) -> str:
        """Canonical English name of the country."""
        return COUNTRY_NAMES[self]


# Codes some DOS flavours used as duplicates of a canonical member
LEGACY_COUNTRY_CODES: dict[int, DosCountry] = {
    35: DosCountry.BULGARIA,  # unofficial
    88: DosCountry.TAIWAN,  # Paragon PTS DOS, OS/2; MS-DOS keeps it for compatibility
    384: DosCountry.CROATIA,  # MS-DOS and FreeDOS, most likely a bug
    422: DosCountry.SLOVAKIA,  # CP-DOS and OS/2
}


COUNTRY_NAMES: dict[DosCountry, str] = {
    DosCountry.INTERNATIONAL: "International",
    DosCountry.UNITED_STATES: "United States",
    DosCountry.CANADA_FRENCH: "Canada (French)",
    DosCountry.LATIN_AMERICA: "Latin America",
    DosCountry.CANADA_ENGLISH: "Canada (English)",
    DosCountry.RUSSIA: "Russia",
    DosCountry.EGYPT: "Egypt",
    DosCountry.SOUTH_AFRICA: "South Africa",
    DosCountry.GREECE: "Greece",
    DosCountry.NETHERLANDS: "Netherlands",
    DosCountry.BELGIUM: "Belgium",
    DosCountry.FRANCE: "France",
    DosCountry.SPAIN: "Spain",
    DosCountry.HUNGARY: "Hungary",
    DosCountry.YUGOSLAVIA: "Yugoslavia",
    DosCountry.ITALY: "Italy",
    DosCountry.ROMANIA: "Romania",
    DosCountry.SWITZERLAND: "Switzerland",
    DosCountry.CZECHIA: "Czechia",
    DosCountry.AUSTRIA: "Austria",
    DosCountry.UNITED_KINGDOM: "United Kingdom",
    DosCountry.DENMARK: "Denmark",
    DosCountry.SWEDEN: "Sweden",
    DosCountry.NORWAY: "Norway",
    DosCountry.POLAND: "Poland",
    DosCountry.GERMANY: "Germany",
    DosCountry.MEXICO: "Mexico",
    DosCountry.ARGENTINA: "Argentina",
    DosCountry.BRAZIL: "Brazil",
    DosCountry.CHILE: "Chile",
    DosCountry.COLOMBIA: "Colombia",
    DosCountry.VENEZUELA: "Venezuela",
    DosCountry.MALAYSIA: "Malaysia",
    DosCountry.AUSTRALIA: "Australia",
    DosCountry.INDONESIA: "Indonesia",
    DosCountry.PHILIPPINES: "Philippines",
    DosCountry.NEW_ZEALAND: "New Zealand",
    DosCountry.SINGAPORE: "Singapore",
    DosCountry.THAILAND: "Thailand",
    DosCountry.KAZAKHSTAN: "Kazakhstan",
    DosCountry.JAPAN: "Japan",
    DosCountry.SOUTH_KOREA: "South Korea",
    DosCountry.VIETNAM: "Vietnam",
    DosCountry.CHINA: "China",
    DosCountry.TURKEY: "Turkey",
    DosCountry.INDIA: "India",
    DosCountry.PAKISTAN: "Pakistan",
    DosCountry.ASIA_ENGLISH: "Asia (English)",
    DosCountry.MOROCCO: "Morocco",
    DosCountry.ALGERIA: "Algeria",
    DosCountry.TUNISIA: "Tunisia",
    DosCountry.NIGER: "Niger",
    DosCountry.BENIN: "Benin",
    DosCountry.NIGERIA: "Nigeria",
    DosCountry.FAROE_ISLANDS: "Faroe Islands",
    DosCountry.PORTUGAL: "Portugal",
    DosCountry.LUXEMBOURG: "Luxembourg",
    DosCountry.IRELAND: "Ireland",
    DosCountry.ICELAND: "Iceland",
    DosCountry.ALBANIA: "Albania",
    DosCountry.MALTA: "Malta",
    DosCountry.FINLAND: "Finland",
    DosCountry.BULGARIA: "Bulgaria",
    DosCountry.LITHUANIA: "Lithuania",
    DosCountry.LATVIA: "Latvia",
    DosCountry.ESTONIA: "Estonia",
    DosCountry.ARMENIA: "Armenia",
    DosCountry.BELARUS: "Belarus",
    DosCountry.UKRAINE: "Ukraine",
    DosCountry.SERBIA: "Serbia",
    DosCountry.MONTENEGRO: "Montenegro",
    DosCountry.CROATIA: "Croatia",
    DosCountry.SLOVENIA: "Slovenia",
    DosCountry.BOSNIA_LATIN: "Bosnia and Herzegovina (Latin)",
    DosCountry.BOSNIA_CYRILLIC: "Bosnia and Herzegovina (Cyrillic)",
    DosCountry.NORTH_MACEDONIA: "North Macedonia",
    DosCountry.SLOVAKIA: "Slovakia",
    DosCountry.GUATEMALA: "Guatemala",
    DosCountry.EL_SALVADOR: "El Salvador",
    DosCountry.HONDURAS: "Honduras",
    DosCountry.NICARAGUA: "Nicaragua",
    DosCountry.COSTA_RICA: "Costa Rica",
    DosCountry.PANAMA: "Panama",
    DosCountry.BOLIVIA: "Bolivia",
    DosCountry.ECUADOR: "Ecuador",
    DosCountry.PARAGUAY: "Paraguay",
    DosCountry.URUGUAY: "Uruguay",
    DosCountry.ARABIC: "Arabic (Middle East)",
    DosCountry.HONG_KONG: "Hong Kong",
    DosCountry.TAIWAN: "Taiwan",
    DosCountry.LEBANON: "Lebanon",
    DosCountry.JORDAN: "Jordan",
    DosCountry.SYRIA: "Syria",
    DosCountry.KUWAIT: "Kuwait",
    DosCountry.SAUDI_ARABIA: "Saudi Arabia",
    DosCountry.YEMEN: "Yemen",
    DosCountry.OMAN: "Oman",
    DosCountry.EMIRATES: "United Arab Emirates",
    DosCountry.ISRAEL: "Israel",
    DosCountry.BAHRAIN: "Bahrain",
    DosCountry.QATAR: "Qatar",
    DosCountry.MONGOLIA: "Mongolia",
    DosCountry.TAJIKISTAN: "Tajikistan",
    DosCountry.TURKMENISTAN: "Turkmenistan",
    DosCountry.AZERBAIJAN: "Azerbaijan",
    DosCountry.GEORGIA: "Georgia",
    DosCountry.KYRGYZSTAN: "Kyrgyzstan",
    DosCountry.UZBEKISTAN: "Uzbekistan",
}


def lookup_country(value: str | int) -> DosCountry:
    """Find a DOS country by code, member name or display name.

    Args:
        value: Numeric code (legacy duplicates accepted), e.g. 49 or "049",
            member name such as "GERMANY" or "united_kingdom", or display
            name such as "United Kingdom"

    Returns:
        The canonical DosCountry

    Raises:
        UnknownCountryError: If nothing matches
    """
    if isinstance(value, int):
        return _lookup_code(value)

    text = value.strip()
    if text.isdigit():
        return _lookup_code(int(text))

    key = text.upper().replace(" ", "_").replace("-", "_")
    if key in DosCountry.__members__:
        return DosCountry[key]

    for country, name in COUNTRY_NAMES.items():
        if name.casefold() == text.casefold():
            return country

    raise UnknownCountryError(f"Unknown DOS country: {value!r}")


def _lookup_code(code: int) -> DosCountry:
    if code in LEGACY_COUNTRY_CODES:
        return LEGACY_COUNTRY_CODES[code]
    try:
        return DosCountry(code)
    except ValueError:
        raise UnknownCountryError(f"Unknown DOS country code: {code}") from None
