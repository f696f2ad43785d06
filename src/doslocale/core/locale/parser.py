"""Locale identifier parsing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class LocaleParts:
    """Language and territory of a locale identifier."""

    language: str
    territory: str = ""

    @property
    def compound_key(self) -> str | None:
        """Key in ``language_TERRITORY`` form, None without a territory."""
        if not self.territory:
            return None
        return f"{self.language}_{self.territory}"

    @property
    def is_generic(self) -> bool:
        """Check for the C/POSIX locale, meaning nothing is configured."""
        return self.language in ("c", "posix")


def parse_locale(value: str) -> LocaleParts:
    """Split a locale identifier into language and territory.

    Handles ``language[_TERRITORY][.codeset][@modifier]``; codeset and
    modifier are dropped. Any string parses, malformed ones simply end up
    without a territory.

    Example: "de_DE.UTF-8@euro" -> LocaleParts("de", "DE")
    """
    text = value.rpartition("@")[0] if "@" in value else value
    text = text.rpartition(".")[0] if "." in text else text

    language, separator, territory = text.rpartition("_")
    if not separator:
        return LocaleParts(language=territory.lower())

    return LocaleParts(language=language.lower(), territory=territory.upper())
