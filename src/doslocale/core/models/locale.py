"""Host locale data models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from doslocale.core.country.catalog import DosCountry


class LocaleCategory(str, Enum):
    """Independently configurable locale facet."""

    GENERAL = "general"  # LC_ALL
    NUMERIC = "numeric"  # LC_NUMERIC
    TIME = "time"  # LC_TIME
    MONETARY = "monetary"  # LC_MONETARY


@dataclass(frozen=True)
class HostLocale:
    """DOS regional settings detected from the host.

    ``messages`` and ``keyboard`` are filled in by their own detection,
    which is not part of the country resolution.
    """

    country: DosCountry = DosCountry.INTERNATIONAL
    numeric: DosCountry = DosCountry.INTERNATIONAL
    time_date: DosCountry = DosCountry.INTERNATIONAL
    currency: DosCountry = DosCountry.INTERNATIONAL

    messages: str = ""
    keyboard: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary with plain numeric country codes."""
        return {
            "country": int(self.country),
            "numeric": int(self.numeric),
            "time_date": int(self.time_date),
            "currency": int(self.currency),
            "messages": self.messages,
            "keyboard": self.keyboard,
        }
