"""Data models."""

from doslocale.core.models.locale import HostLocale, LocaleCategory

__all__ = [
    "HostLocale",
    "LocaleCategory",
]
