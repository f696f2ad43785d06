"""Core interfaces (protocols)."""

from doslocale.core.interfaces.locale_source import ILocaleSource

__all__ = [
    "ILocaleSource",
]
