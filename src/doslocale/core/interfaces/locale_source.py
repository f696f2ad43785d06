"""Locale source interface definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from doslocale.core.models.locale import LocaleCategory


@runtime_checkable
class ILocaleSource(Protocol):
    """Contract for host locale sources."""

    @property
    def name(self) -> str:
        """Source name."""
        ...

    def query(self, category: LocaleCategory) -> str | None:
        """
        Get the active locale identifier for a category.

        Args:
            category: Locale facet to query

        Returns:
            Locale identifier such as "en_US.UTF-8", or None if the host
            reports no locale for the category
        """
        ...
