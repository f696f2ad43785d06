"""Host locale sources.

The C library keeps the active locale in process-wide state; querying what
the environment asks for means calling ``setlocale(category, "")``, which
changes that state. SetlocaleLocaleSource serializes those calls and puts
the previous value back afterwards. EnvironmentLocaleSource reads the POSIX
variables directly and never touches the process locale.
"""

from __future__ import annotations

import contextlib
import locale
import os
import threading
from collections.abc import Iterator, Mapping

import structlog

from doslocale.core.interfaces.locale_source import ILocaleSource
from doslocale.core.models.locale import LocaleCategory

logger = structlog.get_logger(__name__)

_LOCALE_LOCK = threading.Lock()

_SETLOCALE_CATEGORIES: dict[LocaleCategory, int] = {
    LocaleCategory.GENERAL: locale.LC_ALL,
    LocaleCategory.NUMERIC: locale.LC_NUMERIC,
    LocaleCategory.TIME: locale.LC_TIME,
    LocaleCategory.MONETARY: locale.LC_MONETARY,
}

# Per-category variable, consulted between LC_ALL and LANG
_ENVIRONMENT_VARIABLES: dict[LocaleCategory, str] = {
    LocaleCategory.GENERAL: "LC_CTYPE",
    LocaleCategory.NUMERIC: "LC_NUMERIC",
    LocaleCategory.TIME: "LC_TIME",
    LocaleCategory.MONETARY: "LC_MONETARY",
}


@contextlib.contextmanager
def preserved_locale(category: int) -> Iterator[str]:
    """Hold the process locale lock and restore the category on exit.

    Yields the value active when the block was entered.
    """
    with _LOCALE_LOCK:
        previous = locale.setlocale(category)
        try:
            yield previous
        finally:
            locale.setlocale(category, previous)


def split_composite_locale(value: str) -> str:
    """Reduce a composite LC_ALL value to its LC_CTYPE part.

    glibc reports mixed settings as "LC_CTYPE=en_US.UTF-8;LC_NUMERIC=...".
    Plain values are returned as they are.
    """
    if ";" not in value or "=" not in value:
        return value

    parts: dict[str, str] = {}
    for item in value.split(";"):
        name, _, setting = item.partition("=")
        if setting:
            parts[name.strip()] = setting.strip()

    if "LC_CTYPE" in parts:
        return parts["LC_CTYPE"]
    return next(iter(parts.values()), "")


class SetlocaleLocaleSource:
    """Ask the C library which locale the environment selects."""

    name = "setlocale"

    def query(self, category: LocaleCategory) -> str | None:
        lc_category = _SETLOCALE_CATEGORIES[category]

        with preserved_locale(lc_category):
            try:
                value = locale.setlocale(lc_category, "")
            except locale.Error as e:
                logger.warning(
                    "Host locale not supported",
                    category=category.value,
                    error=str(e),
                )
                return None

        if not value:
            return None
        return split_composite_locale(value)


class EnvironmentLocaleSource:
    """Read the locale from POSIX environment variables.

    Precedence follows POSIX: LC_ALL, then the category variable, then LANG.
    """

    name = "environment"

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        """
        Initialize environment source.

        Args:
            environ: Variables to read, defaults to os.environ at query time
        """
        self._environ = environ

    def query(self, category: LocaleCategory) -> str | None:
        environ = os.environ if self._environ is None else self._environ

        for variable in ("LC_ALL", _ENVIRONMENT_VARIABLES[category], "LANG"):
            value = environ.get(variable)
            if value:
                return value
        return None


class StaticLocaleSource:
    """Fixed locale values, optionally layered over another source."""

    name = "static"

    def __init__(
        self,
        values: Mapping[LocaleCategory, str] | None = None,
        *,
        default: str | None = None,
        fallback: ILocaleSource | None = None,
    ) -> None:
        """
        Initialize static source.

        Args:
            values: Locale per category
            default: Locale for categories missing from values
            fallback: Source queried when neither values nor default apply
        """
        self._values = dict(values or {})
        self._default = default
        self._fallback = fallback

    def query(self, category: LocaleCategory) -> str | None:
        value = self._values.get(category) or self._default
        if value:
            return value
        if self._fallback is not None:
            return self._fallback.query(category)
        return None
