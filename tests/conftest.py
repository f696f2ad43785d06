"""Global test fixtures for doslocale."""

from __future__ import annotations

from collections.abc import Mapping

import pytest
import structlog

from doslocale.core.models.locale import LocaleCategory

LOCALE_VARIABLES = (
    "LANG",
    "LANGUAGE",
    "LC_ALL",
    "LC_CTYPE",
    "LC_NUMERIC",
    "LC_TIME",
    "LC_MONETARY",
    "LC_MESSAGES",
)


# ============================================================================
# MOCK LOCALE SOURCES
# ============================================================================


class RecordingLocaleSource:
    """Locale source returning fixed values and recording each query."""

    name = "recording"

    def __init__(self, values: Mapping[LocaleCategory, str | None] | None = None) -> None:
        self.values = dict(values or {})
        self.queries: list[LocaleCategory] = []

    def query(self, category: LocaleCategory) -> str | None:
        self.queries.append(category)
        return self.values.get(category)


@pytest.fixture
def recording_source():
    """Factory for recording locale sources."""

    def _create(**values: str | None) -> RecordingLocaleSource:
        return RecordingLocaleSource(
            {LocaleCategory(name): value for name, value in values.items()}
        )

    return _create


@pytest.fixture
def clean_locale_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove all POSIX locale variables from the environment."""
    for variable in LOCALE_VARIABLES:
        monkeypatch.delenv(variable, raising=False)
    return monkeypatch


@pytest.fixture(autouse=True)
def reset_structlog():
    """Undo structlog configuration done by the CLI."""
    yield
    structlog.reset_defaults()
