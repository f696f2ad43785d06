"""Tests for HostLocaleDetector."""

from __future__ import annotations

import dataclasses

import pytest

from doslocale.core.country.catalog import DosCountry
from doslocale.core.locale.detector import HostLocaleDetector, detect_host_locale
from doslocale.core.locale.source import EnvironmentLocaleSource, SetlocaleLocaleSource
from doslocale.core.models.config import Config
from doslocale.core.models.locale import HostLocale, LocaleCategory


class TestHostLocaleDetector:
    """Tests for HostLocaleDetector.detect."""

    def test_single_locale_everywhere(self, recording_source):
        """One locale for every category gives one country."""
        source = recording_source(
            general="de_DE.UTF-8",
            numeric="de_DE.UTF-8",
            time="de_DE.UTF-8",
            monetary="de_DE.UTF-8",
        )
        host_locale = HostLocaleDetector(source=source).detect()

        assert host_locale == HostLocale(
            country=DosCountry.GERMANY,
            numeric=DosCountry.GERMANY,
            time_date=DosCountry.GERMANY,
            currency=DosCountry.GERMANY,
        )

    def test_queries_all_categories_general_first(self, recording_source):
        source = recording_source()
        HostLocaleDetector(source=source).detect()
        assert source.queries == [
            LocaleCategory.GENERAL,
            LocaleCategory.NUMERIC,
            LocaleCategory.TIME,
            LocaleCategory.MONETARY,
        ]

    def test_mixed_categories(self, recording_source):
        """Each category resolves on its own."""
        source = recording_source(
            general="en_US.UTF-8",
            numeric="de_DE.UTF-8",
            time="en_GB.UTF-8",
            monetary="fr_FR.UTF-8@euro",
        )
        host_locale = HostLocaleDetector(source=source).detect()

        assert host_locale.country is DosCountry.UNITED_STATES
        assert host_locale.numeric is DosCountry.GERMANY
        assert host_locale.time_date is DosCountry.UNITED_KINGDOM
        assert host_locale.currency is DosCountry.FRANCE

    def test_categories_fall_back_to_general(self, recording_source):
        """Missing or unknown category locales follow the general country."""
        source = recording_source(general="pl_PL.UTF-8", numeric="xx_ZZ")
        host_locale = HostLocaleDetector(source=source).detect()

        assert host_locale.country is DosCountry.POLAND
        assert host_locale.numeric is DosCountry.POLAND
        assert host_locale.time_date is DosCountry.POLAND
        assert host_locale.currency is DosCountry.POLAND

    def test_nothing_available(self, recording_source):
        """No locale information at all gives INTERNATIONAL everywhere."""
        host_locale = HostLocaleDetector(source=recording_source()).detect()
        assert host_locale == HostLocale()

    def test_generic_category_overrides_general(self, recording_source):
        """A C category resolves to INTERNATIONAL, not the general country."""
        source = recording_source(general="it_IT.UTF-8", numeric="C")
        host_locale = HostLocaleDetector(source=source).detect()

        assert host_locale.country is DosCountry.ITALY
        assert host_locale.numeric is DosCountry.INTERNATIONAL
        assert host_locale.time_date is DosCountry.ITALY

    def test_messages_and_keyboard_left_empty(self, recording_source):
        host_locale = HostLocaleDetector(source=recording_source(general="ja_JP")).detect()
        assert host_locale.messages == ""
        assert host_locale.keyboard == ""

    def test_each_call_is_independent(self, recording_source):
        source = recording_source(general="ko_KR.UTF-8")
        detector = HostLocaleDetector(source=source)
        first = detector.detect()

        source.values[LocaleCategory.GENERAL] = "zh_CN.UTF-8"
        second = detector.detect()

        assert first.country is DosCountry.SOUTH_KOREA
        assert second.country is DosCountry.CHINA

    def test_default_source_is_setlocale(self):
        assert isinstance(HostLocaleDetector().resolver.source, SetlocaleLocaleSource)

    def test_from_config(self):
        config = Config(detection={"source": "environment"})
        detector = HostLocaleDetector.from_config(config)
        assert isinstance(detector.resolver.source, EnvironmentLocaleSource)


class TestHostLocale:
    """Tests for the HostLocale record."""

    def test_defaults(self):
        host_locale = HostLocale()
        assert host_locale.country is DosCountry.INTERNATIONAL
        assert host_locale.currency is DosCountry.INTERNATIONAL
        assert host_locale.messages == ""

    def test_is_immutable(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            HostLocale().country = DosCountry.GERMANY  # type: ignore[misc]

    def test_to_dict_uses_plain_codes(self):
        data = HostLocale(country=DosCountry.CANADA_FRENCH, numeric=DosCountry.CANADA_FRENCH).to_dict()
        assert data == {
            "country": 2,
            "numeric": 2,
            "time_date": 0,
            "currency": 0,
            "messages": "",
            "keyboard": "",
        }
        assert type(data["country"]) is int


class TestDetectHostLocale:
    """Tests for the detect_host_locale entry point."""

    def test_with_environment_config(self, clean_locale_env):
        clean_locale_env.setenv("LANG", "nl_NL.UTF-8")
        clean_locale_env.setenv("LC_MONETARY", "nl_BE.UTF-8")
        config = Config(detection={"source": "environment"})

        host_locale = detect_host_locale(config)

        assert host_locale.country is DosCountry.NETHERLANDS
        assert host_locale.currency is DosCountry.BELGIUM

    def test_with_forced_locale(self, clean_locale_env):
        config = Config(detection={"source": "environment", "locale": "es_MX.UTF-8"})
        host_locale = detect_host_locale(config)
        assert host_locale.country is DosCountry.MEXICO
        assert host_locale.numeric is DosCountry.MEXICO

    def test_c_locale_host(self, clean_locale_env):
        clean_locale_env.setenv("LC_ALL", "C")
        assert detect_host_locale() == HostLocale()
