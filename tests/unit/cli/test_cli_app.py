"""Tests for the command line interface."""

from __future__ import annotations

import json
import sys

import pytest
from typer.testing import CliRunner

from doslocale import __version__
from doslocale.cli.app import app, main
from doslocale.cli.commands.detect import run_detect
from doslocale.core.models.config import Config
from doslocale.core.models.locale import LocaleCategory

runner = CliRunner()


@pytest.fixture(autouse=True)
def clean_settings_env(monkeypatch):
    monkeypatch.delenv("DOSLOCALE_DETECTION__SOURCE", raising=False)
    monkeypatch.delenv("DOSLOCALE_DETECTION__LOCALE", raising=False)
    monkeypatch.delenv("DOSLOCALE_LOGS__LEVEL", raising=False)


class TestVersion:
    """Tests for --version."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


class TestDetectCommand:
    """Tests for the detect command."""

    def test_json_from_environment(self, clean_locale_env):
        clean_locale_env.setenv("LC_ALL", "de_DE.UTF-8")

        result = runner.invoke(app, ["detect", "--source", "environment", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "country": 49,
            "numeric": 49,
            "time_date": 49,
            "currency": 49,
            "messages": "",
            "keyboard": "",
        }

    def test_table_from_environment(self, clean_locale_env):
        clean_locale_env.setenv("LANG", "fr_CA.UTF-8")

        result = runner.invoke(app, ["detect", "--source", "environment"])

        assert result.exit_code == 0
        assert "Canada (French)" in result.output

    def test_unknown_source(self):
        result = runner.invoke(app, ["detect", "--source", "registry"])
        assert result.exit_code == 1
        assert "Unknown source" in result.output

    def test_config_file(self, clean_locale_env, tmp_path):
        path = tmp_path / "doslocale.yaml"
        path.write_text("detection:\n  source: environment\n  locale: ja_JP.UTF-8\n")

        result = runner.invoke(app, ["detect", "--config", str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["country"] == 81

    def test_missing_config_file(self, tmp_path):
        result = runner.invoke(app, ["detect", "--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestResolveCommand:
    """Tests for the resolve command."""

    def test_compound_alias(self):
        result = runner.invoke(app, ["resolve", "fr_CA.UTF-8"])
        assert result.exit_code == 0
        assert "Canada (French) (2)" in result.output
        assert "Territory: CA" in result.output

    def test_fallback_used(self):
        result = runner.invoke(app, ["resolve", "xx_ZZ", "--fallback", "France"])
        assert result.exit_code == 0
        assert "France (33)" in result.output
        assert "fallback used" in result.output

    def test_generic_locale(self):
        result = runner.invoke(app, ["resolve", "POSIX", "--fallback", "33"])
        assert result.exit_code == 0
        assert "International (0)" in result.output
        assert "fallback used" not in result.output

    def test_unknown_fallback(self):
        result = runner.invoke(app, ["resolve", "en_US", "--fallback", "Atlantis"])
        assert result.exit_code == 1
        assert "Unknown DOS country" in result.output

    def test_verbose_flag(self):
        result = runner.invoke(app, ["--verbose", "resolve", "de_AT"])
        assert result.exit_code == 0
        assert "Austria (43)" in result.output


class TestCountriesCommand:
    """Tests for the countries command."""

    def test_lists_countries(self):
        result = runner.invoke(app, ["countries"])
        assert result.exit_code == 0
        assert "Germany" in result.output
        assert "International" in result.output
        assert "countries" in result.output


# ============================================================================
# LOGGING AND CONFIGURATION WIRING
# ============================================================================


class TestLoggingOutput:
    """Tests for where and when the CLI logs."""

    def test_warnings_do_not_corrupt_json(self, clean_locale_env):
        """Log events go to stderr, stdout stays valid JSON."""
        clean_locale_env.setenv("LANG", "xx_ZZ.UTF-8")

        result = runner.invoke(app, ["detect", "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["country"] == 0
        assert "Host locale not supported" in result.stderr

    def test_config_file_log_level(self, clean_locale_env, tmp_path):
        """logs.level from the config file is applied."""
        clean_locale_env.setenv("LANG", "sv_SE.UTF-8")
        path = tmp_path / "doslocale.yaml"
        path.write_text("detection:\n  source: environment\nlogs:\n  level: DEBUG\n")

        result = runner.invoke(app, ["detect", "--config", str(path), "--json"])

        assert result.exit_code == 0
        assert json.loads(result.stdout)["country"] == 46
        assert "Resolved DOS country" in result.stderr

    def test_default_level_hides_debug(self, clean_locale_env):
        clean_locale_env.setenv("LANG", "sv_SE.UTF-8")
        result = runner.invoke(app, ["detect", "--source", "environment", "--json"])
        assert result.exit_code == 0
        assert "Resolved DOS country" not in result.stderr

    def test_verbose_overrides_config_level(self, clean_locale_env, tmp_path):
        clean_locale_env.setenv("LANG", "sv_SE.UTF-8")
        path = tmp_path / "doslocale.yaml"
        path.write_text("detection:\n  source: environment\nlogs:\n  level: ERROR\n")

        result = runner.invoke(app, ["--verbose", "detect", "--config", str(path)])

        assert result.exit_code == 0
        assert "Resolved DOS country" in result.stderr

    def test_invalid_environment_settings(self, monkeypatch):
        """Bad settings are reported for every command, not raised."""
        monkeypatch.setenv("DOSLOCALE_LOGS__LEVEL", "verbose")

        result = runner.invoke(app, ["countries"])

        assert result.exit_code == 1
        assert "Invalid configuration" in result.output
        assert isinstance(result.exception, SystemExit)


class TestEntryPoint:
    """Tests for the console script entry point."""

    def test_main_runs_app(self, monkeypatch):
        monkeypatch.setattr(sys, "argv", ["doslocale", "countries"])
        with pytest.raises(SystemExit) as exc_info:
            main()
        assert exc_info.value.code == 0


class TestRunDetect:
    """Tests for run_detect."""

    def test_queries_each_category_once(self, monkeypatch, recording_source, capsys):
        """The table shows the values used for resolution, no second query."""
        source = recording_source(general="de_CH.UTF-8", numeric="fr_CH.UTF-8")
        monkeypatch.setattr(Config, "build_source", lambda self: source)

        run_detect(Config())

        assert source.queries == [
            LocaleCategory.GENERAL,
            LocaleCategory.NUMERIC,
            LocaleCategory.TIME,
            LocaleCategory.MONETARY,
        ]
        output = capsys.readouterr().out
        assert "de_CH.UTF-8" in output
        assert "fr_CH.UTF-8" in output
