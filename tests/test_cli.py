"""Tests for the illustrative display-values CLI."""

import locale
from datetime import datetime, timezone

import pytest

from display_app.internal.cli_show_display_values import main, parse_args, use_host_locale
from display_app.services.service_formatting import format_date


class TestCli:
    """Tests for the CLI driver."""

    def test_defaults(self):
        args = parse_args([])

        assert args.application is None
        assert args.app_version is None
        assert args.date == ""
        assert args.user_id is None

    def test_prints_display_values(self, capsys, monkeypatch):
        monkeypatch.setenv("LC_ALL", "C")
        monkeypatch.setenv("DISPLAY_TIMEZONE", "America/New_York")

        main(
            [
                "--application", "MS Word",
                "--app-version", "3.0.0",
                "--date", "2020-01-01",
                "--user-id", "1",
            ]
        )

        out = capsys.readouterr().out
        assert "[INFO] Rendering display values" in out
        assert "Software : MS Word 3.0.0" in out
        assert "Date     : December 31, 2019, 07:00 PM EST" in out
        assert "Doubled  : Your doubled int from a string is 2" in out
        assert "User     : Found user 1 in our list!" in out

    def test_missing_values_print_placeholder(self, capsys, monkeypatch):
        monkeypatch.setenv("LC_ALL", "C")

        main(["--application", "MS Word"])

        out = capsys.readouterr().out
        assert "Software : -" in out
        assert "Date     : -" in out
        assert "User" not in out


class TestHostLocale:
    """The CLI adopts the host LC_TIME locale for date rendering."""

    def test_c_locale_from_environment(self, monkeypatch):
        monkeypatch.setenv("LC_ALL", "C")

        use_host_locale()

        assert locale.setlocale(locale.LC_TIME) in ("C", "POSIX")

    def test_host_lc_time_drives_month_name(self, capsys, monkeypatch, ny_settings):
        monkeypatch.delenv("LC_ALL", raising=False)
        monkeypatch.setenv("LC_TIME", "de_DE.UTF-8")

        use_host_locale()

        if "[WARN]" in capsys.readouterr().out:
            pytest.skip("de_DE.UTF-8 locale is not installed")
        moment = datetime(2020, 1, 1, tzinfo=timezone.utc)
        assert format_date(moment, settings=ny_settings).startswith("Dezember 31, 2019")

    def test_missing_host_locale_warns(self, capsys, monkeypatch):
        monkeypatch.setenv("LC_ALL", "xx_NOPE.UTF-8")

        use_host_locale()

        assert "[WARN] Could not apply host LC_TIME locale" in capsys.readouterr().out
