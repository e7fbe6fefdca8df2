"""
Tests for source URL configuration.
"""

from leaderboard.config import SETUP_URL_ENV, STANDINGS_URL_ENV, SheetConfig, load_sheet_config


class TestLoadSheetConfig:
    """Tests for load_sheet_config."""

    def test_reads_environment(self):
        config = load_sheet_config(environ={
            STANDINGS_URL_ENV: "https://a/standings.csv",
            SETUP_URL_ENV: "https://a/setup.csv",
        })
        assert config == SheetConfig("https://a/standings.csv", "https://a/setup.csv")

    def test_secrets_take_precedence(self):
        config = load_sheet_config(
            environ={STANDINGS_URL_ENV: "https://env/s.csv"},
            secrets={"standings_url": "https://secret/s.csv"},
        )
        assert config.standings_url == "https://secret/s.csv"

    def test_missing_values_stay_none(self):
        config = load_sheet_config(environ={STANDINGS_URL_ENV: "   "})
        assert config.standings_url is None
        assert config.setup_url is None

    def test_values_trimmed(self):
        config = load_sheet_config(environ={SETUP_URL_ENV: "  https://a/setup.csv\n"})
        assert config.setup_url == "https://a/setup.csv"
