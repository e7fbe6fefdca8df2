"""
Central configuration for the Sheet Leaderboard viewer.

All shared constants and configuration values should be defined here
to avoid duplication and ensure consistency across modules.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

# --- Source Documents ---
# Published-to-web CSV links (Google Sheets: File > Share > Publish to web > CSV)
STANDINGS_URL_ENV = "LEADERBOARD_STANDINGS_URL"
SETUP_URL_ENV = "LEADERBOARD_SETUP_URL"

# Keys looked up in Streamlit secrets (.streamlit/secrets.toml)
STANDINGS_URL_SECRET = "standings_url"
SETUP_URL_SECRET = "setup_url"

REQUEST_TIMEOUT_SECONDS = 15

# --- Standings Layout ---
# row0: title, row1: blank, row2: header, row3+: data
STANDINGS_HEADER_ROWS = 3
MIN_STANDINGS_LINES = 4

STANDINGS_PLAYER_COL = 1
STANDINGS_WINS_COL = 2
STANDINGS_LOSSES_COL = 3

# Name the sheet shows for an empty slot
PLACEHOLDER_PLAYER = "Unknown"

# --- Setup Layout ---
SETUP_PLACE_COL = 3
SETUP_PRIZE_COL = 4
PRIZE_PLACES = ("1st", "2nd", "3rd")

# --- Presentation ---
HIGH_WIN_RATE = 60
MEDIUM_WIN_RATE = 40

DEFAULT_SORT_KEY = "matchesWon"
DEFAULT_SORT_DIRECTION = "desc"

# --- Logging ---
LOG_LEVEL = getattr(logging, os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO)


@dataclass(frozen=True)
class SheetConfig:
    """Where the two CSV documents live. Missing URLs are left as None."""

    standings_url: Optional[str] = None
    setup_url: Optional[str] = None


def _clean(value) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def load_sheet_config(
    environ: Optional[Mapping[str, str]] = None,
    secrets: Optional[Mapping[str, str]] = None,
) -> SheetConfig:
    """
    Resolve the source URLs from Streamlit secrets and the environment.

    Secrets take precedence over environment variables. Nothing is defaulted:
    an unset URL stays None and is reported when a fetch is attempted.

    Args:
        environ: Environment mapping (default: os.environ)
        secrets: Optional secrets mapping (e.g. st.secrets)

    Returns:
        SheetConfig with both URLs (or None where unset)
    """
    env = os.environ if environ is None else environ
    secrets = secrets or {}

    standings = _clean(secrets.get(STANDINGS_URL_SECRET)) or _clean(env.get(STANDINGS_URL_ENV))
    setup = _clean(secrets.get(SETUP_URL_SECRET)) or _clean(env.get(SETUP_URL_ENV))

    return SheetConfig(standings_url=standings, setup_url=setup)
