"""
Shared utilities for the Sheet Leaderboard viewer.

This module provides common functions used across multiple modules
to avoid code duplication.
"""

import locale
import logging
import re

from leaderboard.config import LOG_LEVEL

# Leading integer, as a spreadsheet cell like "12", " 7 ", "3 wins" would show it
LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")

# Leading decimal number once currency symbols and separators are removed
LEADING_FLOAT_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")

NON_NUMERIC_RE = re.compile(r"[^0-9.]")


# --- Logging Setup ---
def setup_logging(name: str | None = None, level: int = LOG_LEVEL) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (usually __name__ from the calling module)
        level: Logging level (default: LOG_LEVEL from config)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(level)
    return logger


# --- Locale ---
def use_user_locale() -> str | None:
    """
    Switch collation and time formatting to the user's locale (LANG / LC_* env).

    Player ordering (locale.strxfrm) and the "last updated" timestamp
    (strftime %c) both follow this setting.

    Returns:
        Name of the locale now in effect, or None if the environment names
        a locale that is not installed (the current locale is kept)
    """
    logger = setup_logging(__name__)
    try:
        name = locale.setlocale(locale.LC_ALL, "")
    except locale.Error as e:
        logger.warning(f"Could not apply user locale, keeping {locale.setlocale(locale.LC_ALL)}: {e}")
        return None
    logger.debug(f"Using locale {name}")
    return name


# --- Coercion ---
def coerce_int(value: str | None) -> int:
    """
    Best-effort integer coercion for a spreadsheet cell.

    Reads the leading integer of the cell ("12abc" -> 12). Missing,
    non-numeric, and negative values become 0.
    """
    if not value:
        return 0
    m = LEADING_INT_RE.match(value)
    if not m:
        return 0
    return max(int(m.group(1)), 0)


def parse_currency(value: str | None) -> float:
    """
    Parse a currency cell such as "$1,250.50" into a float.

    Every character except digits and the decimal point is removed first,
    then the leading number is read. Unparsable or missing values yield 0.
    """
    if not value:
        return 0.0
    cleaned = NON_NUMERIC_RE.sub("", value)
    m = LEADING_FLOAT_RE.match(cleaned)
    if not m:
        return 0.0
    return float(m.group(0))


__all__ = [
    # Logging
    'setup_logging',
    # Locale
    'use_user_locale',
    # Coercion
    'coerce_int',
    'parse_currency',
    'LEADING_INT_RE',
    'LEADING_FLOAT_RE',
]
