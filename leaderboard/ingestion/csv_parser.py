"""
Sheet CSV Parser

This module turns the text of the two published spreadsheets into typed
records:
- standings: one PlayerRecord per data row
- setup: the prize amounts for 1st, 2nd and 3rd place

The field splitter is intentionally simple. It understands double-quoted
fields containing commas, but not doubled quotes ("") inside a quoted field,
and not newlines inside a quoted field (lines are split first).

Usage:
    from leaderboard.ingestion.csv_parser import parse_document, DocumentKind
    records = parse_document(text, DocumentKind.STANDINGS)
"""

from enum import Enum

from leaderboard.config import (
    MIN_STANDINGS_LINES,
    PLACEHOLDER_PLAYER,
    PRIZE_PLACES,
    SETUP_PLACE_COL,
    SETUP_PRIZE_COL,
    STANDINGS_HEADER_ROWS,
    STANDINGS_LOSSES_COL,
    STANDINGS_PLAYER_COL,
    STANDINGS_WINS_COL,
)
from leaderboard.ingestion.errors import EmptyDocument
from leaderboard.models import PlayerRecord, PrizePool
from leaderboard.utils import coerce_int, parse_currency, setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)


class DocumentKind(str, Enum):
    STANDINGS = "standings"
    SETUP = "setup"


MIN_LINES = {
    DocumentKind.STANDINGS: MIN_STANDINGS_LINES,
    DocumentKind.SETUP: 0,
}


def split_lines(text: str, kind: DocumentKind) -> list[str]:
    """
    Split a document into lines and check it is long enough for its kind.

    Args:
        text: Raw CSV text
        kind: Which document the text belongs to

    Returns:
        List of lines (surrounding whitespace of the whole text removed)

    Raises:
        EmptyDocument: If there are fewer lines than the kind requires
    """
    kind = DocumentKind(kind)
    lines = text.strip().split("\n")

    if len(lines) < MIN_LINES[kind]:
        raise EmptyDocument(
            f"No data found in the {kind.value} CSV "
            f"(expected at least {MIN_LINES[kind]} lines, found {len(lines)})",
            kind=kind.value,
            line_count=len(lines),
        )

    return lines


def parse_csv_line(line: str) -> list[str]:
    """
    Split one CSV line into trimmed fields.

    A double quote toggles "inside quotes" and is dropped; a comma ends the
    current field only when outside quotes.

    Examples:
        parse_csv_line('a,"b,c",d') -> ['a', 'b,c', 'd']
        parse_csv_line('x, y , z')  -> ['x', 'y', 'z']
    """
    fields = []
    current = []
    in_quotes = False

    for char in line:
        if char == '"':
            in_quotes = not in_quotes
        elif char == ',' and not in_quotes:
            fields.append("".join(current).strip())
            current = []
        else:
            current.append(char)

    fields.append("".join(current).strip())
    return fields


def _column(row: list[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def parse_standings_csv(text: str) -> tuple[PlayerRecord, ...]:
    """
    Parse the standings document.

    Layout: title row, blank row, header row, then
    rank, player, wins, losses, points for, points against, point diff.
    Only player, wins and losses are read.

    Args:
        text: Raw CSV text of the standings sheet

    Returns:
        Tuple of PlayerRecord in sheet order, blank/placeholder names dropped

    Raises:
        EmptyDocument: If the document has no data rows
    """
    lines = split_lines(text, DocumentKind.STANDINGS)
    records = []

    for line in lines[STANDINGS_HEADER_ROWS:]:
        row = parse_csv_line(line)
        name = _column(row, STANDINGS_PLAYER_COL)

        if not name or name == PLACEHOLDER_PLAYER:
            logger.debug(f"Skipping standings row without player: {line!r}")
            continue

        records.append(PlayerRecord(
            player=name,
            matches_won=coerce_int(_column(row, STANDINGS_WINS_COL)),
            matches_lost=coerce_int(_column(row, STANDINGS_LOSSES_COL)),
        ))

    logger.debug(f"Parsed {len(records)} players from {len(lines) - STANDINGS_HEADER_ROWS} data rows")
    return tuple(records)


def parse_setup_csv(text: str) -> PrizePool:
    """
    Parse the setup document for prize amounts.

    Every line is scanned. A row whose place column reads 1st, 2nd or 3rd
    (any case) and whose prize column is non-empty sets that place's prize.
    Later rows overwrite earlier ones for the same place.

    Args:
        text: Raw CSV text of the setup sheet

    Returns:
        PrizePool with missing places left at 0
    """
    lines = split_lines(text, DocumentKind.SETUP)
    prizes = dict.fromkeys(PRIZE_PLACES, 0.0)

    for line in lines:
        row = parse_csv_line(line)
        place = _column(row, SETUP_PLACE_COL).lower()
        prize_value = _column(row, SETUP_PRIZE_COL)

        if place in prizes and prize_value:
            prizes[place] = parse_currency(prize_value)

    first, second, third = (prizes[place] for place in PRIZE_PLACES)
    return PrizePool(first=first, second=second, third=third)


def parse_document(text: str, kind: DocumentKind):
    """Parse text as the given document kind."""
    kind = DocumentKind(kind)
    if kind is DocumentKind.STANDINGS:
        return parse_standings_csv(text)
    return parse_setup_csv(text)
