"""
Leaderboard Presentation

Holds the latest standings for a session, applies the active sort and
produces the table view shown on the page.

Sort rules:
- player: case-insensitive, locale-aware comparison
- winRate: numeric percentage, not the "67%" string
- matchesWon / matchesLost: numeric
Ties keep their previous relative order (Python's sort is stable, also with reverse=True).
"""

import locale
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional

from leaderboard.config import DEFAULT_SORT_DIRECTION, DEFAULT_SORT_KEY
from leaderboard.models import PlayerRecord, SortDirection, SortKey
from leaderboard.presentation.formatting import SORT_ARROWS, win_rate_band
from leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

PERCENT_RE = re.compile(r"\s*(\d+(?:\.\d+)?)")

# (label, sort key) in column order; Rank is positional and not sortable
COLUMNS = [
    ("Rank", None),
    ("Player", SortKey.PLAYER),
    ("Wins", SortKey.MATCHES_WON),
    ("Losses", SortKey.MATCHES_LOST),
    ("Win Rate", SortKey.WIN_RATE),
]


@dataclass
class LeaderboardState:
    """Per-session leaderboard state. Create one explicitly at session start."""

    records: tuple[PlayerRecord, ...] = ()
    sort_key: SortKey = SortKey(DEFAULT_SORT_KEY)
    sort_direction: SortDirection = SortDirection(DEFAULT_SORT_DIRECTION)


@dataclass(frozen=True)
class HeaderCell:
    label: str
    key: Optional[SortKey]
    active: bool = False
    arrow: str = ""

    @property
    def sortable(self) -> bool:
        return self.key is not None


@dataclass(frozen=True)
class TableRow:
    rank: int
    player: str
    matches_won: int
    matches_lost: int
    win_rate: str
    band: str


@dataclass(frozen=True)
class TableView:
    headers: tuple[HeaderCell, ...]
    rows: tuple[TableRow, ...] = field(default_factory=tuple)


def percent_value(text: str) -> float:
    """Numeric value of a percentage string ("67%" -> 67.0). Unparsable text is 0."""
    m = PERCENT_RE.match(text or "")
    return float(m.group(1)) if m else 0.0


def sort_value(record: PlayerRecord, key: SortKey):
    if key is SortKey.PLAYER:
        return locale.strxfrm(record.player.lower())
    if key is SortKey.WIN_RATE:
        return percent_value(record.win_rate)
    if key is SortKey.MATCHES_WON:
        return record.matches_won
    return record.matches_lost


def sort_records(
    records: Iterable[PlayerRecord],
    key: SortKey,
    direction: SortDirection,
) -> list[PlayerRecord]:
    """Return a new list ordered by key/direction. The input is not modified."""
    key = SortKey(key)
    return sorted(
        records,
        key=lambda record: sort_value(record, key),
        reverse=SortDirection(direction) is SortDirection.DESC,
    )


class Leaderboard:
    """
    Presentation component owning a LeaderboardState.

    Args:
        state: Session state (a fresh one is created when omitted)
        surface: Optional display surface that receives each rendered view
    """

    def __init__(self, state: Optional[LeaderboardState] = None, surface=None):
        self.state = state if state is not None else LeaderboardState()
        self.surface = surface

    def set_data(self, records: Iterable[PlayerRecord]) -> None:
        """Replace the current standings wholesale."""
        self.state.records = tuple(records)

    def sort_by(self, key: SortKey) -> TableView:
        """
        Activate a sort column.

        Selecting the active column flips the direction; selecting a
        different column makes it active with descending order.
        """
        key = SortKey(key)
        if self.state.sort_key is key:
            self.state.sort_direction = self.state.sort_direction.flipped()
        else:
            self.state.sort_key = key
            self.state.sort_direction = SortDirection.DESC

        logger.debug(f"Sorting by {key.value} {self.state.sort_direction.value}")
        return self.render()

    def sorted_records(self) -> list[PlayerRecord]:
        return sort_records(self.state.records, self.state.sort_key, self.state.sort_direction)

    def headers(self) -> tuple[HeaderCell, ...]:
        cells = []
        for label, key in COLUMNS:
            active = key is not None and key is self.state.sort_key
            arrow = SORT_ARROWS[self.state.sort_direction.value] if active else ""
            cells.append(HeaderCell(label=label, key=key, active=active, arrow=arrow))
        return tuple(cells)

    def render(self) -> TableView:
        """Build the table view for the current state and push it to the surface."""
        rows = tuple(
            TableRow(
                rank=index,
                player=record.player,
                matches_won=record.matches_won,
                matches_lost=record.matches_lost,
                win_rate=record.win_rate,
                band=win_rate_band(percent_value(record.win_rate)),
            )
            for index, record in enumerate(self.sorted_records(), start=1)
        )
        view = TableView(headers=self.headers(), rows=rows)

        if self.surface is not None:
            self.surface.show_table(view)
        return view
