"""
Typed records produced by ingestion and consumed by presentation.

Everything read from a sheet starts out as text; these records are the
strongly typed form that the rest of the package works with.
"""

import math
from dataclasses import dataclass
from enum import Enum

from leaderboard.config import PRIZE_PLACES


class SortKey(str, Enum):
    PLAYER = "player"
    MATCHES_WON = "matchesWon"
    MATCHES_LOST = "matchesLost"
    WIN_RATE = "winRate"


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


def compute_win_rate(won: int, lost: int) -> int:
    """Percentage of decided matches won, rounded half up. 0 when nothing was played."""
    total = won + lost
    if total <= 0:
        return 0
    return math.floor(won / total * 100 + 0.5)


@dataclass(frozen=True)
class PlayerRecord:
    """One row of the standings table."""

    player: str
    matches_won: int = 0
    matches_lost: int = 0

    @property
    def win_rate_value(self) -> int:
        return compute_win_rate(self.matches_won, self.matches_lost)

    @property
    def win_rate(self) -> str:
        """Formatted win rate, e.g. "67%". Always derived from the counts."""
        return f"{self.win_rate_value}%"


@dataclass(frozen=True)
class PrizePool:
    """Prize amounts for the three paid places."""

    first: float = 0.0
    second: float = 0.0
    third: float = 0.0

    @property
    def total(self) -> float:
        return self.first + self.second + self.third

    def for_place(self, place: str) -> float:
        """Amount for a place label ("1st", "2nd" or "3rd")."""
        slots = dict(zip(PRIZE_PLACES, (self.first, self.second, self.third)))
        try:
            return slots[place.strip().lower()]
        except KeyError:
            raise ValueError(
                f"Invalid place: '{place}'. "
                f"Allowed values: {', '.join(PRIZE_PLACES)}"
            ) from None


@dataclass(frozen=True)
class Snapshot:
    """Result of one successful fetch of both documents."""

    records: tuple[PlayerRecord, ...]
    prizes: PrizePool
