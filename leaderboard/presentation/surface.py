"""
In-memory model of what the page currently shows.

The Streamlit page re-runs top to bottom on every interaction, so the visible
state (table, prizes, banners) is kept here in session_state and painted
from scratch on each run.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING, Callable, Optional

from leaderboard.models import PrizePool
from leaderboard.presentation.formatting import format_timestamp

if TYPE_CHECKING:
    from leaderboard.presentation.board import TableView


@dataclass
class DisplaySurface:
    table: Optional["TableView"] = None
    prizes: Optional[PrizePool] = None
    loading: bool = False
    error: Optional[str] = None
    last_updated: Optional[str] = None
    # Called with the new loading flag; the page points this at its indicator slot
    loading_listener: Optional[Callable[[bool], None]] = None

    def show_table(self, view: "TableView") -> None:
        self.table = view

    def show_prizes(self, prizes: PrizePool) -> None:
        self.prizes = prizes

    def _set_loading(self, loading: bool) -> None:
        self.loading = loading
        if self.loading_listener is not None:
            self.loading_listener(loading)

    def show_loading(self) -> None:
        self._set_loading(True)

    def hide_loading(self) -> None:
        self._set_loading(False)

    def show_error(self, message: str) -> None:
        self.error = f"Error: {message}"

    def hide_error(self) -> None:
        self.error = None

    def stamp_updated(self, moment: datetime) -> None:
        self.last_updated = format_timestamp(moment)
