"""
Refresh Orchestration

One refresh cycle fetches both documents, then either adopts the new data
or reports the failure, never both. Interaction handlers (refresh button,
sortable headers) are registered once per session in a dispatch table.

Overlapping refreshes are not guarded: if two cycles run at once, the last
one to finish wins.
"""

from datetime import datetime
from functools import partial
from typing import Callable

from leaderboard.config import SheetConfig
from leaderboard.ingestion.errors import IngestionError
from leaderboard.ingestion.fetch import FetchAll, fetch_all
from leaderboard.models import SortKey
from leaderboard.presentation.board import Leaderboard
from leaderboard.presentation.surface import DisplaySurface
from leaderboard.utils import setup_logging

# --- Module Logger ---
logger = setup_logging(__name__)

REFRESH_ACTION = "refresh"
SORT_ACTION_PREFIX = "sort:"

Handler = Callable[[], object]


def sort_action(key: SortKey) -> str:
    """Interaction identifier for a sortable header."""
    return f"{SORT_ACTION_PREFIX}{SortKey(key).value}"


def refresh(
    board: Leaderboard,
    surface: DisplaySurface,
    config: SheetConfig,
    fetch: FetchAll = fetch_all,
    clock: Callable[[], datetime] = datetime.now,
) -> bool:
    """
    Run one refresh cycle.

    Args:
        board: Presentation component whose data is replaced on success
        surface: Display surface for loading/error/prize/timestamp updates
        config: Source URLs
        fetch: Function fetching both documents (default: fetch_all)
        clock: Source of the "last updated" time

    Returns:
        True if new data was adopted, False if the cycle failed
    """
    surface.show_loading()
    surface.hide_error()

    try:
        snapshot = fetch(config)
    except IngestionError as e:
        logger.error(f"Error loading leaderboard: {e}")
        surface.show_error(str(e))
        return False
    else:
        board.set_data(snapshot.records)
        surface.show_table(board.render())
        surface.show_prizes(snapshot.prizes)
        surface.stamp_updated(clock())
        logger.info(f"Leaderboard refreshed with {len(snapshot.records)} players")
        return True
    finally:
        surface.hide_loading()


def build_dispatch(
    board: Leaderboard,
    surface: DisplaySurface,
    config: SheetConfig,
    fetch: FetchAll = fetch_all,
) -> dict[str, Handler]:
    """
    Build the interaction dispatch table for a session.

    Returns:
        Mapping of interaction id ("refresh", "sort:<key>") to handler
    """
    table: dict[str, Handler] = {
        REFRESH_ACTION: partial(refresh, board, surface, config, fetch),
    }
    for key in SortKey:
        table[sort_action(key)] = partial(board.sort_by, key)
    return table


def dispatch(table: dict[str, Handler], action: str):
    """
    Invoke the handler registered for an interaction.

    Raises:
        KeyError: If no handler is registered for action
    """
    try:
        handler = table[action]
    except KeyError:
        raise KeyError(f"No handler registered for interaction '{action}'") from None
    return handler()
