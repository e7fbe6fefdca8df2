"""CSV export of the standings exactly as they are displayed."""

import pandas as pd

from leaderboard.presentation.board import COLUMNS, TableView

EXPORT_COLUMNS = [label for label, _ in COLUMNS]


def records_to_frame(view: TableView) -> pd.DataFrame:
    """
    Convert a rendered table into a DataFrame, one row per displayed player.

    Args:
        view: TableView from Leaderboard.render()

    Returns:
        DataFrame with columns Rank, Player, Wins, Losses, Win Rate
    """
    rows = [
        (row.rank, row.player, row.matches_won, row.matches_lost, row.win_rate)
        for row in view.rows
    ]
    return pd.DataFrame(rows, columns=EXPORT_COLUMNS)


def to_csv_bytes(view: TableView) -> bytes:
    return records_to_frame(view).to_csv(index=False).encode("utf-8")
