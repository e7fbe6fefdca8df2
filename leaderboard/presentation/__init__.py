"""
Leaderboard Presentation

Modules:
- board: Leaderboard state, sorting and table views
- formatting: Currency, win-rate bands, timestamps and HTML fragments
- surface: In-memory model of the visible page
- export: CSV export of the displayed table
"""

from leaderboard.presentation.board import Leaderboard, LeaderboardState, TableView, sort_records
from leaderboard.presentation.surface import DisplaySurface

__all__ = [
    'Leaderboard',
    'LeaderboardState',
    'TableView',
    'sort_records',
    'DisplaySurface',
]
