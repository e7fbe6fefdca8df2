"""
Sheet Leaderboard - Core Package

This package contains the core modules for:
- CSV ingestion of the published standings and setup sheets (leaderboard.ingestion)
- Sorting and rendering the leaderboard (leaderboard.presentation)
- Refresh orchestration and interaction dispatch (leaderboard.refresh)
- Shared configuration and utilities
"""

__version__ = "1.0.0"
