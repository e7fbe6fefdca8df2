"""
Display formatting for the leaderboard table and prize summary.

HTML fragments produced here are meant for st.markdown(..., unsafe_allow_html=True),
so every piece of sheet-supplied text goes through html.escape first.
"""

import html
from datetime import datetime

from leaderboard.config import HIGH_WIN_RATE, MEDIUM_WIN_RATE, PRIZE_PLACES
from leaderboard.models import PrizePool

SORT_ARROWS = {"asc": "▲", "desc": "▼"}

BAND_COLORS = {
    "high": "#10B981",
    "medium": "#F59E0B",
    "low": "#EF4444",
}


def win_rate_band(value: float) -> str:
    """Qualitative band for a win-rate percentage: high, medium or low."""
    if value >= HIGH_WIN_RATE:
        return "high"
    if value >= MEDIUM_WIN_RATE:
        return "medium"
    return "low"


def format_currency(amount: float) -> str:
    return f"${amount:,.2f}"


def format_timestamp(moment: datetime) -> str:
    """Locale-formatted "last updated" line."""
    return f"Last updated: {moment.strftime('%c')}"


def prize_lines(prizes: PrizePool) -> list[tuple[str, str]]:
    """Labelled prize amounts in display order: total pool, then 1st-3rd."""
    lines = [("Prize Pool", format_currency(prizes.total))]
    lines.extend((place, format_currency(prizes.for_place(place))) for place in PRIZE_PLACES)
    return lines


def render_table_html(view) -> str:
    """
    Render a TableView as an HTML table.

    Args:
        view: TableView produced by Leaderboard.render()

    Returns:
        HTML string; player names are escaped
    """
    if not view.rows:
        return "<p>No data available</p>"

    header_cells = []
    for header in view.headers:
        classes = ["sortable"] if header.sortable else []
        if header.active:
            classes.append("active")
        class_attr = f' class="{" ".join(classes)}"' if classes else ""
        header_cells.append(
            f'<th{class_attr}>{html.escape(header.label)}'
            f'<span class="sort-arrow">{header.arrow}</span></th>'
        )

    body_rows = []
    for row in view.rows:
        color = BAND_COLORS[row.band]
        body_rows.append(
            "<tr>"
            f'<td class="rank">{row.rank}</td>'
            f'<td class="player-name">{html.escape(row.player)}</td>'
            f"<td>{row.matches_won}</td>"
            f"<td>{row.matches_lost}</td>"
            f'<td class="win-rate {row.band}" style="color:{color};font-weight:600;">{row.win_rate}</td>'
            "</tr>"
        )

    return (
        '<table class="leaderboard">'
        f'<thead><tr>{"".join(header_cells)}</tr></thead>'
        f'<tbody>{"".join(body_rows)}</tbody>'
        "</table>"
    )


def render_prizes_html(prizes: PrizePool) -> str:
    """Render the prize summary as a row of labelled amounts."""
    stat_layout = "display:flex;flex-direction:column;align-items:center;text-align:center;"
    label_style = "font-size:0.8rem;text-transform:uppercase;color:var(--text-color);font-weight:500;"
    value_style = "font-size:1.4rem;font-weight:700;color:var(--text-color);"

    stats = "".join(
        f'<div style="{stat_layout}"><span style="{label_style}">{label}</span>'
        f'<span style="{value_style}">{amount}</span></div>'
        for label, amount in prize_lines(prizes)
    )
    return f'<div class="prize-summary" style="display:grid;grid-template-columns:repeat(4, 1fr);">{stats}</div>'
