import base64
from functools import partial

import streamlit as st

from leaderboard.config import load_sheet_config
from leaderboard.presentation import DisplaySurface, Leaderboard, LeaderboardState
from leaderboard.presentation.export import to_csv_bytes
from leaderboard.presentation.formatting import render_prizes_html, render_table_html
from leaderboard.refresh import REFRESH_ACTION, build_dispatch, dispatch, sort_action
from leaderboard.utils import use_user_locale

# --- Page Configuration ---
st.set_page_config(
    page_title="Leaderboard",
    page_icon="🏆",
    layout="wide",
    initial_sidebar_state="collapsed"
)

CUSTOM_CSS = """
<style>
    .leaderboard { width: 100%; border-collapse: collapse; }
    .leaderboard th, .leaderboard td { padding: 0.5rem 0.75rem; text-align: left; }
    .leaderboard th.active { color: #FF6B6B; }
    .leaderboard tbody tr { border-top: 1px solid rgba(255,255,255,0.1); }
    .leaderboard td.rank { font-weight: 700; color: #FF6B6B; }
    .sort-arrow { margin-left: 0.3rem; font-size: 0.7rem; }
</style>
"""


def _secrets() -> dict:
    """Streamlit secrets as a plain dict (empty when no secrets.toml exists)."""
    try:
        return dict(st.secrets)
    except FileNotFoundError:
        return {}


def paint_loading(slot, loading: bool):
    """Show or clear the loading indicator in its placeholder."""
    if loading:
        slot.info("⏳ Loading leaderboard...")
    else:
        slot.empty()


def init_session(loading_slot):
    """
    Create the per-session objects once: state, surface, board and the
    interaction dispatch table. Triggers the initial load.
    """
    if "dispatch" in st.session_state:
        return

    config = load_sheet_config(secrets=_secrets())
    surface = DisplaySurface(loading_listener=partial(paint_loading, loading_slot))
    board = Leaderboard(LeaderboardState(), surface=surface)

    st.session_state.surface = surface
    st.session_state.board = board
    st.session_state.dispatch = build_dispatch(board, surface, config)

    dispatch(st.session_state.dispatch, REFRESH_ACTION)


def on_interaction(action: str):
    dispatch(st.session_state.dispatch, action)


def create_download_link(data: bytes, filename: str, label: str) -> str:
    """
    Create a styled HTML download link for CSV data.

    Args:
        data: Encoded CSV bytes
        filename: The filename for the download
        label: The link text

    Returns:
        HTML string with the download link
    """
    b64 = base64.b64encode(data).decode()
    style = "display:inline-block;padding:0.4rem 0.8rem;border:1px solid rgba(255,255,255,0.2);border-radius:8px;text-decoration:none;"
    return f'<a href="data:text/csv;base64,{b64}" download="{filename}" style="{style}">{label}</a>'


def render_sort_controls(board: Leaderboard):
    """One button per sortable column, wired through the dispatch table."""
    headers = [header for header in board.headers() if header.sortable]
    columns = st.columns(len(headers) + 1)
    columns[0].caption("Sort by")
    for column, header in zip(columns[1:], headers):
        column.button(
            f"{header.label} {header.arrow}".strip(),
            key=f"sort_{header.key.value}",
            on_click=on_interaction,
            args=(sort_action(header.key),),
            type="primary" if header.active else "secondary",
            use_container_width=True,
        )


def main():
    use_user_locale()
    st.html(CUSTOM_CSS)
    st.title("🏆 Leaderboard")

    loading_slot = st.empty()
    init_session(loading_slot)
    surface: DisplaySurface = st.session_state.surface
    # Placeholders belong to the current run; repoint the indicator every rerun
    surface.loading_listener = partial(paint_loading, loading_slot)
    board: Leaderboard = st.session_state.board

    top_left, top_right = st.columns([4, 1])
    with top_right:
        if st.button("🔄 Refresh", use_container_width=True):
            on_interaction(REFRESH_ACTION)
    with top_left:
        if surface.last_updated:
            st.caption(surface.last_updated)

    if surface.error:
        st.error(surface.error)

    if surface.prizes is not None:
        st.markdown(render_prizes_html(surface.prizes), unsafe_allow_html=True)
        st.markdown("---")

    if surface.table is None:
        st.info("No standings loaded yet.")
        return

    render_sort_controls(board)
    st.markdown(render_table_html(surface.table), unsafe_allow_html=True)

    st.markdown("---")
    st.markdown(
        create_download_link(to_csv_bytes(surface.table), "leaderboard.csv", "📥 Download Leaderboard CSV"),
        unsafe_allow_html=True
    )


if __name__ == "__main__":
    main()
