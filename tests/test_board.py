"""
Tests for leaderboard state, sorting and table rendering.
"""

import locale

import pytest

from leaderboard.models import PlayerRecord, SortDirection, SortKey
from leaderboard.presentation.board import (
    Leaderboard,
    LeaderboardState,
    percent_value,
    sort_records,
)
from leaderboard.presentation.surface import DisplaySurface
from leaderboard.utils import use_user_locale


def make_board(records, surface=None):
    board = Leaderboard(LeaderboardState(), surface=surface)
    board.set_data(records)
    return board


class TestSortRecords:
    """Tests for sort_records."""

    def test_matches_won_desc(self):
        records = [PlayerRecord("a", 3), PlayerRecord("b", 10), PlayerRecord("c", 1)]
        ordered = sort_records(records, SortKey.MATCHES_WON, SortDirection.DESC)
        assert [r.matches_won for r in ordered] == [10, 3, 1]

    def test_matches_won_asc(self):
        records = [PlayerRecord("a", 3), PlayerRecord("b", 10), PlayerRecord("c", 1)]
        ordered = sort_records(records, SortKey.MATCHES_WON, SortDirection.ASC)
        assert [r.matches_won for r in ordered] == [1, 3, 10]

    def test_matches_lost(self):
        records = [PlayerRecord("a", 0, 2), PlayerRecord("b", 0, 5)]
        ordered = sort_records(records, SortKey.MATCHES_LOST, SortDirection.DESC)
        assert [r.player for r in ordered] == ["b", "a"]

    def test_win_rate_is_numeric(self):
        # 1/11 -> 9%, 1/10 -> 10%
        nine = PlayerRecord("nine", 1, 10)
        ten = PlayerRecord("ten", 1, 9)
        assert nine.win_rate == "9%"
        assert ten.win_rate == "10%"
        ordered = sort_records([ten, nine], SortKey.WIN_RATE, SortDirection.ASC)
        assert [r.player for r in ordered] == ["nine", "ten"]

    def test_player_case_insensitive(self):
        records = [PlayerRecord("bob"), PlayerRecord("Alice"), PlayerRecord("carol")]
        ordered = sort_records(records, SortKey.PLAYER, SortDirection.ASC)
        assert [r.player for r in ordered] == ["Alice", "bob", "carol"]
        ordered = sort_records(records, SortKey.PLAYER, SortDirection.DESC)
        assert [r.player for r in ordered] == ["carol", "bob", "Alice"]

    @pytest.mark.parametrize("direction", [SortDirection.ASC, SortDirection.DESC])
    def test_ties_keep_input_order(self, direction):
        records = [PlayerRecord("x", 5), PlayerRecord("y", 5), PlayerRecord("z", 5)]
        ordered = sort_records(records, SortKey.MATCHES_WON, direction)
        assert [r.player for r in ordered] == ["x", "y", "z"]

    def test_input_not_modified(self):
        records = [PlayerRecord("a", 1), PlayerRecord("b", 2)]
        sort_records(records, SortKey.MATCHES_WON, SortDirection.DESC)
        assert [r.player for r in records] == ["a", "b"]


class TestPercentValue:
    """Tests for percent_value."""

    def test_strips_suffix(self):
        assert percent_value("67%") == 67.0

    def test_unparsable(self):
        assert percent_value("n/a") == 0.0


class TestSortBy:
    """Tests for the sort toggle rule."""

    def test_default_state(self):
        state = LeaderboardState()
        assert state.sort_key is SortKey.MATCHES_WON
        assert state.sort_direction is SortDirection.DESC

    def test_same_key_flips_direction(self):
        board = make_board([])
        board.sort_by(SortKey.MATCHES_WON)
        assert board.state.sort_direction is SortDirection.ASC
        board.sort_by(SortKey.MATCHES_WON)
        assert board.state.sort_direction is SortDirection.DESC

    def test_new_key_resets_to_desc(self):
        board = make_board([])
        board.sort_by(SortKey.MATCHES_WON)
        board.sort_by("player")
        assert board.state.sort_key is SortKey.PLAYER
        assert board.state.sort_direction is SortDirection.DESC

    def test_sort_survives_new_data(self):
        board = make_board([PlayerRecord("a", 1)])
        board.sort_by(SortKey.PLAYER)
        board.set_data([PlayerRecord("b", 2)])
        assert board.state.sort_key is SortKey.PLAYER

    def test_unknown_key(self):
        with pytest.raises(ValueError):
            make_board([]).sort_by("points")

    def test_sort_renders_to_surface(self):
        surface = DisplaySurface()
        board = make_board([PlayerRecord("a", 1), PlayerRecord("b", 2)], surface=surface)
        board.sort_by(SortKey.MATCHES_WON)
        assert [row.player for row in surface.table.rows] == ["a", "b"]


class TestRender:
    """Tests for Leaderboard.render."""

    def test_rank_is_positional(self):
        board = make_board([PlayerRecord("low", 1, 4), PlayerRecord("high", 9, 1)])
        view = board.render()
        assert [(row.rank, row.player) for row in view.rows] == [(1, "high"), (2, "low")]

    def test_rank_follows_current_sort(self):
        board = make_board([PlayerRecord("low", 1, 4), PlayerRecord("high", 9, 1)])
        view = board.sort_by(SortKey.MATCHES_WON)
        assert [(row.rank, row.player) for row in view.rows] == [(1, "low"), (2, "high")]

    def test_win_rate_bands(self):
        board = make_board([
            PlayerRecord("h", 6, 4),
            PlayerRecord("m", 4, 6),
            PlayerRecord("l", 3, 7),
        ])
        bands = {row.player: row.band for row in board.render().rows}
        assert bands == {"h": "high", "m": "medium", "l": "low"}

    def test_headers_mark_active_column(self):
        view = make_board([]).render()
        labels = [h.label for h in view.headers]
        assert labels == ["Rank", "Player", "Wins", "Losses", "Win Rate"]
        active = [h for h in view.headers if h.active]
        assert len(active) == 1
        assert active[0].label == "Wins"
        assert active[0].arrow == "▼"
        assert not view.headers[0].sortable

    def test_render_without_surface(self):
        view = make_board([PlayerRecord("a")]).render()
        assert len(view.rows) == 1

    def test_set_data_replaces_records(self):
        board = make_board([PlayerRecord("a"), PlayerRecord("b")])
        board.set_data([PlayerRecord("c")])
        assert [row.player for row in board.render().rows] == ["c"]


@pytest.fixture
def restore_locale():
    saved = locale.setlocale(locale.LC_ALL)
    yield
    locale.setlocale(locale.LC_ALL, saved)


class TestUserLocale:
    """Tests for use_user_locale and locale-aware player ordering."""

    def test_accented_names_collate_with_base_letter(self, monkeypatch, restore_locale):
        monkeypatch.setenv("LC_ALL", "en_US.UTF-8")
        if use_user_locale() is None:
            pytest.skip("en_US.UTF-8 locale not installed")

        records = [PlayerRecord("fred"), PlayerRecord("Émile"), PlayerRecord("zoe")]
        ordered = sort_records(records, SortKey.PLAYER, SortDirection.ASC)
        assert [r.player for r in ordered] == ["Émile", "fred", "zoe"]

    def test_unknown_locale_keeps_current(self, monkeypatch, restore_locale):
        before = locale.setlocale(locale.LC_ALL)
        monkeypatch.setenv("LC_ALL", "xx_NOWHERE.bogus")
        assert use_user_locale() is None
        assert locale.setlocale(locale.LC_ALL) == before
