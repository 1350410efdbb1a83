"""
Tests for tournament display formatting.
"""

from roshambo.strategies.pattern_strategy import PaperBot, RockBot
from roshambo.tournament.display import (
    format_rankings,
    format_leaderboard,
    format_win_matrix,
    format_tournament_header,
    format_game_result,
)
from roshambo.tournament.results import GameResult
from roshambo.tournament.runner import TournamentRunner


class TestFormatRankings:
    """Tests for the columnar rankings table."""

    def test_column_widths(self):
        stats = [
            {"Name": "A", "X": "1"},
            {"Name": "Bob", "X": "10"},
        ]

        lines = format_rankings(stats).split("\n")

        assert lines[0] == "Name   X"
        assert lines[1] == "=" * 9
        assert lines[2] == "A      1"
        assert lines[3] == "Bob    10"

    def test_long_value_widens_column(self):
        stats = [{"Name": "a_very_long_name", "X": "1"}]
        lines = format_rankings(stats).split("\n")
        assert lines[0].index("X") == len("a_very_long_name") + 3

    def test_empty(self):
        assert format_rankings([]) == ""


class TestResultFormatting:
    """Tests for leaderboard and matrix output from a real run."""

    def _run(self):
        runner = TournamentRunner()
        runner.register('rock', RockBot)
        runner.register('paper', PaperBot)
        return runner.run_tournament(rounds=2, games=3)

    def test_leaderboard_in_rank_order(self):
        text = format_leaderboard(self._run())
        lines = text.split("\n")
        assert lines[0].startswith("Name")
        assert lines[2].startswith("paper")
        assert lines[3].startswith("rock")
        assert "paper (2/2)" in lines[3]

    def test_win_matrix(self):
        text = format_win_matrix(self._run())
        assert "Win Matrix" in text
        assert "3-0" in text
        assert "0-3" in text

    def test_header(self):
        text = format_tournament_header(10, 5, 4, training=True)
        assert "10 round long games" in text
        assert "5 game long matches" in text
        assert "4 competitors" in text
        assert "training" in text

    def test_game_result_lines(self):
        played = GameResult('a', 'b', 3, rounds_played=3, a_round_wins=2, b_round_wins=1, outcome='a_win')
        forfeit = GameResult('a', 'b', 3, outcome='b_win', disqualified=('a',))

        assert format_game_result(played) == "a vs b: 2-1 (a)"
        assert format_game_result(forfeit) == "a vs b: forfeited by a"
