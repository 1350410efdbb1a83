"""
Tests for records and per-entrant player data.
"""

from roshambo.strategies.pattern_strategy import RockBot
from roshambo.tournament.elo import Rating
from roshambo.tournament.player_data import PlayerData
from roshambo.tournament.record import Record


class TestRecord:
    """Tests for the win/loss/draw tally."""

    def test_empty_record(self):
        record = Record()
        assert record.total == 0
        assert record.win_fraction == 0.0
        assert record.win_percentage == 0.0

    def test_counts_and_fraction(self):
        record = Record()
        record.add_win()
        record.add_win()
        record.add_loss()
        record.add_draw()

        assert (record.wins, record.losses, record.draws) == (2, 1, 1)
        assert record.total == 4
        assert record.win_fraction == 0.5
        assert record.win_percentage == 50.0
        assert record.format_fraction() == "2/4"

    def test_copy_is_independent(self):
        record = Record(3, 1, 0)
        snapshot = record.copy()
        snapshot.add_win()

        assert record.wins == 3
        assert snapshot.wins == 4

    def test_reset(self):
        record = Record(3, 2, 1)
        record.reset()
        assert record == Record()


class TestPlayerData:
    """Tests for PlayerData."""

    def test_name_from_identity(self):
        player = PlayerData("rock", RockBot)
        assert player.name == "rock"

    def test_new_instance_is_fresh(self):
        player = PlayerData("rock", RockBot)
        first = player.new_instance()
        second = player.new_instance()
        assert isinstance(first, RockBot)
        assert first is not second

    def test_reset_keeps_rating(self):
        player = PlayerData("rock", RockBot, rating=Rating(1234))
        player.rounds_record.add_win()
        player.games_record.add_loss()
        player.update_nemesis("paper", 3, 5)

        player.reset_records()

        assert player.rounds_record.total == 0
        assert player.games_record.total == 0
        assert player.nemesis is None
        assert player.rating.value == 1234

    def test_reset_idempotent(self):
        player = PlayerData("rock", RockBot, rating=Rating(1100))
        player.games_record.add_win()

        player.reset_records()
        once = (player.rounds_record.copy(), player.games_record.copy(), player.rating.value)
        player.reset_records()
        twice = (player.rounds_record.copy(), player.games_record.copy(), player.rating.value)

        assert once == twice

    def test_nemesis_running_maximum(self):
        player = PlayerData("rock", RockBot)
        player.update_nemesis("a", 2, 10)
        player.update_nemesis("b", 5, 10)
        player.update_nemesis("c", 3, 10)

        assert player.nemesis == "b"
        assert player.nemesis_rounds_lost == 5

    def test_nemesis_tie_keeps_first(self):
        player = PlayerData("rock", RockBot)
        player.update_nemesis("a", 4, 10)
        player.update_nemesis("b", 4, 10)
        assert player.nemesis == "a"

    def test_no_rounds_lost_no_nemesis(self):
        player = PlayerData("rock", RockBot)
        player.update_nemesis("a", 0, 10)
        assert player.nemesis is None
        assert player.get_stats()["Nemesis"] == "-"

    def test_stats_map(self):
        player = PlayerData("rock", RockBot, rating=Rating(1000))
        player.games_record.add_win()
        player.games_record.add_loss()
        player.rounds_record.add_win()
        player.rounds_record.add_draw()
        player.rounds_record.add_draw()
        player.rounds_record.add_loss()
        player.update_nemesis("paper", 1, 2)

        stats = player.get_stats()

        assert list(stats) == [
            "Name", "Games Won", "Games Won %", "Rounds Won", "Rounds Won %",
            "Rating", "Nemesis",
        ]
        assert stats["Name"] == "rock"
        assert stats["Games Won"] == "1/2"
        assert stats["Games Won %"] == "50.0%"
        assert stats["Rounds Won"] == "1/4"
        assert stats["Rounds Won %"] == "25.0%"
        assert stats["Rating"] == "1000"
        assert stats["Nemesis"] == "paper (1/2)"

    def test_sort_key_order(self):
        a = PlayerData("a", RockBot)
        b = PlayerData("b", RockBot)
        c = PlayerData("c", RockBot)
        # b: most game wins; a and c tie on games, c has more round wins
        b.games_record.wins = 3
        a.games_record.wins = 1
        c.games_record.wins = 1
        c.rounds_record.wins = 9
        a.rounds_record.wins = 2

        ranked = sorted([a, b, c], key=PlayerData.sort_key)
        assert [p.name for p in ranked] == ["b", "c", "a"]

    def test_sort_key_falls_back_to_name(self):
        players = [PlayerData(n, RockBot) for n in ("zed", "amy", "kim")]
        ranked = sorted(players, key=PlayerData.sort_key)
        assert [p.name for p in ranked] == ["amy", "kim", "zed"]
