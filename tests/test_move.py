"""
Unit tests for the move engine.
"""

import random

import pytest
from roshambo.game.move import Move, versus


class TestMoveRelation:
    """Tests for the cyclic beats-relation."""

    def test_paper_beats_rock(self):
        assert Move.PAPER.beats(Move.ROCK)
        assert not Move.ROCK.beats(Move.PAPER)

    def test_scissors_beats_paper(self):
        assert Move.SCISSORS.beats(Move.PAPER)
        assert not Move.PAPER.beats(Move.SCISSORS)

    def test_rock_beats_scissors(self):
        assert Move.ROCK.beats(Move.SCISSORS)
        assert not Move.SCISSORS.beats(Move.ROCK)

    def test_no_move_beats_itself(self):
        for move in Move:
            assert not move.beats(move)

    def test_exactly_one_of_two_distinct_moves_wins(self):
        """The relation is a strict cyclic tournament."""
        for a in Move:
            for b in Move:
                if a is not b:
                    assert a.beats(b) != b.beats(a)

    def test_counter_and_defeated(self):
        assert Move.ROCK.counter() is Move.PAPER
        assert Move.SCISSORS.counter() is Move.ROCK
        assert Move.ROCK.defeated() is Move.SCISSORS
        assert Move.PAPER.defeated() is Move.ROCK
        for move in Move:
            assert move.counter().beats(move)
            assert move.beats(move.defeated())


class TestVersus:
    """Tests for the three-way verdict."""

    def test_draw(self):
        for move in Move:
            assert move.versus(move) == 0

    def test_win_and_loss(self):
        assert Move.PAPER.versus(Move.ROCK) == 1
        assert Move.ROCK.versus(Move.PAPER) == -1
        assert versus(Move.SCISSORS, Move.PAPER) == 1
        assert versus(Move.SCISSORS, Move.ROCK) == -1

    def test_antisymmetric(self):
        for a in Move:
            for b in Move:
                assert a.versus(b) == -b.versus(a)


class TestMoveHelpers:
    """Tests for shift, parse and random."""

    def test_shift(self):
        assert Move.ROCK.shift(1) is Move.PAPER
        assert Move.ROCK.shift(2) is Move.SCISSORS
        assert Move.ROCK.shift(3) is Move.ROCK
        assert Move.ROCK.shift(-1) is Move.SCISSORS

    def test_parse(self):
        assert Move.parse("rock") is Move.ROCK
        assert Move.parse(" Paper ") is Move.PAPER
        assert Move.parse("s") is Move.SCISSORS

    def test_parse_unknown_raises(self):
        with pytest.raises(ValueError):
            Move.parse("lizard")

    def test_random_returns_move(self):
        rng = random.Random(7)
        seen = {Move.random(rng) for _ in range(100)}
        assert seen == set(Move)

    def test_random_reproducible(self):
        a = [Move.random(random.Random(3)) for _ in range(5)]
        b = [Move.random(random.Random(3)) for _ in range(5)]
        assert a == b
