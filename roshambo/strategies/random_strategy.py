"""
Random strategies.
"""
from typing import Sequence

from roshambo.game.move import Move
from roshambo.strategies.strategy import Strategy


class RandomBot(Strategy):
    """
    Always plays a random move.

    This serves as a baseline strategy and can be used for testing.
    """

    def make_move(self, opponent_moves: Sequence[Move]) -> Move:
        return Move.random()


class RandomDummy(RandomBot):
    """A second random player, registered under its own identity."""
