"""
Deterministic pattern strategies.
"""
from typing import Sequence

from roshambo.game.move import Move
from roshambo.strategies.strategy import Strategy


class ConstantBot(Strategy):
    """Plays the same move every round."""

    move = Move.ROCK

    def make_move(self, opponent_moves: Sequence[Move]) -> Move:
        return self.move


class RockBot(ConstantBot):
    move = Move.ROCK


class PaperBot(ConstantBot):
    move = Move.PAPER


class ScissorsBot(ConstantBot):
    move = Move.SCISSORS


class CycleBot(Strategy):
    """Plays rock, paper, scissors, rock, ... in order."""

    def __init__(self, start: Move = Move.ROCK):
        self._next = start

    def make_move(self, opponent_moves: Sequence[Move]) -> Move:
        move = self._next
        self._next = move.shift(1)
        return move


class CounterLastBot(Strategy):
    """Plays whatever beats the opponent's previous move (rock on round one)."""

    def make_move(self, opponent_moves: Sequence[Move]) -> Move:
        if not opponent_moves:
            return Move.ROCK
        return opponent_moves[-1].counter()
