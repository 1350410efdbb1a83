"""
Move type for rock-paper-scissors.
"""
import random
from enum import Enum
from typing import Optional

from roshambo.utils.constants import (
    NUM_MOVES,
    VERDICT_WIN, VERDICT_DRAW, VERDICT_LOSS
)


class Move(Enum):
    """
    A move a player can make: rock, paper or scissors.

    Paper beats rock, scissors beats paper, and rock beats scissors. Each
    value is beaten by the value one place above it (wrapping around) and
    beats the value one place below it.
    """

    ROCK = 0
    PAPER = 1
    SCISSORS = 2

    @classmethod
    def random(cls, rng: Optional[random.Random] = None) -> 'Move':
        """
        Return a uniformly chosen move.

        Args:
            rng: Optional random source (defaults to the module-level one)
        """
        source = rng or random
        return source.choice(list(cls))

    @classmethod
    def parse(cls, text: str) -> 'Move':
        """
        Parse a move from its name or first letter ('rock', 'P', ...).

        Raises:
            ValueError: If the text does not name a move
        """
        key = text.strip().upper()
        for move in cls:
            if key in (move.name, move.name[0]):
                return move
        raise ValueError(f"Unknown move: {text!r}")

    def counter(self) -> 'Move':
        """Return the move that beats this move."""
        return Move((self.value + 1) % NUM_MOVES)

    def defeated(self) -> 'Move':
        """Return the move that this move beats."""
        return Move((self.value - 1 + NUM_MOVES) % NUM_MOVES)

    def shift(self, amount: int) -> 'Move':
        """
        Return this move shifted by the given number of places.

        Shifting ROCK by 1 gives PAPER, by 2 gives SCISSORS. Negative amounts
        shift the other way.
        """
        return Move((self.value + amount) % NUM_MOVES)

    def beats(self, other: 'Move') -> bool:
        """Return whether this move beats the other move."""
        return other.counter() is self

    def versus(self, other: 'Move') -> int:
        """
        Compare this move against another.

        Returns:
            0 for a draw, 1 if this move wins, -1 if this move loses
        """
        if self is other:
            return VERDICT_DRAW
        if self.beats(other):
            return VERDICT_WIN
        return VERDICT_LOSS

    def __str__(self) -> str:
        return self.name.capitalize()


def versus(a: Move, b: Move) -> int:
    """Return the verdict of move `a` against move `b` (1, 0 or -1)."""
    return a.versus(b)
