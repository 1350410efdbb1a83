"""
Frequency analysis strategy.

Counts the opponent's moves and plays the counter to the most frequent one.
In training mode the counts carry over from game to game, so the strategy
models the field as a whole rather than a single opponent.
"""
from typing import Any, Optional, Sequence

import numpy as np

from roshambo.game.move import Move
from roshambo.strategies.strategy import Strategy
from roshambo.utils.constants import NUM_MOVES


class FrequencyBot(Strategy):
    """
    Counters the opponent's most frequent move.

    Attributes:
        prior_counts: Move counts carried over from earlier games
        decay: Weight applied to the prior counts when a game starts
    """

    def __init__(self, decay: float = 0.9):
        self.decay = decay
        self.prior_counts = np.zeros(NUM_MOVES, dtype=np.float64)
        self.games_trained = 0
        self._seen = 0
        self._game_counts = np.zeros(NUM_MOVES, dtype=np.float64)

    def make_move(self, opponent_moves: Sequence[Move]) -> Move:
        # Only count moves not yet seen this game
        for move in opponent_moves[self._seen:]:
            self._game_counts[move.value] += 1
        self._seen = len(opponent_moves)

        counts = self.prior_counts + self._game_counts
        if not counts.any():
            return Move.random()

        predicted = Move(int(np.argmax(counts)))
        return predicted.counter()

    def training_init(self, prior_state: Optional[Any]) -> Any:
        if prior_state is not None:
            self.prior_counts = np.asarray(prior_state["counts"], dtype=np.float64) * self.decay
            self.games_trained = prior_state["games"]
        return {"counts": self.prior_counts.copy(), "games": self.games_trained}

    def training_end(self, round_record) -> Any:
        return {
            "counts": self.prior_counts + self._game_counts,
            "games": self.games_trained + 1,
            "round_win_rate": round_record.win_fraction,
        }
