"""
Base Strategy class for rock-paper-scissors players.
"""
from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
    from roshambo.game.move import Move
    from roshambo.tournament.record import Record


class Strategy(ABC):
    """
    Abstract base class for tournament strategies.

    A fresh instance is built for every game, so instance attributes only live
    for one game. State that should survive between games goes through the
    training hooks, which the tournament only calls in training mode.
    """

    @property
    def name(self) -> str:
        """Display name for the strategy."""
        return type(self).__name__

    @abstractmethod
    def make_move(self, opponent_moves: Sequence['Move']) -> 'Move':
        """
        Choose the next move.

        Args:
            opponent_moves: The opponent's moves so far this game, oldest first

        Returns:
            The move to play this round
        """
        pass

    def training_init(self, prior_state: Optional[Any]) -> Any:
        """
        Load training state at the start of a game.

        Args:
            prior_state: State returned by this strategy's last training hook,
                or None if there is none yet

        Returns:
            The state to store for this strategy
        """
        return prior_state

    def training_end(self, round_record: 'Record') -> Any:
        """
        Save training state at the end of a completed game.

        Args:
            round_record: Copy of this strategy's tournament round record

        Returns:
            The state to store for this strategy
        """
        return None
