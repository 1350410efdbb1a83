"""
Per-entrant tournament state.
"""

from typing import Callable, Dict, Optional, Tuple, TYPE_CHECKING

from roshambo.tournament.elo import Rating
from roshambo.tournament.record import Record

if TYPE_CHECKING:
    from roshambo.strategies.strategy import Strategy


class PlayerData:
    """
    Tracks one registered strategy across a tournament.

    Holds the recipe for building fresh strategy instances, the round and game
    records, the rating, and the entrant's nemesis: the opponent who won the
    most rounds against it in a single game.
    """

    def __init__(
        self,
        identity: str,
        factory: Callable[[], 'Strategy'],
        rating: Optional[Rating] = None
    ):
        """
        Args:
            identity: Stable strategy identity (also the display name)
            factory: Zero-argument callable returning a new strategy instance
            rating: Starting rating (defaults to a fresh Rating)
        """
        self.identity = identity
        self.factory = factory
        self.rating = rating if rating is not None else Rating()
        self.rounds_record = Record()
        self.games_record = Record()
        self.nemesis: Optional[str] = None
        self.nemesis_rounds_lost = 0
        self.nemesis_rounds = 0

    @property
    def name(self) -> str:
        return self.identity

    def new_instance(self) -> 'Strategy':
        """Build a brand-new strategy instance for one game."""
        return self.factory()

    def reset_records(self):
        """Zero both records and the nemesis; the rating is kept."""
        self.rounds_record.reset()
        self.games_record.reset()
        self.nemesis = None
        self.nemesis_rounds_lost = 0
        self.nemesis_rounds = 0

    def update_nemesis(self, opponent: str, rounds_lost: int, rounds: int):
        """
        Record `opponent` as nemesis if it beat this player in more rounds
        than any opponent so far. Earlier maxima win ties.
        """
        if rounds_lost > self.nemesis_rounds_lost:
            self.nemesis = opponent
            self.nemesis_rounds_lost = rounds_lost
            self.nemesis_rounds = rounds

    def format_nemesis(self) -> str:
        if self.nemesis is None:
            return "-"
        return f"{self.nemesis} ({self.nemesis_rounds_lost}/{self.nemesis_rounds})"

    def get_stats(self) -> Dict[str, str]:
        """Return the ordered statistic map shown in the rankings table."""
        return {
            "Name": self.name,
            "Games Won": self.games_record.format_fraction(),
            "Games Won %": f"{self.games_record.win_percentage:.1f}%",
            "Rounds Won": self.rounds_record.format_fraction(),
            "Rounds Won %": f"{self.rounds_record.win_percentage:.1f}%",
            "Rating": str(self.rating),
            "Nemesis": self.format_nemesis(),
        }

    def sort_key(self) -> Tuple[int, int, str]:
        """Most games won, then most rounds won, then name ascending."""
        return (-self.games_record.wins, -self.rounds_record.wins, self.name)

    def __repr__(self) -> str:
        return (f"PlayerData({self.identity!r}, games={self.games_record}, "
                f"rounds={self.rounds_record}, rating={self.rating})")
