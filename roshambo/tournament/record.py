"""
Win/loss/draw tally at one granularity (rounds or games).
"""

from dataclasses import dataclass


@dataclass
class Record:
    """Counts of wins, losses and draws."""
    wins: int = 0
    losses: int = 0
    draws: int = 0

    def add_win(self):
        self.wins += 1

    def add_loss(self):
        self.losses += 1

    def add_draw(self):
        self.draws += 1

    def reset(self):
        """Zero all counters."""
        self.wins = 0
        self.losses = 0
        self.draws = 0

    def copy(self) -> 'Record':
        """Return an independent copy of this record."""
        return Record(self.wins, self.losses, self.draws)

    @property
    def total(self) -> int:
        return self.wins + self.losses + self.draws

    @property
    def win_fraction(self) -> float:
        if self.total == 0:
            return 0.0
        return self.wins / self.total

    @property
    def win_percentage(self) -> float:
        return self.win_fraction * 100

    def format_fraction(self) -> str:
        """Format wins over total, e.g. '7/10'."""
        return f"{self.wins}/{self.total}"

    def __str__(self) -> str:
        return f"{self.wins}-{self.losses}-{self.draws}"
