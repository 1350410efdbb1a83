"""
Elo rating calculator for tournament entrants.

Implements the standard Elo rating system, applied after every game:
- Expected score: E = 1 / (1 + 10^((R_opp - R_self) / 400))
- Rating update: R_new = R_old + K * (S - E)
"""

from dataclasses import dataclass

from roshambo.utils.constants import (
    WIN_VALUE, DRAW_VALUE, LOSS_VALUE,
    DEFAULT_K_FACTOR, DEFAULT_INITIAL_RATING
)


@dataclass
class Rating:
    """Mutable skill score for one entrant."""
    value: float = float(DEFAULT_INITIAL_RATING)

    def __str__(self) -> str:
        return f"{self.value:.0f}"


class EloCalculator:
    """
    Standard Elo rating calculator.

    Updates both ratings in place after a single game, using the game outcome
    values (WIN_VALUE, DRAW_VALUE, LOSS_VALUE) as actual scores.
    """

    WIN = WIN_VALUE
    DRAW = DRAW_VALUE
    LOSS = LOSS_VALUE

    def __init__(self, k_factor: float = DEFAULT_K_FACTOR, initial_rating: float = DEFAULT_INITIAL_RATING):
        """
        Initialize the Elo calculator.

        Args:
            k_factor: The K-factor determines rating volatility (default: 32)
            initial_rating: Starting rating for new entrants
        """
        self.k_factor = k_factor
        self.initial_rating = initial_rating

    def new_rating(self) -> Rating:
        """Create a rating at the initial value."""
        return Rating(float(self.initial_rating))

    def expected_score(self, rating_a: float, rating_b: float) -> float:
        """
        Calculate expected score for player A against player B.

        Args:
            rating_a: Rating of player A
            rating_b: Rating of player B

        Returns:
            Expected score between 0 and 1
        """
        return 1.0 / (1.0 + 10 ** ((rating_b - rating_a) / 400.0))

    def update_ratings(
        self,
        rating_a: Rating,
        rating_b: Rating,
        outcome_a: float,
        outcome_b: float
    ) -> None:
        """
        Update both ratings after a game.

        Both deltas are computed from the pre-update values. Outcomes are not
        required to sum to one: a double forfeit awards both sides a win.

        Args:
            rating_a: Rating of the first player (mutated)
            rating_b: Rating of the second player (mutated)
            outcome_a: Outcome value for the first player
            outcome_b: Outcome value for the second player
        """
        old_a = rating_a.value
        old_b = rating_b.value

        expected_a = self.expected_score(old_a, old_b)
        expected_b = 1.0 - expected_a

        rating_a.value = old_a + self.k_factor * (outcome_a - expected_a)
        rating_b.value = old_b + self.k_factor * (outcome_b - expected_b)
