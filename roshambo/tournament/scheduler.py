"""
Round-robin tournament scheduling.

Generates one matchup per unordered pair of entrants, in roster order.
"""

from itertools import combinations
from dataclasses import dataclass
from typing import List


@dataclass
class Matchup:
    """Represents a single matchup between two participants."""
    participant_a: str
    participant_b: str
    games: int

    @property
    def matchup_id(self) -> str:
        """Generate a unique ID for this matchup."""
        return f"{self.participant_a}_vs_{self.participant_b}"


def generate_round_robin_schedule(
    participants: List[str],
    games_per_matchup: int
) -> List[Matchup]:
    """
    Generate all matchups for a round-robin tournament.

    Pairs keep roster order: for participants [a, b, c] the matchups are
    a-b, a-c, b-c, with the earlier entrant as participant A.

    Args:
        participants: List of participant identities
        games_per_matchup: Number of games per matchup

    Returns:
        List of Matchup objects

    Raises:
        ValueError: If fewer than 2 participants
    """
    if len(participants) < 2:
        raise ValueError("Need at least 2 participants for a tournament")

    matchups = []
    for a, b in combinations(participants, 2):
        matchups.append(Matchup(
            participant_a=a,
            participant_b=b,
            games=games_per_matchup
        ))

    return matchups


def total_games(participants: List[str], games_per_matchup: int) -> int:
    """Calculate total games in a round-robin tournament."""
    return num_matchups(participants) * games_per_matchup


def num_matchups(participants: List[str]) -> int:
    """Calculate number of matchups in a round-robin tournament."""
    n = len(participants)
    return n * (n - 1) // 2


def games_per_entrant(participants: List[str], games_per_matchup: int) -> int:
    """Games each entrant plays: one match against every other entrant."""
    return (len(participants) - 1) * games_per_matchup
