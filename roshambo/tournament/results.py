"""
Result containers for games, matchups and whole tournaments.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from roshambo.tournament.record import Record
from roshambo.utils.constants import A_WINS, B_WINS, DRAW


@dataclass
class GameResult:
    """Outcome of a single game between two entrants."""
    participant_a: str
    participant_b: str
    rounds_scheduled: int
    rounds_played: int = 0
    a_round_wins: int = 0
    b_round_wins: int = 0
    outcome: str = DRAW
    disqualified: Tuple[str, ...] = ()

    @property
    def forfeited(self) -> bool:
        return bool(self.disqualified)

    @property
    def winner(self) -> Optional[str]:
        if self.outcome == A_WINS:
            return self.participant_a
        if self.outcome == B_WINS:
            return self.participant_b
        return None


@dataclass
class MatchupResult:
    """Results for a single pairwise matchup."""
    participant_a: str
    participant_b: str
    a_wins: int = 0
    b_wins: int = 0
    draws: int = 0
    games_played: int = 0
    games_scheduled: int = 0
    disqualifications: int = 0

    @property
    def matchup_id(self) -> str:
        return f"{self.participant_a}_vs_{self.participant_b}"

    @property
    def a_win_rate(self) -> float:
        if self.games_played == 0:
            return 0.0
        return self.a_wins / self.games_played

    def add_game(self, game: GameResult):
        """Fold one game into the matchup totals."""
        self.games_played += 1
        if game.forfeited:
            self.disqualifications += 1
        if len(game.disqualified) == 2:
            # Double forfeit: both sides are credited a win
            self.a_wins += 1
            self.b_wins += 1
        elif game.outcome == A_WINS:
            self.a_wins += 1
        elif game.outcome == B_WINS:
            self.b_wins += 1
        else:
            self.draws += 1


@dataclass
class Standing:
    """One row of the final rankings."""
    rank: int
    name: str
    games_record: Record
    rounds_record: Record
    rating: float
    nemesis: Optional[str]
    nemesis_rounds_lost: int
    nemesis_rounds: int
    stats: Dict[str, str] = field(default_factory=dict)

    @property
    def game_wins(self) -> int:
        return self.games_record.wins

    @property
    def round_wins(self) -> int:
        return self.rounds_record.wins


@dataclass
class TournamentResult:
    """Complete results of a tournament run."""
    rounds: int
    games: int
    training: bool
    standings: List[Standing]
    matchups: List[MatchupResult]
    time_seconds: float = 0.0

    @property
    def total_games(self) -> int:
        return sum(m.games_played for m in self.matchups)

    def get_rankings(self) -> List[Standing]:
        """Return standings in rank order."""
        return sorted(self.standings, key=lambda s: s.rank)

    def get_standing(self, name: str) -> Optional[Standing]:
        for standing in self.standings:
            if standing.name == name:
                return standing
        return None

    def get_win_matrix(self) -> Dict[str, Dict[str, Dict[str, int]]]:
        """
        Generate a win matrix from matchup results.

        Returns:
            {
                'entrant_a': {
                    'entrant_b': {'wins': X, 'losses': Y, 'draws': Z},
                    ...
                },
                ...
            }
        """
        matrix = {s.name: {} for s in self.standings}

        for matchup in self.matchups:
            a, b = matchup.participant_a, matchup.participant_b
            matrix[a][b] = {
                'wins': matchup.a_wins,
                'losses': matchup.b_wins,
                'draws': matchup.draws
            }
            matrix[b][a] = {
                'wins': matchup.b_wins,
                'losses': matchup.a_wins,
                'draws': matchup.draws
            }

        return matrix
