"""
Tournament module for running round-robin competitions between strategies.

Provides:
- TournamentRunner: Orchestrates tournament execution
- PlayerData / Record: Per-entrant bookkeeping
- EloCalculator: Standard Elo rating calculation
"""

from roshambo.tournament.elo import EloCalculator, Rating
from roshambo.tournament.errors import (
    TournamentError,
    ConfigurationError,
    InsufficientEntrantsError,
    DuplicateEntrantError,
    StrategyError,
    StrategyInstantiationError,
    StrategyMoveError,
    StrategyTrainingError,
    RatingUpdateError,
)
from roshambo.tournament.record import Record
from roshambo.tournament.player_data import PlayerData
from roshambo.tournament.scheduler import generate_round_robin_schedule, Matchup
from roshambo.tournament.progress import (
    ProgressTracker,
    PrintProgressSink,
    TqdmProgressSink,
    NullProgressSink,
)
from roshambo.tournament.results import GameResult, MatchupResult, Standing, TournamentResult
from roshambo.tournament.runner import TournamentRunner, TournamentConfig
from roshambo.tournament.display import format_rankings, format_leaderboard, format_win_matrix

__all__ = [
    'EloCalculator',
    'Rating',
    'TournamentError',
    'ConfigurationError',
    'InsufficientEntrantsError',
    'DuplicateEntrantError',
    'StrategyError',
    'StrategyInstantiationError',
    'StrategyMoveError',
    'StrategyTrainingError',
    'RatingUpdateError',
    'Record',
    'PlayerData',
    'generate_round_robin_schedule',
    'Matchup',
    'ProgressTracker',
    'PrintProgressSink',
    'TqdmProgressSink',
    'NullProgressSink',
    'GameResult',
    'MatchupResult',
    'Standing',
    'TournamentResult',
    'TournamentRunner',
    'TournamentConfig',
    'format_rankings',
    'format_leaderboard',
    'format_win_matrix',
]
