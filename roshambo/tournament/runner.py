"""
Tournament runner that orchestrates round-robin competitions.

Every entrant plays a match against every other entrant. A match is a fixed
number of games, and each game is a fixed number of rounds. Entrants are
ranked by games won, then rounds won, then name.

Handles game execution, disqualification, training state, Elo updates, and
progress reporting.
"""

import copy
import logging
import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from roshambo.game.move import Move
from roshambo.strategies import STRATEGY_TYPES
from roshambo.strategies.strategy import Strategy
from roshambo.tournament.elo import EloCalculator
from roshambo.tournament.errors import (
    ConfigurationError,
    DuplicateEntrantError,
    InsufficientEntrantsError,
    RatingUpdateError,
    StrategyError,
    StrategyInstantiationError,
    StrategyMoveError,
    StrategyTrainingError,
)
from roshambo.tournament.player_data import PlayerData
from roshambo.tournament.progress import ProgressSink, ProgressTracker
from roshambo.tournament.results import GameResult, MatchupResult, Standing, TournamentResult
from roshambo.tournament.scheduler import generate_round_robin_schedule, total_games
from roshambo.tournament.display import (
    format_tournament_header,
    format_game_result,
    format_leaderboard,
    format_win_matrix,
)
from roshambo.utils.constants import (
    A_WINS, B_WINS, DRAW,
    WIN_VALUE, LOSS_VALUE, DRAW_VALUE,
    VERDICT_WIN, VERDICT_DRAW,
    DEFAULT_ROUNDS, DEFAULT_GAMES, DEFAULT_K_FACTOR, DEFAULT_INITIAL_RATING,
)

logger = logging.getLogger(__name__)


@dataclass
class TournamentConfig:
    """Configuration for a tournament run."""
    rounds: int = DEFAULT_ROUNDS
    games: int = DEFAULT_GAMES
    training: bool = False
    k_factor: float = DEFAULT_K_FACTOR
    initial_rating: float = DEFAULT_INITIAL_RATING
    verbose: bool = False

    def validate(self):
        """Raise ConfigurationError if any setting is out of range."""
        _check_positive("rounds", self.rounds)
        _check_positive("games", self.games)
        if self.k_factor < 0:
            raise ConfigurationError(f"k_factor must be non-negative, got {self.k_factor}")


def _check_positive(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")


class TournamentRunner:
    """
    Orchestrates a round-robin tournament between registered strategies.

    Ratings and training state live as long as the runner, so running several
    tournaments on one runner carries them over; records are reset at the
    start of each run.

    Usage:
        runner = TournamentRunner(TournamentConfig(rounds=100, games=10))
        runner.register('random_bot')
        runner.register('frequency')
        result = runner.run_tournament()
    """

    def __init__(
        self,
        config: Optional[TournamentConfig] = None,
        elo: Optional[EloCalculator] = None,
        progress_sink: Optional[ProgressSink] = None
    ):
        """
        Initialize the tournament runner.

        Args:
            config: Tournament configuration (defaults to TournamentConfig())
            elo: Rating collaborator (defaults to an EloCalculator built from config)
            progress_sink: Receives completion percentages during a run
        """
        self.config = config or TournamentConfig()
        self.config.validate()
        self.elo = elo or EloCalculator(
            k_factor=self.config.k_factor,
            initial_rating=self.config.initial_rating
        )
        self.progress_sink = progress_sink
        self._players: List[PlayerData] = []
        self._training_data: Dict[str, Any] = {}

    @property
    def players(self) -> List[PlayerData]:
        """Entrants in registration order, or ranking order after a run."""
        return list(self._players)

    @property
    def training_data(self) -> Mapping[str, Any]:
        """Read-only view of the stored training state per identity."""
        return MappingProxyType(self._training_data)

    def get_player(self, identity: str) -> PlayerData:
        for player in self._players:
            if player.identity == identity:
                return player
        raise KeyError(identity)

    def is_registered(self, identity: str) -> bool:
        return any(p.identity == identity for p in self._players)

    def register(
        self,
        identity: str,
        factory: Optional[Callable[[], Strategy]] = None,
        replace: bool = False
    ) -> PlayerData:
        """
        Add an entrant to the tournament.

        Args:
            identity: Strategy identity, also used as the display name
            factory: Builds a fresh strategy per game (defaults to the
                STRATEGY_TYPES entry for identity)
            replace: Re-register an existing identity, resetting its records,
                rating and training state

        Returns:
            The new PlayerData

        Raises:
            DuplicateEntrantError: If identity is registered and replace is False
            ConfigurationError: If no factory is given for an unknown identity
        """
        if factory is None:
            if identity not in STRATEGY_TYPES:
                raise ConfigurationError(
                    f"Unknown strategy: {identity}. "
                    f"Available: {list(STRATEGY_TYPES.keys())}"
                )
            factory = STRATEGY_TYPES[identity]

        player = PlayerData(identity, factory, rating=self.elo.new_rating())

        if self.is_registered(identity):
            if not replace:
                raise DuplicateEntrantError(identity)
            index = self._players.index(self.get_player(identity))
            self._players[index] = player
            logger.info(f"Re-registered {identity}; training data cleared")
        else:
            self._players.append(player)

        self._training_data[identity] = None
        return player

    def unregister(self, identity: str):
        """Remove an entrant and its training state."""
        self._players.remove(self.get_player(identity))
        self._training_data.pop(identity, None)

    def reset_player_data(self):
        """Reset the win/loss/draw records of all entrants (ratings are kept)."""
        for player in self._players:
            player.reset_records()

    def rankings(self) -> List[PlayerData]:
        """Entrants sorted by games won, rounds won, then name."""
        return sorted(self._players, key=PlayerData.sort_key)

    def run_tournament(
        self,
        rounds: Optional[int] = None,
        games: Optional[int] = None,
        training: Optional[bool] = None
    ) -> TournamentResult:
        """
        Run a complete round-robin tournament.

        Args:
            rounds: Rounds per game (defaults to config)
            games: Games per match between two entrants (defaults to config)
            training: Whether entrants may save and load state between games
                (defaults to config)

        Returns:
            TournamentResult with the final rankings

        Raises:
            InsufficientEntrantsError: If fewer than 2 entrants are registered
            ConfigurationError: If rounds or games is not a positive integer
        """
        rounds = self.config.rounds if rounds is None else rounds
        games = self.config.games if games is None else games
        training = self.config.training if training is None else training

        if len(self._players) < 2:
            raise InsufficientEntrantsError(len(self._players))
        _check_positive("rounds", rounds)
        _check_positive("games", games)

        self.reset_player_data()

        identities = [p.identity for p in self._players]
        matchups = generate_round_robin_schedule(identities, games)
        total_games_count = total_games(identities, games)

        logger.info(
            f"Starting tournament: {len(identities)} entrants, {games} games per match, "
            f"{rounds} rounds per game, training={'on' if training else 'off'}"
        )
        if self.config.verbose:
            print(format_tournament_header(rounds, games, len(identities), training))

        tracker = ProgressTracker(total_games_count, self.progress_sink)
        tracker.start()

        matchup_results = []
        start_time = time.time()

        for matchup in matchups:
            player_a = self.get_player(matchup.participant_a)
            player_b = self.get_player(matchup.participant_b)
            result = MatchupResult(
                participant_a=matchup.participant_a,
                participant_b=matchup.participant_b,
                games_scheduled=matchup.games
            )

            for _ in range(matchup.games):
                game = self.play_game(player_a, player_b, rounds, training)
                result.add_game(game)
                tracker.advance()

            matchup_results.append(result)

        tracker.close()
        elapsed = time.time() - start_time

        self._players = self.rankings()
        standings = self._compile_standings()

        logger.info(f"Tournament completed in {elapsed:.1f}s ({total_games_count} games)")

        tournament = TournamentResult(
            rounds=rounds,
            games=games,
            training=training,
            standings=standings,
            matchups=matchup_results,
            time_seconds=elapsed
        )

        if self.config.verbose:
            print()
            print(format_leaderboard(tournament))
            print(format_win_matrix(tournament))

        return tournament

    def play_game(
        self,
        player_a: PlayerData,
        player_b: PlayerData,
        rounds: int,
        training: bool = False
    ) -> GameResult:
        """
        Play a single game of `rounds` rounds between two entrants.

        Both entrants' records, ratings and nemeses are updated from the
        result. A strategy that fails to build, raises, or returns something
        other than a Move forfeits the game.

        Args:
            player_a: The first entrant
            player_b: The second entrant
            rounds: The number of rounds the game should last
            training: Whether strategies may load and save training state

        Returns:
            GameResult describing how the game went
        """
        game = GameResult(
            participant_a=player_a.identity,
            participant_b=player_b.identity,
            rounds_scheduled=rounds
        )

        strategy_a, error_a = self._instantiate(player_a)
        strategy_b, error_b = self._instantiate(player_b)
        if self._handle_disqualifications(game, player_a, player_b, error_a, error_b):
            return game

        if training:
            error_a = self._training_init(player_a, strategy_a)
            error_b = self._training_init(player_b, strategy_b)
            if self._handle_disqualifications(game, player_a, player_b, error_a, error_b):
                return game

        moves_a: List[Move] = []
        moves_b: List[Move] = []

        for _ in range(rounds):
            move_a, error_a = self._get_move(player_a, strategy_a, moves_b)
            move_b, error_b = self._get_move(player_b, strategy_b, moves_a)
            if self._handle_disqualifications(game, player_a, player_b, error_a, error_b):
                return game

            moves_a.append(move_a)
            moves_b.append(move_b)
            game.rounds_played += 1

            verdict = move_a.versus(move_b)
            if verdict == VERDICT_DRAW:
                player_a.rounds_record.add_draw()
                player_b.rounds_record.add_draw()
            elif verdict == VERDICT_WIN:
                game.a_round_wins += 1
                player_a.rounds_record.add_win()
                player_b.rounds_record.add_loss()
            else:
                game.b_round_wins += 1
                player_a.rounds_record.add_loss()
                player_b.rounds_record.add_win()

        if training:
            self._training_end(player_a, strategy_a)
            self._training_end(player_b, strategy_b)

        if game.a_round_wins > game.b_round_wins:
            game.outcome = A_WINS
            player_a.games_record.add_win()
            player_b.games_record.add_loss()
            self._update_ratings(player_a, player_b, WIN_VALUE, LOSS_VALUE)
        elif game.a_round_wins < game.b_round_wins:
            game.outcome = B_WINS
            player_a.games_record.add_loss()
            player_b.games_record.add_win()
            self._update_ratings(player_a, player_b, LOSS_VALUE, WIN_VALUE)
        else:
            game.outcome = DRAW
            player_a.games_record.add_draw()
            player_b.games_record.add_draw()
            self._update_ratings(player_a, player_b, DRAW_VALUE, DRAW_VALUE)

        player_a.update_nemesis(player_b.name, game.b_round_wins, rounds)
        player_b.update_nemesis(player_a.name, game.a_round_wins, rounds)

        logger.debug(format_game_result(game))
        return game

    def _instantiate(self, player: PlayerData) -> Tuple[Optional[Strategy], Optional[StrategyError]]:
        """Build a fresh strategy, or return the error that prevented it."""
        try:
            return player.new_instance(), None
        except Exception as e:
            return None, StrategyInstantiationError(player.identity, e)

    def _training_init(self, player: PlayerData, strategy: Strategy) -> Optional[StrategyError]:
        """Hand a strategy its stored training state and store what it returns."""
        try:
            prior = copy.deepcopy(self._training_data.get(player.identity))
            self._training_data[player.identity] = strategy.training_init(prior)
        except Exception as e:
            return StrategyTrainingError(player.identity, e)
        return None

    def _training_end(self, player: PlayerData, strategy: Strategy):
        """Store a strategy's end-of-game training state; failures keep the old state."""
        snapshot = player.rounds_record.copy()
        try:
            self._training_data[player.identity] = strategy.training_end(snapshot)
        except Exception:
            logger.error(
                f"{player.name} threw exception while saving training data; "
                f"previous training data kept",
                exc_info=True
            )

    def _get_move(
        self,
        player: PlayerData,
        strategy: Strategy,
        opponent_moves: List[Move]
    ) -> Tuple[Optional[Move], Optional[StrategyError]]:
        """Ask a strategy for its next move, or return why it has none."""
        try:
            move = strategy.make_move(tuple(opponent_moves))
        except Exception as e:
            return None, StrategyMoveError(player.identity, e)
        if not isinstance(move, Move):
            return None, StrategyMoveError(
                player.identity, detail=f"returned invalid move {move!r}"
            )
        return move, None

    def _handle_disqualifications(
        self,
        game: GameResult,
        player_a: PlayerData,
        player_b: PlayerData,
        error_a: Optional[StrategyError],
        error_b: Optional[StrategyError]
    ) -> bool:
        """
        Forfeit the game if either side failed.

        A lone failing side takes a game loss and its opponent a game win.
        When both sides fail at the same step both are credited a game win.

        Returns:
            True if the game was forfeited
        """
        if error_a is None and error_b is None:
            return False

        for player, error in ((player_a, error_a), (player_b, error_b)):
            if error is not None:
                logger.warning(
                    f"{player.name} threw exception during {error.phase}, game forfeited: {error}",
                    exc_info=error.cause
                )

        if error_a is not None and error_b is not None:
            player_a.games_record.add_win()
            player_b.games_record.add_win()
            self._update_ratings(player_a, player_b, WIN_VALUE, WIN_VALUE)
            game.disqualified = (player_a.identity, player_b.identity)
            game.outcome = DRAW
        elif error_a is not None:
            player_a.games_record.add_loss()
            player_b.games_record.add_win()
            self._update_ratings(player_a, player_b, LOSS_VALUE, WIN_VALUE)
            game.disqualified = (player_a.identity,)
            game.outcome = B_WINS
        else:
            player_a.games_record.add_win()
            player_b.games_record.add_loss()
            self._update_ratings(player_a, player_b, WIN_VALUE, LOSS_VALUE)
            game.disqualified = (player_b.identity,)
            game.outcome = A_WINS

        return True

    def _update_ratings(self, player_a: PlayerData, player_b: PlayerData, outcome_a: float, outcome_b: float):
        try:
            self.elo.update_ratings(player_a.rating, player_b.rating, outcome_a, outcome_b)
        except Exception as e:
            raise RatingUpdateError(
                f"Rating update failed for {player_a.name} vs {player_b.name}"
            ) from e

    def _compile_standings(self) -> List[Standing]:
        """Build ranking rows from the (already sorted) roster."""
        standings = []
        for rank, player in enumerate(self._players, 1):
            standings.append(Standing(
                rank=rank,
                name=player.name,
                games_record=player.games_record.copy(),
                rounds_record=player.rounds_record.copy(),
                rating=player.rating.value,
                nemesis=player.nemesis,
                nemesis_rounds_lost=player.nemesis_rounds_lost,
                nemesis_rounds=player.nemesis_rounds,
                stats=player.get_stats()
            ))
        return standings
