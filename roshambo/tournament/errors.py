"""
Error types raised by the tournament engine.

Configuration errors are fatal and raised before any play. Strategy errors
are local to one game: the engine catches them at the game boundary and turns
them into a disqualification. Rating update errors are fatal.
"""

from typing import Optional


class TournamentError(Exception):
    """Base class for all tournament errors."""


class ConfigurationError(TournamentError, ValueError):
    """Invalid tournament setup (bad parameters, roster problems)."""


class InsufficientEntrantsError(ConfigurationError):
    """Fewer than two entrants are registered."""

    def __init__(self, count: int):
        self.count = count
        super().__init__(
            f"At least 2 players must be added to run a tournament (got {count})"
        )


class DuplicateEntrantError(ConfigurationError):
    """A strategy identity is registered twice."""

    def __init__(self, identity: str):
        self.identity = identity
        super().__init__(f"Entrant already registered: {identity}")


class StrategyError(TournamentError):
    """A strategy misbehaved during a game."""

    phase = "play"

    def __init__(self, identity: str, cause: Optional[BaseException] = None, detail: str = ""):
        self.identity = identity
        self.cause = cause
        message = detail or (repr(cause) if cause is not None else "unknown failure")
        super().__init__(f"{identity} failed during {self.phase}: {message}")


class StrategyInstantiationError(StrategyError):
    """A strategy could not be constructed."""

    phase = "initialization"


class StrategyMoveError(StrategyError):
    """A strategy raised or returned an invalid move."""

    phase = "move"


class StrategyTrainingError(StrategyError):
    """A strategy's training hook raised."""

    phase = "training"


class RatingUpdateError(TournamentError):
    """The rating collaborator failed; ratings can no longer be trusted."""
