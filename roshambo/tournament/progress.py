"""
Tournament progress reporting.

Progress is tracked as an integer count of completed games and reported at
fixed completion thresholds (every 10% by default), computed with integer
arithmetic so the cadence never drifts.
"""

import sys
from typing import List, Optional, Protocol

from tqdm import tqdm

from roshambo.utils.constants import PROGRESS_STEPS


class ProgressSink(Protocol):
    """Consumer of progress percentages."""

    def update(self, percent: int) -> None:
        ...

    def close(self) -> None:
        ...


class NullProgressSink:
    """Discards progress events."""

    def update(self, percent: int) -> None:
        pass

    def close(self) -> None:
        pass


class PrintProgressSink:
    """Prints progress on one line: 'Tournament Progress: 0% 10% 20% ...'."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stdout
        self._started = False

    def update(self, percent: int) -> None:
        if not self._started:
            self.stream.write("Tournament Progress:")
            self._started = True
        self.stream.write(f" {percent}%")
        self.stream.flush()

    def close(self) -> None:
        if self._started:
            self.stream.write("\n")
            self.stream.flush()
        self._started = False


class TqdmProgressSink:
    """Progress bar sink backed by tqdm. Opens a new bar for each tournament."""

    def __init__(self, desc: str = "Tournament"):
        self.desc = desc
        self._bar: Optional[tqdm] = None
        self._last = 0

    def update(self, percent: int) -> None:
        if self._bar is None:
            self._bar = tqdm(total=100, desc=self.desc, unit="%", file=sys.stderr)
            self._last = 0
        self._bar.update(percent - self._last)
        self._last = percent

    def close(self) -> None:
        if self._bar is not None:
            self._bar.close()
            self._bar = None


def progress_thresholds(total_games: int, steps: int = PROGRESS_STEPS) -> List[int]:
    """
    Games completed at which each reporting step is reached.

    Step k (1..steps) is reached after ceil(total_games * k / steps) games.
    """
    return [(total_games * k + steps - 1) // steps for k in range(1, steps + 1)]


class ProgressTracker:
    """
    Counts completed games and emits each crossed threshold exactly once.

    Usage:
        tracker = ProgressTracker(total_games=30, sink=PrintProgressSink())
        tracker.start()
        for game in games:
            ...
            tracker.advance()
        tracker.close()
    """

    def __init__(
        self,
        total_games: int,
        sink: Optional[ProgressSink] = None,
        steps: int = PROGRESS_STEPS
    ):
        if total_games < 1:
            raise ValueError("total_games must be positive")
        self.total_games = total_games
        self.sink = sink or NullProgressSink()
        self.steps = steps
        self.thresholds = progress_thresholds(total_games, steps)
        self.completed = 0
        self.reported: List[int] = []
        self._next_step = 0

    @property
    def percent_done(self) -> int:
        return self.reported[-1] if self.reported else 0

    def start(self):
        """Report the 0% mark."""
        self._emit(0)

    def advance(self, games: int = 1):
        """Record completed games and report any thresholds crossed."""
        self.completed += games
        while self._next_step < self.steps and self.completed >= self.thresholds[self._next_step]:
            self._next_step += 1
            self._emit(self._next_step * 100 // self.steps)

    def close(self):
        self.sink.close()

    def _emit(self, percent: int):
        self.reported.append(percent)
        self.sink.update(percent)
