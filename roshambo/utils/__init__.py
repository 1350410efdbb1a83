"""
Utilities module for rock-paper-scissors tournaments.
"""
from roshambo.utils.constants import (
    ROCK, PAPER, SCISSORS, MOVE_NAMES, NUM_MOVES,
    VERDICT_WIN, VERDICT_DRAW, VERDICT_LOSS,
    WIN_VALUE, DRAW_VALUE, LOSS_VALUE,
    A_WINS, B_WINS, DRAW,
    PROGRESS_STEPS, COLUMN_SPACING
)

__all__ = [
    'ROCK', 'PAPER', 'SCISSORS', 'MOVE_NAMES', 'NUM_MOVES',
    'VERDICT_WIN', 'VERDICT_DRAW', 'VERDICT_LOSS',
    'WIN_VALUE', 'DRAW_VALUE', 'LOSS_VALUE',
    'A_WINS', 'B_WINS', 'DRAW',
    'PROGRESS_STEPS', 'COLUMN_SPACING'
]
