"""
Constants for rock-paper-scissors tournaments.
"""

# Moves, in cyclic order: each value is beaten by the next one
ROCK = 0
PAPER = 1
SCISSORS = 2
MOVE_NAMES = ["ROCK", "PAPER", "SCISSORS"]
NUM_MOVES = len(MOVE_NAMES)

# Round verdicts (from the first move's perspective)
VERDICT_WIN = 1
VERDICT_DRAW = 0
VERDICT_LOSS = -1

# Game outcome values fed to the rating collaborator
WIN_VALUE = 1.0
DRAW_VALUE = 0.5
LOSS_VALUE = 0.0

# Game outcomes
A_WINS = "a_win"
B_WINS = "b_win"
DRAW = "draw"

# Tournament defaults
DEFAULT_ROUNDS = 100
DEFAULT_GAMES = 10
DEFAULT_K_FACTOR = 32
DEFAULT_INITIAL_RATING = 1000

# Progress is reported every 1/PROGRESS_STEPS of the total games
PROGRESS_STEPS = 10

# Number of spaces between ranking table columns
COLUMN_SPACING = 3
