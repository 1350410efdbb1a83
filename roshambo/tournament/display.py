"""
Display formatting for tournament results.

Provides column-aligned ranking tables and win matrices for terminal output.
"""

from typing import Dict, List

from roshambo.tournament.results import TournamentResult
from roshambo.utils.constants import COLUMN_SPACING


def format_rankings(stats: List[Dict[str, str]], spacing: int = COLUMN_SPACING) -> str:
    """
    Format ranked statistic maps as a left-aligned table.

    The columns are the keys of the first map. Each column is as wide as its
    longest value (or header) plus `spacing`; the separator bar spans the
    table without the trailing spacing.

    Args:
        stats: One statistic map per entrant, in rank order
        spacing: Spaces between columns

    Returns:
        Formatted string for terminal display
    """
    if not stats:
        return ""

    columns = list(stats[0].keys())
    widths = []
    for column in columns:
        longest = max([len(column)] + [len(row[column]) for row in stats])
        widths.append(longest + spacing)

    total_width = sum(widths) - spacing

    lines = []
    lines.append("".join(f"{c:<{w}}" for c, w in zip(columns, widths)).rstrip())
    lines.append("=" * total_width)
    for row in stats:
        lines.append("".join(f"{row[c]:<{w}}" for c, w in zip(columns, widths)).rstrip())

    return "\n".join(lines)


def format_leaderboard(result: TournamentResult) -> str:
    """Format the final standings of a tournament result."""
    rankings = result.get_rankings()
    return format_rankings([s.stats for s in rankings])


def format_win_matrix(result: TournamentResult) -> str:
    """
    Format the win matrix as an ASCII table.

    Shows game wins-losses for row entrant vs column entrant.

    Args:
        result: Complete tournament result

    Returns:
        Formatted string for terminal display
    """
    matrix = result.get_win_matrix()
    participants = [s.name for s in result.get_rankings()]

    # Truncate long names for display
    def short_name(name: str, max_len: int = 14) -> str:
        if len(name) <= max_len:
            return name
        return name[:max_len-2] + ".."

    short_names = [short_name(p) for p in participants]

    lines = []
    lines.append("")
    lines.append("Win Matrix (row W-L vs column):")
    lines.append("")

    col_width = max(len(sn) for sn in short_names) + 2
    col_width = max(col_width, 10)

    header = " " * (col_width + 2)
    for sn in short_names:
        header += f"{sn:>{col_width}}"
    lines.append(header)

    for i, (p, sn) in enumerate(zip(participants, short_names)):
        row = f"{sn:<{col_width}}  "
        for j, op in enumerate(participants):
            if i == j:
                cell = "-"
            else:
                record = matrix[p].get(op, {'wins': 0, 'losses': 0})
                cell = f"{record['wins']}-{record['losses']}"
            row += f"{cell:>{col_width}}"
        lines.append(row)

    return "\n".join(lines)


def format_tournament_header(
    rounds: int,
    games: int,
    num_competitors: int,
    training: bool = False
) -> str:
    """Format tournament header information."""
    lines = []
    lines.append("Playing tournament with:")
    lines.append(f"\t{rounds} round long games")
    lines.append(f"\t{games} game long matches")
    lines.append(f"\t{num_competitors} competitors")
    if training:
        lines.append("\ttraining mode enabled")
    lines.append("")
    return "\n".join(lines)


def format_game_result(game) -> str:
    """Format a single game result line."""
    if game.forfeited:
        return (f"{game.participant_a} vs {game.participant_b}: "
                f"forfeited by {', '.join(game.disqualified)}")
    return (f"{game.participant_a} vs {game.participant_b}: "
            f"{game.a_round_wins}-{game.b_round_wins} "
            f"({game.winner or 'draw'})")
