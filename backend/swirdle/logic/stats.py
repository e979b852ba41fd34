"""
Streak and average bookkeeping applied once per completed game.
"""

from datetime import datetime

from swirdle.logic.state import UserSwirdleStats


def empty_stats(user_id: str) -> UserSwirdleStats:
    return UserSwirdleStats(user_id=user_id)


def apply_game_result(
    stats: UserSwirdleStats,
    *,
    won: bool,
    attempts: int,
    now: datetime,
) -> UserSwirdleStats:
    """
    Return new stats with one finished game folded in.

    Args:
        stats: Stats before the game
        won: Whether the word was guessed
        attempts: Number of guesses the game took
        now: Completion time, stored as ``last_played``

    Returns:
        New UserSwirdleStats; a loss resets the current streak to zero

    """
    if attempts < 1:
        raise ValueError(f"A completed game needs at least one guess, got {attempts}")
    games_played = stats.games_played + 1
    current_streak = stats.current_streak + 1 if won else 0
    average = (stats.average_attempts * stats.games_played + attempts) / games_played
    return stats.model_copy(
        update={
            "games_played": games_played,
            "games_won": stats.games_won + 1 if won else stats.games_won,
            "current_streak": current_streak,
            "max_streak": max(stats.max_streak, current_streak),
            "average_attempts": round(average, 2),
            "last_played": now,
        },
    )
