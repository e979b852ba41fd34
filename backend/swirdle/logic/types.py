"""
Result types returned by Swirdle engine operations.
"""

from datetime import datetime
from typing import NamedTuple, Self

from pydantic import BaseModel

from swirdle.logic.enums import InvalidOperationReason, LetterStatus
from swirdle.logic.state import SwirdleAttempt, UserSwirdleStats


class InvalidOperation(BaseModel, frozen=True):
    """Signal for a rejected guess or hint request. The state is left unchanged."""

    reason: InvalidOperationReason
    message: str


class StatsDelta(BaseModel, frozen=True):
    """Stats change produced when a game completes."""

    before: UserSwirdleStats
    after: UserSwirdleStats
    won: bool
    attempts: int


class GuessOutcome(NamedTuple):
    """
    Result of submitting a guess.

    On rejection ``attempt`` is the unchanged input, ``letters`` is empty and
    ``error`` explains why. ``stats_delta`` is only set when the guess
    completes the game.
    """

    attempt: SwirdleAttempt
    letters: tuple[LetterStatus, ...] = ()
    stats_delta: StatsDelta | None = None
    error: InvalidOperation | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None


class HintOutcome(NamedTuple):
    """Result of a hint unlock request."""

    attempt: SwirdleAttempt
    error: InvalidOperation | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None


class WordSummary(BaseModel, frozen=True):
    """Play statistics for one scheduled word."""

    word_id: str
    total_attempts: int
    total_wins: int
    win_rate: float  # percent
    average_winning_guesses: float


class LeaderboardEntry(BaseModel, frozen=True):
    """One row of the streak leaderboard."""

    user_id: str
    user_name: str
    current_streak: int
    max_streak: int
    games_played: int
    games_won: int
    win_rate: int  # percent
    average_attempts: float
    last_played: datetime | None = None

    @classmethod
    def from_stats(cls, stats: UserSwirdleStats, user_name: str) -> Self:
        return cls(
            user_id=stats.user_id,
            user_name=user_name,
            current_streak=stats.current_streak,
            max_streak=stats.max_streak,
            games_played=stats.games_played,
            games_won=stats.games_won,
            win_rate=stats.win_rate,
            average_attempts=stats.average_attempts,
            last_played=stats.last_played,
        )
