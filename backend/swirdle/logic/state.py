"""
Game state models for Swirdle.

All models are frozen; engine operations return updated copies built with
``model_copy`` and never mutate their inputs.
"""

from __future__ import annotations

from datetime import date, datetime  # noqa: TC003
from typing import Self

from pydantic import BaseModel, Field, computed_field, field_serializer, field_validator, model_validator

from swirdle.logic.enums import Difficulty, WordCategory

MAX_GUESSES = 6


class SwirdleWord(BaseModel, frozen=True):
    """The puzzle scheduled for one calendar date. Read-only for the engine."""

    id: str
    word: str = Field(min_length=1)
    definition: str = ""
    difficulty: Difficulty = Difficulty.INTERMEDIATE
    category: WordCategory = WordCategory.GENERAL
    date_scheduled: date
    hints: tuple[str, ...] = ()
    is_published: bool = False

    @field_validator("word")
    @classmethod
    def _uppercase_word(cls, v: str) -> str:
        word = v.strip().upper()
        if not word:
            raise ValueError("word must not be blank")
        return word

    @property
    def length(self) -> int:
        return len(self.word)


class SwirdleAttempt(BaseModel, frozen=True):
    """One member's record of guesses and hints against one word.

    Keyed on (user_id, word_id); persisted by upsert after every change.
    """

    user_id: str
    word_id: str
    guesses: tuple[str, ...] = Field(default=(), max_length=MAX_GUESSES)
    completed: bool = False
    won: bool = False
    hints_used: frozenset[int] = frozenset()
    completed_at: datetime | None = None

    @field_validator("guesses", mode="before")
    @classmethod
    def _drop_empty_guesses(cls, v: object) -> object:
        # stored rows may carry blank placeholders for unplayed rows
        if isinstance(v, list | tuple):
            return tuple(g for g in v if g)
        return v

    @model_validator(mode="after")
    def _validate_completion(self) -> Self:
        if self.won and not self.completed:
            raise ValueError("A won attempt must be completed")
        if self.completed and not self.guesses:
            raise ValueError("A completed attempt must have at least one guess")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def attempts_count(self) -> int:
        return len(self.guesses)

    @field_serializer("hints_used")
    def _serialize_hints_used(self, v: frozenset[int]) -> list[int]:
        return sorted(v)


class UserSwirdleStats(BaseModel, frozen=True):
    """Aggregate results for one member, updated once per completed game."""

    user_id: str
    current_streak: int = Field(default=0, ge=0)
    max_streak: int = Field(default=0, ge=0)
    games_played: int = Field(default=0, ge=0)
    games_won: int = Field(default=0, ge=0)
    average_attempts: float = Field(default=0.0, ge=0)
    last_played: datetime | None = None

    @model_validator(mode="after")
    def _validate_counters(self) -> Self:
        if self.games_won > self.games_played:
            raise ValueError("games_won cannot exceed games_played")
        if self.max_streak < self.current_streak:
            raise ValueError("max_streak cannot be below current_streak")
        return self

    @property
    def win_rate(self) -> int:
        """Whole-number win percentage, 0 before the first game."""
        if self.games_played == 0:
            return 0
        return round(self.games_won / self.games_played * 100)
