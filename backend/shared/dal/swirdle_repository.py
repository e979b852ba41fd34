"""Abstract interfaces for Swirdle word, attempt, and stats persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date

    from swirdle.logic.state import SwirdleAttempt, SwirdleWord, UserSwirdleStats


class SwirdleWordRepository(ABC):
    """Scheduled words. At most one word per calendar date."""

    @abstractmethod
    async def save_word(self, word: SwirdleWord) -> None: ...

    @abstractmethod
    async def get_word(self, word_id: str) -> SwirdleWord | None: ...

    @abstractmethod
    async def get_published_word_for_date(self, day: date) -> SwirdleWord | None: ...

    @abstractmethod
    async def list_words(self, *, published: bool | None = None) -> list[SwirdleWord]: ...

    @abstractmethod
    async def set_published(self, word_id: str, *, published: bool) -> bool: ...


class SwirdleAttemptRepository(ABC):
    """Attempts, upserted on (user_id, word_id). Never deleted."""

    @abstractmethod
    async def upsert_attempt(self, attempt: SwirdleAttempt) -> None: ...

    @abstractmethod
    async def get_attempt(self, user_id: str, word_id: str) -> SwirdleAttempt | None: ...

    @abstractmethod
    async def list_attempts_for_word(self, word_id: str) -> list[SwirdleAttempt]: ...


class SwirdleStatsRepository(ABC):
    """Per-member aggregate stats, upserted on user_id."""

    @abstractmethod
    async def upsert_stats(self, stats: UserSwirdleStats) -> None: ...

    @abstractmethod
    async def get_stats(self, user_id: str) -> UserSwirdleStats | None: ...

    @abstractmethod
    async def top_streaks(self, limit: int = 10) -> list[UserSwirdleStats]:
        """Return up to ``limit`` members ordered by current streak, longest first."""
