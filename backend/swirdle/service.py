"""
Swirdle game service: wires the pure engine to persistent storage.

Each call loads the day's word, the member's attempt and stats, applies one
engine operation, and upserts whatever changed. Attempts are written after
every accepted guess or hint; stats only when a game completes. Rejected
operations write nothing.
"""

from __future__ import annotations

import asyncio
from collections import Counter
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, NamedTuple

import structlog

from swirdle.exceptions import WordNotFoundError
from swirdle.logic import engine
from swirdle.logic.analytics import summarize_word
from swirdle.logic.stats import empty_stats
from swirdle.logic.types import LeaderboardEntry

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from datetime import date, datetime

    from shared.dal.profile_repository import ProfileRepository
    from shared.dal.swirdle_repository import (
        SwirdleAttemptRepository,
        SwirdleStatsRepository,
        SwirdleWordRepository,
    )
    from swirdle.logic.state import SwirdleAttempt, SwirdleWord, UserSwirdleStats
    from swirdle.logic.types import GuessOutcome, HintOutcome, WordSummary

logger = structlog.get_logger()

UNKNOWN_PLAYER = "Unknown"


class SwirdleGame(NamedTuple):
    """Everything a member needs to render today's board."""

    word: SwirdleWord
    attempt: SwirdleAttempt
    stats: UserSwirdleStats


class SwirdleService:
    """Coordinate loading, engine updates, and persistence for Swirdle."""

    def __init__(
        self,
        words: SwirdleWordRepository,
        attempts: SwirdleAttemptRepository,
        stats: SwirdleStatsRepository,
        profiles: ProfileRepository | None = None,
    ) -> None:
        self._words = words
        self._attempts = attempts
        self._stats = stats
        self._profiles = profiles
        # one member's guesses must be applied and persisted in order
        self._user_locks: dict[str, asyncio.Lock] = {}
        self._lock_users: Counter[str] = Counter()

    @asynccontextmanager
    async def _user_lock(self, user_id: str) -> AsyncIterator[None]:
        """Hold the member's lock, dropping it once no call is using or waiting on it."""
        lock = self._user_locks.setdefault(user_id, asyncio.Lock())
        self._lock_users[user_id] += 1
        try:
            async with lock:
                yield
        finally:
            self._lock_users[user_id] -= 1
            if self._lock_users[user_id] == 0:
                del self._lock_users[user_id]
                self._user_locks.pop(user_id, None)

    async def load_today(self, user_id: str, today: date) -> SwirdleGame | None:
        """Return today's game for the member, or None when nothing is published."""
        word = await self._words.get_published_word_for_date(today)
        if word is None:
            return None
        attempt = await self._attempts.get_attempt(user_id, word.id) or engine.new_attempt(user_id, word)
        stats = await self._stats.get_stats(user_id) or empty_stats(user_id)
        return SwirdleGame(word=word, attempt=attempt, stats=stats)

    async def _require_game(self, user_id: str, today: date) -> SwirdleGame:
        game = await self.load_today(user_id, today)
        if game is None:
            raise WordNotFoundError(today.isoformat())
        return game

    async def submit_guess(
        self,
        user_id: str,
        today: date,
        guess: str,
        *,
        now: datetime | None = None,
    ) -> GuessOutcome:
        """Apply a guess to today's game and persist the result."""
        async with self._user_lock(user_id):
            game = await self._require_game(user_id, today)
            outcome = engine.submit_guess(game.attempt, game.word, guess, stats=game.stats, now=now)
            if not outcome.accepted:
                return outcome

            await self._attempts.upsert_attempt(outcome.attempt)
            if outcome.stats_delta is not None:
                await self._stats.upsert_stats(outcome.stats_delta.after)
                logger.info(
                    "swirdle game completed",
                    user_id=user_id,
                    word_id=game.word.id,
                    won=outcome.stats_delta.won,
                    attempts=outcome.stats_delta.attempts,
                    current_streak=outcome.stats_delta.after.current_streak,
                )
            return outcome

    async def use_hint(self, user_id: str, today: date, hint_index: int) -> HintOutcome:
        """Unlock a hint on today's game and persist the attempt."""
        async with self._user_lock(user_id):
            game = await self._require_game(user_id, today)
            outcome = engine.unlock_hint(game.attempt, game.word, hint_index)
            if outcome.accepted:
                await self._attempts.upsert_attempt(outcome.attempt)
                logger.info("swirdle hint used", user_id=user_id, word_id=game.word.id, hint_index=hint_index)
            return outcome

    async def get_stats(self, user_id: str) -> UserSwirdleStats:
        return await self._stats.get_stats(user_id) or empty_stats(user_id)

    async def set_published(self, word_id: str, *, published: bool) -> bool:
        changed = await self._words.set_published(word_id, published=published)
        if changed:
            logger.info("swirdle word publication changed", word_id=word_id, published=published)
        return changed

    async def word_summaries(self, *, published: bool | None = None) -> list[tuple[SwirdleWord, WordSummary]]:
        """Return every scheduled word with its play statistics, newest first."""
        result = []
        for word in await self._words.list_words(published=published):
            attempts = await self._attempts.list_attempts_for_word(word.id)
            result.append((word, summarize_word(word, attempts)))
        return result

    async def leaderboard(self, limit: int = 10) -> list[LeaderboardEntry]:
        """Return the members with the longest current streaks, named from their profiles."""
        entries = []
        for stats in await self._stats.top_streaks(limit):
            profile = await self._profiles.get_profile(stats.user_id) if self._profiles is not None else None
            user_name = profile.full_name if profile is not None and profile.full_name else UNKNOWN_PLAYER
            entries.append(LeaderboardEntry.from_stats(stats, user_name))
        return entries
