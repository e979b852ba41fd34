"""SQLite-backed Swirdle repositories."""

from __future__ import annotations

import asyncio
import json
import sqlite3
from typing import TYPE_CHECKING

import structlog

from shared.dal.swirdle_repository import SwirdleAttemptRepository, SwirdleStatsRepository, SwirdleWordRepository
from swirdle.logic.state import SwirdleAttempt, SwirdleWord, UserSwirdleStats

if TYPE_CHECKING:
    from datetime import date

    from shared.db.connection import Database

logger = structlog.get_logger()


class SqliteSwirdleWordRepository(SwirdleWordRepository):
    """SQLite implementation of SwirdleWordRepository.

    The schedule date is a unique indexed column, so two words can never
    share a day.
    """

    def __init__(self, db: Database) -> None:
        self._db = db
        self._lock = asyncio.Lock()

    async def save_word(self, word: SwirdleWord) -> None:
        """Insert or replace a word by id. Raises ValueError if another word holds the date."""
        async with self._lock:
            self._write_word(word)

    def _write_word(self, word: SwirdleWord) -> None:
        try:
            self._db.connection.execute(
                "INSERT INTO swirdle_words (id, date_scheduled, is_published, data) VALUES (?, ?, ?, ?) "
                "ON CONFLICT(id) DO UPDATE SET "
                "date_scheduled = excluded.date_scheduled, "
                "is_published = excluded.is_published, "
                "data = excluded.data",
                (word.id, word.date_scheduled.isoformat(), int(word.is_published), word.model_dump_json()),
            )
            self._db.connection.commit()
        except sqlite3.IntegrityError as exc:
            self._db.connection.rollback()
            raise ValueError(f"A word is already scheduled for {word.date_scheduled.isoformat()}") from exc

    async def get_word(self, word_id: str) -> SwirdleWord | None:
        row = self._db.connection.execute("SELECT data FROM swirdle_words WHERE id = ?", (word_id,)).fetchone()
        if row is None:
            return None
        return SwirdleWord.model_validate(json.loads(row[0]))

    async def get_published_word_for_date(self, day: date) -> SwirdleWord | None:
        row = self._db.connection.execute(
            "SELECT data FROM swirdle_words WHERE date_scheduled = ? AND is_published = 1",
            (day.isoformat(),),
        ).fetchone()
        if row is None:
            return None
        return SwirdleWord.model_validate(json.loads(row[0]))

    async def list_words(self, *, published: bool | None = None) -> list[SwirdleWord]:
        """List words by schedule date, newest first, optionally filtered by publication."""
        if published is None:
            rows = self._db.connection.execute(
                "SELECT data FROM swirdle_words ORDER BY date_scheduled DESC",
            ).fetchall()
        else:
            rows = self._db.connection.execute(
                "SELECT data FROM swirdle_words WHERE is_published = ? ORDER BY date_scheduled DESC",
                (int(published),),
            ).fetchall()
        return [SwirdleWord.model_validate(json.loads(row[0])) for row in rows]

    async def set_published(self, word_id: str, *, published: bool) -> bool:
        """Toggle publication. Returns False when the word does not exist."""
        async with self._lock:
            word = await self.get_word(word_id)
            if word is None:
                logger.warning("set_published on unknown word", word_id=word_id)
                return False
            self._write_word(word.model_copy(update={"is_published": published}))
            return True


class SqliteSwirdleAttemptRepository(SwirdleAttemptRepository):
    """SQLite implementation of SwirdleAttemptRepository keyed on (user_id, word_id)."""

    def __init__(self, db: Database) -> None:
        self._db = db
        self._lock = asyncio.Lock()

    async def upsert_attempt(self, attempt: SwirdleAttempt) -> None:
        async with self._lock:
            self._db.connection.execute(
                "INSERT INTO swirdle_attempts (user_id, word_id, completed, data) VALUES (?, ?, ?, ?) "
                "ON CONFLICT(user_id, word_id) DO UPDATE SET completed = excluded.completed, data = excluded.data",
                (attempt.user_id, attempt.word_id, int(attempt.completed), attempt.model_dump_json()),
            )
            self._db.connection.commit()

    async def get_attempt(self, user_id: str, word_id: str) -> SwirdleAttempt | None:
        row = self._db.connection.execute(
            "SELECT data FROM swirdle_attempts WHERE user_id = ? AND word_id = ?",
            (user_id, word_id),
        ).fetchone()
        if row is None:
            return None
        return SwirdleAttempt.model_validate(json.loads(row[0]))

    async def list_attempts_for_word(self, word_id: str) -> list[SwirdleAttempt]:
        rows = self._db.connection.execute(
            "SELECT data FROM swirdle_attempts WHERE word_id = ? ORDER BY user_id",
            (word_id,),
        ).fetchall()
        return [SwirdleAttempt.model_validate(json.loads(row[0])) for row in rows]


class SqliteSwirdleStatsRepository(SwirdleStatsRepository):
    """SQLite implementation of SwirdleStatsRepository keyed on user_id."""

    def __init__(self, db: Database) -> None:
        self._db = db
        self._lock = asyncio.Lock()

    async def upsert_stats(self, stats: UserSwirdleStats) -> None:
        async with self._lock:
            self._db.connection.execute(
                "INSERT INTO user_swirdle_stats (user_id, data) VALUES (?, ?) "
                "ON CONFLICT(user_id) DO UPDATE SET data = excluded.data",
                (stats.user_id, stats.model_dump_json()),
            )
            self._db.connection.commit()

    async def get_stats(self, user_id: str) -> UserSwirdleStats | None:
        row = self._db.connection.execute(
            "SELECT data FROM user_swirdle_stats WHERE user_id = ?",
            (user_id,),
        ).fetchone()
        if row is None:
            return None
        return UserSwirdleStats.model_validate(json.loads(row[0]))

    async def top_streaks(self, limit: int = 10) -> list[UserSwirdleStats]:
        """Members with the longest current streaks. Ties go to the longer max streak, then user id."""
        rows = self._db.connection.execute(
            "SELECT data FROM user_swirdle_stats "
            "ORDER BY json_extract(data, '$.current_streak') DESC, "
            "json_extract(data, '$.max_streak') DESC, user_id "
            "LIMIT ?",
            (limit,),
        ).fetchall()
        return [UserSwirdleStats.model_validate(json.loads(row[0])) for row in rows]
