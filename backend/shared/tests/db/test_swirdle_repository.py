"""Tests for the SQLite Swirdle repositories."""

from __future__ import annotations

from datetime import UTC, date, datetime
from typing import TYPE_CHECKING

import pytest

from shared.db.connection import Database
from shared.db.swirdle_repository import (
    SqliteSwirdleAttemptRepository,
    SqliteSwirdleStatsRepository,
    SqliteSwirdleWordRepository,
)
from swirdle.logic.enums import Difficulty, WordCategory
from swirdle.logic.state import SwirdleAttempt, SwirdleWord, UserSwirdleStats

if TYPE_CHECKING:
    from pathlib import Path


def _word(word_id: str = "w1", word: str = "MERLOT", day: date = date(2026, 5, 1), **kwargs) -> SwirdleWord:
    return SwirdleWord(id=word_id, word=word, date_scheduled=day, **kwargs)


@pytest.fixture
def db(tmp_path: Path):
    database = Database(tmp_path / "test.db")
    database.connect()
    yield database
    database.close()


class TestWordRepository:
    async def test_save_and_get(self, db: Database) -> None:
        repo = SqliteSwirdleWordRepository(db)
        word = _word(
            definition="A red grape",
            difficulty=Difficulty.BEGINNER,
            category=WordCategory.GRAPE_VARIETY,
            hints=("Bordeaux", "Soft"),
        )
        await repo.save_word(word)
        assert await repo.get_word("w1") == word

    async def test_get_unknown_returns_none(self, db: Database) -> None:
        assert await SqliteSwirdleWordRepository(db).get_word("nope") is None

    async def test_save_is_upsert_by_id(self, db: Database) -> None:
        repo = SqliteSwirdleWordRepository(db)
        await repo.save_word(_word())
        await repo.save_word(_word(word="SHIRAZ"))
        result = await repo.get_word("w1")
        assert result.word == "SHIRAZ"
        assert len(await repo.list_words()) == 1

    async def test_duplicate_date_rejected(self, db: Database) -> None:
        repo = SqliteSwirdleWordRepository(db)
        await repo.save_word(_word())
        with pytest.raises(ValueError, match="already scheduled for 2026-05-01"):
            await repo.save_word(_word(word_id="w2", word="SHIRAZ"))
        assert await repo.get_word("w2") is None

    async def test_published_word_for_date(self, db: Database) -> None:
        repo = SqliteSwirdleWordRepository(db)
        await repo.save_word(_word(is_published=False))
        assert await repo.get_published_word_for_date(date(2026, 5, 1)) is None
        await repo.set_published("w1", published=True)
        result = await repo.get_published_word_for_date(date(2026, 5, 1))
        assert result is not None
        assert result.is_published is True
        assert await repo.get_published_word_for_date(date(2026, 5, 2)) is None

    async def test_list_words_newest_first_with_filter(self, db: Database) -> None:
        repo = SqliteSwirdleWordRepository(db)
        await repo.save_word(_word("w1", day=date(2026, 5, 1), is_published=True))
        await repo.save_word(_word("w2", word="SHIRAZ", day=date(2026, 5, 3)))
        await repo.save_word(_word("w3", word="MALBEC", day=date(2026, 5, 2), is_published=True))
        assert [w.id for w in await repo.list_words()] == ["w2", "w3", "w1"]
        assert [w.id for w in await repo.list_words(published=True)] == ["w3", "w1"]
        assert [w.id for w in await repo.list_words(published=False)] == ["w2"]

    async def test_set_published_unknown_word(self, db: Database) -> None:
        assert await SqliteSwirdleWordRepository(db).set_published("nope", published=True) is False


class TestAttemptRepository:
    async def test_upsert_and_get(self, db: Database) -> None:
        repo = SqliteSwirdleAttemptRepository(db)
        attempt = SwirdleAttempt(user_id="u1", word_id="w1", guesses=("MELONS",), hints_used=frozenset({0, 2}))
        await repo.upsert_attempt(attempt)
        assert await repo.get_attempt("u1", "w1") == attempt

    async def test_upsert_overwrites(self, db: Database) -> None:
        repo = SqliteSwirdleAttemptRepository(db)
        await repo.upsert_attempt(SwirdleAttempt(user_id="u1", word_id="w1", guesses=("MELONS",)))
        finished = SwirdleAttempt(
            user_id="u1",
            word_id="w1",
            guesses=("MELONS", "MERLOT"),
            completed=True,
            won=True,
            completed_at=datetime(2026, 5, 1, 9, tzinfo=UTC),
        )
        await repo.upsert_attempt(finished)
        assert await repo.get_attempt("u1", "w1") == finished

    async def test_get_unknown_returns_none(self, db: Database) -> None:
        assert await SqliteSwirdleAttemptRepository(db).get_attempt("u1", "w1") is None

    async def test_list_for_word(self, db: Database) -> None:
        repo = SqliteSwirdleAttemptRepository(db)
        await repo.upsert_attempt(SwirdleAttempt(user_id="u2", word_id="w1"))
        await repo.upsert_attempt(SwirdleAttempt(user_id="u1", word_id="w1"))
        await repo.upsert_attempt(SwirdleAttempt(user_id="u1", word_id="w2"))
        assert [a.user_id for a in await repo.list_attempts_for_word("w1")] == ["u1", "u2"]


class TestStatsRepository:
    async def test_upsert_and_get(self, db: Database) -> None:
        repo = SqliteSwirdleStatsRepository(db)
        stats = UserSwirdleStats(
            user_id="u1",
            current_streak=2,
            max_streak=5,
            games_played=9,
            games_won=7,
            average_attempts=3.43,
            last_played=datetime(2026, 5, 1, 9, tzinfo=UTC),
        )
        await repo.upsert_stats(stats)
        assert await repo.get_stats("u1") == stats

        await repo.upsert_stats(stats.model_copy(update={"current_streak": 0}))
        result = await repo.get_stats("u1")
        assert result.current_streak == 0

    async def test_get_unknown_returns_none(self, db: Database) -> None:
        assert await SqliteSwirdleStatsRepository(db).get_stats("u1") is None

    async def test_top_streaks_orders_by_current_streak(self, db: Database) -> None:
        repo = SqliteSwirdleStatsRepository(db)
        for user_id, current, best in [("u1", 2, 4), ("u2", 7, 7), ("u3", 0, 9), ("u4", 2, 6)]:
            await repo.upsert_stats(
                UserSwirdleStats(user_id=user_id, current_streak=current, max_streak=best, games_played=10, games_won=8)
            )
        top = await repo.top_streaks()
        assert [s.user_id for s in top] == ["u2", "u4", "u1", "u3"]

    async def test_top_streaks_respects_limit(self, db: Database) -> None:
        repo = SqliteSwirdleStatsRepository(db)
        for n in range(12):
            await repo.upsert_stats(UserSwirdleStats(user_id=f"u{n:02d}", current_streak=n, max_streak=n))
        top = await repo.top_streaks()
        assert len(top) == 10
        assert top[0].user_id == "u11"
        assert [s.user_id for s in await repo.top_streaks(limit=2)] == ["u11", "u10"]

    async def test_top_streaks_empty(self, db: Database) -> None:
        assert await SqliteSwirdleStatsRepository(db).top_streaks() == []
