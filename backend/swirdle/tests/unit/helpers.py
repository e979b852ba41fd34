"""Shared builders for Swirdle unit tests."""

from datetime import UTC, date, datetime

from swirdle.logic.state import SwirdleAttempt, SwirdleWord

FIXED_NOW = datetime(2026, 3, 14, 18, 30, tzinfo=UTC)


def make_word(
    word: str = "MERLOT",
    *,
    word_id: str = "w-merlot",
    day: date = date(2026, 3, 14),
    hints: tuple[str, ...] = ("A red grape", "Famous in Bordeaux", "Soft tannins"),
    is_published: bool = True,
) -> SwirdleWord:
    return SwirdleWord(
        id=word_id,
        word=word,
        definition=f"{word.title()} is a wine term",
        date_scheduled=day,
        hints=hints,
        is_published=is_published,
    )


def make_attempt(word: SwirdleWord, *guesses: str, user_id: str = "u-1", **kwargs) -> SwirdleAttempt:
    return SwirdleAttempt(user_id=user_id, word_id=word.id, guesses=guesses, **kwargs)
