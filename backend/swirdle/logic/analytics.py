"""
Per-word play statistics for the admin word catalogue.
"""

from collections.abc import Iterable

from swirdle.logic.state import SwirdleAttempt, SwirdleWord
from swirdle.logic.types import WordSummary


def summarize_word(word: SwirdleWord, attempts: Iterable[SwirdleAttempt]) -> WordSummary:
    """
    Summarize every attempt made against ``word``.

    Unfinished attempts count toward the total; the average only covers wins.
    Attempts recorded against other words are ignored.
    """
    relevant = [a for a in attempts if a.word_id == word.id]
    wins = [a for a in relevant if a.won]
    total = len(relevant)
    win_rate = len(wins) / total * 100 if total else 0.0
    average = sum(a.attempts_count for a in wins) / len(wins) if wins else 0.0
    return WordSummary(
        word_id=word.id,
        total_attempts=total,
        total_wins=len(wins),
        win_rate=round(win_rate, 1),
        average_winning_guesses=round(average, 1),
    )
