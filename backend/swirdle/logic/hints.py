"""
Hint economy rules.

A hint becomes visible either because the member unlocked it explicitly or
because enough guesses have been made: hint ``i`` reveals itself once more
than ``2 * i`` guesses are on the board. Unlocking carries no score penalty.
"""

from swirdle.logic.state import SwirdleAttempt, SwirdleWord

GUESSES_PER_HINT = 2


def is_hint_revealed(attempt: SwirdleAttempt, hint_index: int) -> bool:
    """Check whether the hint at ``hint_index`` is visible to the member."""
    if hint_index in attempt.hints_used:
        return True
    return len(attempt.guesses) > hint_index * GUESSES_PER_HINT


def revealed_hints(attempt: SwirdleAttempt, word: SwirdleWord) -> tuple[int, ...]:
    """Return the indexes of all hints currently visible, in order."""
    return tuple(i for i in range(len(word.hints)) if is_hint_revealed(attempt, i))
