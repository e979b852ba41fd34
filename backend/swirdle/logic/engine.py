"""
Swirdle daily word game engine.

Lifecycle of one member's attempt against one word:

    NOT_STARTED --guess--> IN_PROGRESS --correct guess--> WON
                                       --6th wrong guess--> LOST

Hint unlocks never change the phase. WON and LOST are terminal.

Every operation is pure: it takes the current attempt and returns a new one
alongside the signals the caller needs (letter statuses, stats delta,
rejection). Rejected operations return the input attempt untouched together
with an ``InvalidOperation``; nothing here raises for business-rule
violations. Callers are expected to serialize operations for one member.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import structlog

from swirdle.logic.enums import GamePhase, InvalidOperationReason
from swirdle.logic.evaluation import evaluate_guess
from swirdle.logic.state import MAX_GUESSES, SwirdleAttempt
from swirdle.logic.stats import apply_game_result, empty_stats
from swirdle.logic.types import GuessOutcome, HintOutcome, InvalidOperation, StatsDelta

if TYPE_CHECKING:
    from swirdle.logic.state import SwirdleWord, UserSwirdleStats

logger = structlog.get_logger()


def new_attempt(user_id: str, word: SwirdleWord) -> SwirdleAttempt:
    """Create the empty attempt a member starts from."""
    return SwirdleAttempt(user_id=user_id, word_id=word.id)


def game_phase(attempt: SwirdleAttempt) -> GamePhase:
    if attempt.completed:
        return GamePhase.WON if attempt.won else GamePhase.LOST
    if attempt.guesses or attempt.hints_used:
        return GamePhase.IN_PROGRESS
    return GamePhase.NOT_STARTED


def remaining_attempts(attempt: SwirdleAttempt) -> int:
    return MAX_GUESSES - len(attempt.guesses)


def _check_word(attempt: SwirdleAttempt, word: SwirdleWord) -> None:
    if attempt.word_id != word.id:
        raise ValueError(f"Attempt belongs to word {attempt.word_id!r}, not {word.id!r}")


def _reject_guess(attempt: SwirdleAttempt, reason: InvalidOperationReason, message: str) -> GuessOutcome:
    logger.info("guess rejected", user_id=attempt.user_id, word_id=attempt.word_id, reason=reason)
    return GuessOutcome(attempt=attempt, error=InvalidOperation(reason=reason, message=message))


def submit_guess(
    attempt: SwirdleAttempt,
    word: SwirdleWord,
    raw_guess: str,
    *,
    stats: UserSwirdleStats | None = None,
    now: datetime | None = None,
) -> GuessOutcome:
    """
    Apply a guess to the attempt.

    Args:
        attempt: Current attempt for (member, word)
        word: The word being guessed
        raw_guess: Guess as typed; compared and stored upper-cased
        stats: Member stats before this game, used only when the guess
            completes the game (a fresh record is assumed when None)
        now: Clock override for completion timestamps

    Returns:
        GuessOutcome with the new attempt and letter statuses, or the
        unchanged attempt and an InvalidOperation when rejected

    Raises:
        ValueError: If the attempt belongs to a different word

    """
    _check_word(attempt, word)

    if attempt.completed:
        return _reject_guess(attempt, InvalidOperationReason.GAME_COMPLETED, "Today's game is already finished")
    if len(raw_guess) != word.length:
        return _reject_guess(
            attempt,
            InvalidOperationReason.LENGTH_MISMATCH,
            f"Guess must be {word.length} letters, got {len(raw_guess)}",
        )
    if remaining_attempts(attempt) <= 0:
        return _reject_guess(attempt, InvalidOperationReason.GUESSES_EXHAUSTED, "No guesses left")

    guess = raw_guess.upper()
    # some letters upper-case to more than one character
    if len(guess) != word.length:
        return _reject_guess(
            attempt,
            InvalidOperationReason.LENGTH_MISMATCH,
            f"Guess must be {word.length} letters, got {len(guess)} after capitalisation",
        )

    letters = evaluate_guess(guess, word.word)
    guesses = (*attempt.guesses, guess)
    won = guess == word.word
    completed = won or len(guesses) == MAX_GUESSES

    update: dict[str, object] = {"guesses": guesses}
    stats_delta = None
    if completed:
        completed_at = now or datetime.now(UTC)
        update.update(completed=True, won=won, completed_at=completed_at)
        before = stats or empty_stats(attempt.user_id)
        after = apply_game_result(before, won=won, attempts=len(guesses), now=completed_at)
        stats_delta = StatsDelta(before=before, after=after, won=won, attempts=len(guesses))

    new = attempt.model_copy(update=update)
    logger.debug(
        "guess applied",
        user_id=attempt.user_id,
        word_id=attempt.word_id,
        guess_number=len(guesses),
        phase=game_phase(new),
    )
    return GuessOutcome(attempt=new, letters=letters, stats_delta=stats_delta)


def unlock_hint(attempt: SwirdleAttempt, word: SwirdleWord, hint_index: int) -> HintOutcome:
    """
    Mark the hint at ``hint_index`` as used.

    Explicit unlock is allowed for any unused hint while the game is open,
    whether or not the guess count has already revealed it.
    """
    _check_word(attempt, word)
    error: InvalidOperation | None = None
    if attempt.completed:
        error = InvalidOperation(reason=InvalidOperationReason.GAME_COMPLETED, message="Today's game is already finished")
    elif not 0 <= hint_index < len(word.hints):
        error = InvalidOperation(
            reason=InvalidOperationReason.HINT_OUT_OF_RANGE,
            message=f"Hint {hint_index} does not exist; this word has {len(word.hints)} hints",
        )
    elif hint_index in attempt.hints_used:
        error = InvalidOperation(
            reason=InvalidOperationReason.HINT_ALREADY_USED,
            message=f"Hint {hint_index} is already unlocked",
        )

    if error is not None:
        logger.info("hint rejected", user_id=attempt.user_id, word_id=attempt.word_id, reason=error.reason)
        return HintOutcome(attempt=attempt, error=error)

    new = attempt.model_copy(update={"hints_used": attempt.hints_used | {hint_index}})
    return HintOutcome(attempt=new)
