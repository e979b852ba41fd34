"""
Letter-by-letter evaluation of a guess against the target word.

This is a simplified Wordle rule: a letter found elsewhere in the target is
``present`` no matter how many times it occurs in either word.
"""

from swirdle.logic.enums import LetterStatus


def evaluate_guess(guess: str, target: str) -> tuple[LetterStatus, ...]:
    """
    Return the status of every letter of ``guess``.

    Both strings are compared upper-cased. A whole-word match marks every
    position correct.

    Raises:
        ValueError: If the guess and target lengths differ

    """
    guess = guess.upper()
    target = target.upper()
    if len(guess) != len(target):
        raise ValueError(f"Guess length {len(guess)} does not match word length {len(target)}")
    if guess == target:
        return (LetterStatus.CORRECT,) * len(guess)

    statuses: list[LetterStatus] = []
    for position, letter in enumerate(guess):
        if target[position] == letter:
            statuses.append(LetterStatus.CORRECT)
        elif letter in target:
            statuses.append(LetterStatus.PRESENT)
        else:
            statuses.append(LetterStatus.ABSENT)
    return tuple(statuses)
