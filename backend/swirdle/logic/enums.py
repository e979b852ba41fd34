"""
String enum definitions for Swirdle game concepts.
"""

from enum import StrEnum


class Difficulty(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class WordCategory(StrEnum):
    GRAPE_VARIETY = "grape_variety"
    WINE_REGION = "wine_region"
    TASTING_TERM = "tasting_term"
    PRODUCTION = "production"
    GENERAL = "general"


class GamePhase(StrEnum):
    """Progress of one member through one day's puzzle."""

    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class LetterStatus(StrEnum):
    """Evaluation of a single guessed letter against the target word."""

    CORRECT = "correct"
    PRESENT = "present"
    ABSENT = "absent"


class InvalidOperationReason(StrEnum):
    """Reasons a guess or hint request is rejected without changing state."""

    LENGTH_MISMATCH = "length_mismatch"
    GAME_COMPLETED = "game_completed"
    GUESSES_EXHAUSTED = "guesses_exhausted"
    HINT_OUT_OF_RANGE = "hint_out_of_range"
    HINT_ALREADY_USED = "hint_already_used"
