"""Typed exceptions raised at the Swirdle service boundary.

Rule violations inside a game (wrong length, finished game, used hint) are
not exceptions; the engine reports them as InvalidOperation values.
"""


class SwirdleError(Exception):
    """Base exception for Swirdle service failures."""


class WordNotFoundError(SwirdleError):
    """No published word is scheduled for the requested date."""

    def __init__(self, day: str) -> None:
        self.day = day
        super().__init__(f"no published Swirdle word for {day}")
