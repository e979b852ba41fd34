"""SQLite database layer: connection management and repository implementations."""

from shared.db.connection import Database
from shared.db.profile_repository import SqliteProfileRepository
from shared.db.swirdle_repository import (
    SqliteSwirdleAttemptRepository,
    SqliteSwirdleStatsRepository,
    SqliteSwirdleWordRepository,
)
from shared.db.translation_repository import SqliteTranslationRepository

__all__ = [
    "Database",
    "SqliteProfileRepository",
    "SqliteSwirdleAttemptRepository",
    "SqliteSwirdleStatsRepository",
    "SqliteSwirdleWordRepository",
    "SqliteTranslationRepository",
]
