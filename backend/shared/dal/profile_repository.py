"""Abstract interface for member profile persistence."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared.auth.models import Profile


class ProfileRepository(ABC):
    """Abstract interface for member profiles.

    Profiles are written by the sign-up and billing flows; this service
    mostly reads them to build principals.
    """

    @abstractmethod
    async def upsert_profile(self, profile: Profile) -> None: ...

    @abstractmethod
    async def get_profile(self, user_id: str) -> Profile | None: ...
