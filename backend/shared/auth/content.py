"""Content gating helpers for courses made of role-tagged modules."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from shared.auth.policy import can_access

if TYPE_CHECKING:
    from collections.abc import Collection, Iterable

    from shared.auth.models import Principal, RequiredRole


class ContentUnit(Protocol):
    """Anything that carries an id and a minimum role (module, lesson, route)."""

    @property
    def id(self) -> str: ...

    @property
    def required_role(self) -> RequiredRole: ...


def accessible_units[T: ContentUnit](principal: Principal | None, units: Iterable[T]) -> list[T]:
    """Return the units the principal may open, preserving order."""
    return [unit for unit in units if can_access(principal, unit.required_role)]


def course_progress(
    principal: Principal | None,
    units: Iterable[ContentUnit],
    completed_ids: Collection[str],
) -> float:
    """Return the completion percentage over the units the principal can access.

    Locked units neither count toward the total nor the completed share.
    """
    accessible = accessible_units(principal, units)
    if not accessible:
        return 0.0
    completed = sum(1 for unit in accessible if unit.id in completed_ids)
    return completed / len(accessible) * 100
