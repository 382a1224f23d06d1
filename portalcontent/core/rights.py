# -*- coding: utf-8 -*-
"""
rights

Per-object access rights of a portal user.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, Mapping, Protocol, TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover
    from .context import UserContext


class RightsResolver(Protocol):
    """Answer whether a user may see a configured UI object."""

    def can_view(self, user_context: "UserContext", object_id: int) -> bool:
        ...


@dataclass(frozen=True)
class ObjectRights:
    """Rights granted on a single UI object."""

    view: bool = False
    control: bool = False


NO_RIGHTS = ObjectRights()
FULL_RIGHTS = ObjectRights(view=True, control=True)


class UserRights:
    """Rights table keyed by UI object identifier."""

    def __init__(
        self,
        rights: Mapping[int, ObjectRights] | None = None,
        *,
        is_admin: bool = False,
    ) -> None:
        """Store a copy of ``rights``; administrators get full rights everywhere."""

        self._rights: Dict[int, ObjectRights] = dict(rights or {})
        self.is_admin = is_admin

    @classmethod
    def from_ids(
        cls,
        view_ids: Iterable[int],
        control_ids: Iterable[int] = (),
    ) -> "UserRights":
        """Build rights from plain identifier collections."""

        control = set(control_ids)
        rights = {
            object_id: ObjectRights(view=True, control=object_id in control)
            for object_id in view_ids
        }
        for object_id in control - set(rights):
            rights[object_id] = ObjectRights(view=False, control=True)
        return cls(rights)

    def grant(self, object_id: int, *, view: bool = True, control: bool = False) -> None:
        self._rights[object_id] = ObjectRights(view=view, control=control)

    def revoke(self, object_id: int) -> None:
        self._rights.pop(object_id, None)

    def get(self, object_id: int) -> ObjectRights:
        """Return rights on ``object_id`` or ``NO_RIGHTS`` when not configured."""

        if self.is_admin:
            return FULL_RIGHTS
        return self._rights.get(object_id, NO_RIGHTS)

    def can_view(self, user_context: "UserContext", object_id: int) -> bool:
        _ = user_context
        return self.get(object_id).view

    def can_control(self, user_context: "UserContext", object_id: int) -> bool:
        _ = user_context
        return self.get(object_id).control


__all__ = ["FULL_RIGHTS", "NO_RIGHTS", "ObjectRights", "RightsResolver", "UserRights"]


# The End
