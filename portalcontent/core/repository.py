# -*- coding: utf-8 -*-
"""
repository

Access to UI object properties stored in the configuration database.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Collection, Iterable, List, Protocol, Sequence, Tuple, TYPE_CHECKING

from .choices import ALL_BASE_UI_TYPES, BaseUiType
from .entities import UiObjectProperties
from .exceptions import RepositoryNotLoadedError

if TYPE_CHECKING:  # pragma: no cover
    from ..models import UiObject


class ConfigurationRepository(Protocol):
    """Source of UI object properties."""

    def list_ui_objects(
        self, mask: Collection[BaseUiType]
    ) -> Sequence[UiObjectProperties]:
        ...


class MemoryUiObjectRepository:
    """Repository serving records held in memory."""

    def __init__(self, records: Iterable[UiObjectProperties] = ()) -> None:
        self._records: List[UiObjectProperties] = list(records)

    def add(self, record: UiObjectProperties) -> None:
        self._records.append(record)

    def list_ui_objects(
        self, mask: Collection[BaseUiType]
    ) -> List[UiObjectProperties]:
        """Return records whose base type is included in ``mask``."""

        return [record for record in self._records if record.base_type in mask]


class TortoiseUiObjectRepository:
    """Repository reading the ``ui_object`` table through Tortoise ORM.

    The aggregator is synchronous, so rows are loaded ahead of time with
    :meth:`refresh` and served from that snapshot afterwards.
    """

    logger = logging.getLogger(__name__)

    def __init__(self, model: type["UiObject"] | None = None) -> None:
        """Bind the repository to ``model`` or the default :class:`UiObject`."""

        if model is None:
            from ..models import UiObject

            model = UiObject
        self._model = model
        self._snapshot: Tuple[UiObjectProperties, ...] | None = None

    @property
    def loaded(self) -> bool:
        return self._snapshot is not None

    async def refresh(self, mask: Collection[BaseUiType] = ALL_BASE_UI_TYPES) -> int:
        """Load rows of the ``mask`` base types and return their count."""

        values = [BaseUiType(kind).value for kind in mask]
        rows = await self._model.filter(base_type__in=values).order_by("id")
        self._snapshot = tuple(row.to_properties() for row in rows)
        self.logger.debug("Loaded %d UI objects", len(self._snapshot))
        return len(self._snapshot)

    def invalidate(self) -> None:
        """Drop the loaded snapshot."""

        self._snapshot = None

    def list_ui_objects(
        self, mask: Collection[BaseUiType]
    ) -> List[UiObjectProperties]:
        """Return loaded records whose base type is included in ``mask``."""

        if self._snapshot is None:
            raise RepositoryNotLoadedError("UI objects have not been loaded yet")
        return [record for record in self._snapshot if record.base_type in mask]


__all__ = [
    "ConfigurationRepository",
    "MemoryUiObjectRepository",
    "TortoiseUiObjectRepository",
]


# The End
