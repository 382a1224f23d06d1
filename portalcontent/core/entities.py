# -*- coding: utf-8 -*-
"""
entities

Records exchanged between the configuration repository, the aggregator
and the web layer.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

from .choices import BaseUiType
from .specs import UiObjectSpec


@dataclass(frozen=True)
class UiObjectProperties:
    """Properties of a UI object stored in the configuration database."""

    id: int
    type_code: str
    title: str
    base_type: BaseUiType


@dataclass(frozen=True)
class ContentItem:
    """Navigable entry of a report or data window list."""

    kind: BaseUiType
    text: str = ""
    object_id: int | None = None
    url: str | None = None
    spec: UiObjectSpec | None = None

    @property
    def is_public(self) -> bool:
        """Return ``True`` for entries contributed by plugins for everyone."""

        return self.object_id is None

    def as_dict(self) -> Dict[str, Any]:
        """Return a JSON friendly representation of the item."""

        return {
            "kind": self.kind.value,
            "object_id": self.object_id,
            "text": self.text,
            "url": self.url,
        }


@dataclass(frozen=True)
class ContentSnapshot:
    """Immutable pair of content lists built for one user."""

    report_items: Tuple[ContentItem, ...] = ()
    data_window_items: Tuple[ContentItem, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.report_items and not self.data_window_items

    def as_dict(self) -> Dict[str, List[Dict[str, Any]]]:
        return {
            "reports": [item.as_dict() for item in self.report_items],
            "data_windows": [item.as_dict() for item in self.data_window_items],
        }


__all__ = ["ContentItem", "ContentSnapshot", "UiObjectProperties"]


# The End
