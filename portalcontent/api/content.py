# -*- coding: utf-8 -*-
"""
content

Read-only endpoints returning the navigation content of the current session.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Awaitable, Callable, List, Sequence, Union

from fastapi import APIRouter, Depends, FastAPI
from pydantic import BaseModel

from ..core.aggregator import ContentAggregator
from ..core.entities import ContentItem, ContentSnapshot

AggregatorResolver = Callable[..., Union[ContentAggregator, Awaitable[ContentAggregator]]]


class ContentItemSchema(BaseModel):
    """Serialized navigation entry."""

    kind: str
    object_id: int | None = None
    text: str
    url: str | None = None


class ContentSnapshotSchema(BaseModel):
    """Serialized report and data window lists."""

    reports: List[ContentItemSchema]
    data_windows: List[ContentItemSchema]


class ContentRouter:
    """Expose a session's :class:`ContentAggregator` through FastAPI."""

    def __init__(
        self,
        resolver: AggregatorResolver,
        *,
        prefix: str = "/content",
        tags: Sequence[str] | None = None,
    ) -> None:
        """Create routes reading the aggregator returned by ``resolver``.

        ``resolver`` is used as a FastAPI dependency, so it may accept the
        request or any other injectable parameter.
        """

        self._resolver = resolver
        self.router = APIRouter(prefix=prefix, tags=list(tags or ["content"]))
        self._register_routes()

    def mount(self, app: FastAPI) -> None:
        """Include the content routes into ``app``."""

        app.include_router(self.router)

    @staticmethod
    def serialize_items(items: Sequence[ContentItem]) -> List[ContentItemSchema]:
        return [ContentItemSchema(**item.as_dict()) for item in items]

    @classmethod
    def serialize_snapshot(cls, snapshot: ContentSnapshot) -> ContentSnapshotSchema:
        return ContentSnapshotSchema(
            reports=cls.serialize_items(snapshot.report_items),
            data_windows=cls.serialize_items(snapshot.data_window_items),
        )

    def _register_routes(self) -> None:
        resolver = self._resolver

        @self.router.get("", response_model=ContentSnapshotSchema)
        async def read_content(
            aggregator: ContentAggregator = Depends(resolver),
        ) -> Any:
            return self.serialize_snapshot(aggregator.snapshot)

        @self.router.get("/reports", response_model=List[ContentItemSchema])
        async def read_reports(
            aggregator: ContentAggregator = Depends(resolver),
        ) -> Any:
            return self.serialize_items(aggregator.report_items)

        @self.router.get("/data-windows", response_model=List[ContentItemSchema])
        async def read_data_windows(
            aggregator: ContentAggregator = Depends(resolver),
        ) -> Any:
            return self.serialize_items(aggregator.data_window_items)


def build_content_router(
    resolver: AggregatorResolver,
    *,
    prefix: str = "/content",
    tags: Sequence[str] | None = None,
) -> APIRouter:
    """Return an ``APIRouter`` serving the content resolved by ``resolver``."""

    return ContentRouter(resolver, prefix=prefix, tags=tags).router


__all__ = [
    "AggregatorResolver",
    "ContentItemSchema",
    "ContentRouter",
    "ContentSnapshotSchema",
    "build_content_router",
]


# The End
