# -*- coding: utf-8 -*-
"""
aggregator

Content accessible to a portal user.

The aggregator merges UI objects configured in the database with public
entries contributed by plugins into two sorted lists: reports and data
windows. Building never fails from the caller's point of view; runtime
errors are written to the injected logger and whatever content was
collected up to that point is published unsorted, in arrival order.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from threading import RLock
from typing import Callable, Dict, Iterable, List, TYPE_CHECKING, Union

from ..conf import ContentSettings, current_settings
from .choices import BaseUiType
from .entities import ContentItem, ContentSnapshot, UiObjectProperties
from .exceptions import AggregationError, InvalidArgumentError
from .messages import INIT_FAILED, messages
from .specs import UiObjectSpec

if TYPE_CHECKING:  # pragma: no cover
    from .context import UserContext
    from .plugins import PluginSpec
    from .repository import ConfigurationRepository

LogSink = Union[logging.Logger, logging.LoggerAdapter]
SortKey = Callable[[ContentItem], str]

REPOSITORY_MASK = frozenset({BaseUiType.REPORT, BaseUiType.DATA_WINDOW})


@dataclass(frozen=True)
class AggregationResult:
    """Outcome of a content build."""

    snapshot: ContentSnapshot
    error: Exception | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class _ContentLists:
    """Mutable report and data window lists used while building."""

    def __init__(self) -> None:
        self._items: Dict[BaseUiType, List[ContentItem]] = {
            kind: [] for kind in BaseUiType
        }

    def append(self, item: ContentItem) -> None:
        self._items[item.kind].append(item)

    def to_snapshot(self, key: SortKey | None = None) -> ContentSnapshot:
        """Return the lists sorted by ``key`` or in arrival order without one."""

        reports = self._items[BaseUiType.REPORT]
        windows = self._items[BaseUiType.DATA_WINDOW]
        if key is not None:
            reports = sorted(reports, key=key)
            windows = sorted(windows, key=key)
        return ContentSnapshot(report_items=tuple(reports), data_window_items=tuple(windows))


class ContentAggregator:
    """Build the navigation content available to one user session."""

    def __init__(
        self,
        logger: LogSink | None,
        *,
        settings: ContentSettings | None = None,
    ) -> None:
        """Bind the aggregator to ``logger`` and start with empty lists."""

        if logger is None:
            raise InvalidArgumentError("logger")
        self._logger = logger
        self._settings = settings
        self._lock = RLock()
        self._snapshot = ContentSnapshot()

    @property
    def logger(self) -> LogSink:
        return self._logger

    @property
    def settings(self) -> ContentSettings:
        return self._settings or current_settings()

    @property
    def snapshot(self) -> ContentSnapshot:
        """Return the content published by the latest :meth:`init` call."""

        return self._snapshot

    @property
    def report_items(self) -> tuple[ContentItem, ...]:
        return self._snapshot.report_items

    @property
    def data_window_items(self) -> tuple[ContentItem, ...]:
        return self._snapshot.data_window_items

    def init(
        self,
        user_context: "UserContext",
        repository: "ConfigurationRepository | None",
    ) -> None:
        """Rebuild the content available to ``user_context``.

        Raises :class:`InvalidArgumentError` when ``user_context`` is
        missing. Any other error is logged as :class:`AggregationError` and
        the partially built content is published.
        """

        if user_context is None:
            raise InvalidArgumentError("user_context")
        with self._lock:
            result = self.build(user_context, repository)
            self._snapshot = result.snapshot
        if result.error is not None:
            self._logger.error(
                messages.get(INIT_FAILED, self.settings.locale),
                exc_info=result.error,
            )
            return
        self._logger.debug(
            "User %s content: %d reports, %d data windows",
            user_context.user_id,
            len(result.snapshot.report_items),
            len(result.snapshot.data_window_items),
        )

    def build(
        self,
        user_context: "UserContext",
        repository: "ConfigurationRepository | None",
    ) -> AggregationResult:
        """Return freshly built content without publishing it."""

        if user_context is None:
            raise InvalidArgumentError("user_context")
        lists = _ContentLists()
        try:
            self._add_content_from_repository(lists, user_context, repository)
            self._add_content_from_plugins(lists, user_context.plugins)
            return AggregationResult(snapshot=lists.to_snapshot(self._sort_key()))
        except Exception as exc:
            error = AggregationError(
                f"Failed to build content for user {user_context.user_id}: {exc!r}"
            )
            error.__cause__ = exc
            return AggregationResult(snapshot=lists.to_snapshot(), error=error)

    def _add_content_from_repository(
        self,
        lists: _ContentLists,
        user_context: "UserContext",
        repository: "ConfigurationRepository | None",
    ) -> None:
        """Append UI objects from ``repository`` that the user may view."""

        rights = user_context.rights
        specs = user_context.specs
        if rights is None or specs is None or repository is None:
            return
        for props in repository.list_ui_objects(REPOSITORY_MASK):
            if not rights.can_view(user_context, props.id):
                continue
            lists.append(self._make_item(props, specs.lookup(props.type_code)))

    @staticmethod
    def _make_item(props: UiObjectProperties, spec: UiObjectSpec | None) -> ContentItem:
        """Return the item for ``props`` enriched by a spec of the same kind."""

        text = props.title or ""
        if spec is None or not spec.matches(props.base_type):
            return ContentItem(kind=props.base_type, text=text, object_id=props.id)
        return ContentItem(
            kind=props.base_type,
            text=text or spec.name,
            object_id=props.id,
            url=spec.url_for(props.id),
            spec=spec,
        )

    @staticmethod
    def _add_content_from_plugins(
        lists: _ContentLists,
        plugins: Iterable["PluginSpec"] | None,
    ) -> None:
        """Append plugin specifications available to everyone."""

        for plugin in plugins or ():
            for spec in plugin.public_specs():
                lists.append(
                    ContentItem(kind=spec.kind, text=spec.name, url=spec.url, spec=spec)
                )

    def _sort_key(self) -> SortKey:
        if self.settings.case_insensitive_sort:
            return lambda item: item.text.casefold()
        return lambda item: item.text


__all__ = ["AggregationResult", "ContentAggregator", "LogSink", "REPOSITORY_MASK"]


# The End
