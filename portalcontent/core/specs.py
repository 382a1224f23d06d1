# -*- coding: utf-8 -*-
"""
specs

Display specifications for reports and data windows.

A specification tells the portal how a UI object of a given type code is
named and where it is opened. ``kind`` discriminates the two variants so a
report specification is never applied to a data window and vice versa.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Iterator, Mapping, TYPE_CHECKING

from .choices import BaseUiType
from .exceptions import InvalidArgumentError

if TYPE_CHECKING:  # pragma: no cover
    from .plugins import PluginSpec

UrlBuilder = Callable[[int], str]


@dataclass(frozen=True)
class UiObjectSpec:
    """Specification shared by every UI object of one type code."""

    kind: BaseUiType
    name: str
    url: str | None = None
    for_everyone: bool = False
    url_template: str | None = None
    url_builder: UrlBuilder | None = field(default=None, compare=False, repr=False)

    @property
    def is_report(self) -> bool:
        return self.kind is BaseUiType.REPORT

    @property
    def is_data_window(self) -> bool:
        return self.kind is BaseUiType.DATA_WINDOW

    def matches(self, base_type: BaseUiType) -> bool:
        """Return ``True`` when the specification applies to ``base_type``."""

        return self.kind is base_type

    def url_for(self, object_id: int) -> str:
        """Return the URL that opens the UI object identified by ``object_id``.

        An explicit ``url_builder`` wins, then ``url_template`` formatted with
        ``object_id``. Otherwise the identifier is appended to ``url`` as a
        query parameter.
        """

        if self.url_builder is not None:
            return self.url_builder(object_id)
        if self.url_template:
            return self.url_template.format(object_id=object_id)
        base = self.url or ""
        separator = "&" if "?" in base else "?"
        return f"{base}{separator}object_id={object_id}"


def report_spec(
    name: str,
    url: str | None = None,
    *,
    for_everyone: bool = False,
    url_template: str | None = None,
    url_builder: UrlBuilder | None = None,
) -> UiObjectSpec:
    """Return a report specification."""

    return UiObjectSpec(
        kind=BaseUiType.REPORT,
        name=name,
        url=url,
        for_everyone=for_everyone,
        url_template=url_template,
        url_builder=url_builder,
    )


def data_window_spec(
    name: str,
    url: str | None = None,
    *,
    for_everyone: bool = False,
    url_template: str | None = None,
    url_builder: UrlBuilder | None = None,
) -> UiObjectSpec:
    """Return a data window specification."""

    return UiObjectSpec(
        kind=BaseUiType.DATA_WINDOW,
        name=name,
        url=url,
        for_everyone=for_everyone,
        url_template=url_template,
        url_builder=url_builder,
    )


class SpecRegistry:
    """Map type codes to the specifications that render them."""

    logger = logging.getLogger(__name__)

    def __init__(self, specs: Mapping[str, UiObjectSpec] | None = None) -> None:
        """Initialize the registry with optional preset ``specs``."""

        self._specs: Dict[str, UiObjectSpec] = {}
        for type_code, spec in (specs or {}).items():
            self.register(type_code, spec)

    def register(self, type_code: str, spec: UiObjectSpec) -> None:
        """Register ``spec`` for ``type_code`` replacing any previous entry."""

        if not type_code:
            raise InvalidArgumentError("type_code")
        if spec is None:
            raise InvalidArgumentError("spec")
        existing = self._specs.get(type_code)
        if existing is not None and existing != spec:
            self.logger.warning("Replacing specification for type code %s", type_code)
        self._specs[type_code] = spec

    def lookup(self, type_code: str) -> UiObjectSpec | None:
        """Return the specification for ``type_code`` or ``None``."""

        return self._specs.get(type_code)

    def __contains__(self, type_code: object) -> bool:
        return type_code in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def __iter__(self) -> Iterator[str]:
        return iter(self._specs)

    @classmethod
    def from_plugins(cls, plugins: Iterable["PluginSpec"] | None) -> "SpecRegistry":
        """Build a registry from the type-coded specifications of ``plugins``."""

        registry = cls()
        for plugin in plugins or ():
            for type_code, spec in (plugin.type_codes or {}).items():
                registry.register(type_code, spec)
        return registry


__all__ = [
    "SpecRegistry",
    "UiObjectSpec",
    "UrlBuilder",
    "data_window_spec",
    "report_spec",
]


# The End
