# -*- coding: utf-8 -*-
"""
plugins

Specifications contributed by portal plugins and their registry.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass
from types import ModuleType
from typing import Dict, Iterable, Iterator, List, Mapping, Tuple

from ..conf import ContentSettings, current_settings
from .choices import BaseUiType
from .exceptions import InvalidArgumentError, PluginLoadError
from .specs import SpecRegistry, UiObjectSpec

PLUGIN_SPEC_ATTRIBUTE = "plugin_spec"


@dataclass(frozen=True)
class PluginSpec:
    """Reports, data windows and type codes declared by one plugin."""

    name: str
    report_specs: Tuple[UiObjectSpec, ...] | None = None
    data_window_specs: Tuple[UiObjectSpec, ...] | None = None
    type_codes: Mapping[str, UiObjectSpec] | None = None

    def __post_init__(self) -> None:
        """Freeze spec sequences and reject specs filed under the wrong kind."""

        for attr, kind in (
            ("report_specs", BaseUiType.REPORT),
            ("data_window_specs", BaseUiType.DATA_WINDOW),
        ):
            specs = getattr(self, attr)
            if specs is None:
                continue
            specs = tuple(specs)
            for spec in specs:
                if not spec.matches(kind):
                    raise InvalidArgumentError(
                        attr,
                        f"Plugin {self.name!r} lists a {spec.kind.label} spec "
                        f"{spec.name!r} under {attr}",
                    )
            object.__setattr__(self, attr, specs)

    def public_specs(self) -> Iterator[UiObjectSpec]:
        """Yield specifications flagged as visible to everyone."""

        for specs in (self.report_specs, self.data_window_specs):
            for spec in specs or ():
                if spec.for_everyone:
                    yield spec


class PluginRegistry:
    """Ordered collection of plugin specifications."""

    logger = logging.getLogger(__name__)

    def __init__(self, plugins: Iterable[PluginSpec] = ()) -> None:
        """Register ``plugins`` preserving their order."""

        self._plugins: Dict[str, PluginSpec] = {}
        for plugin in plugins:
            self.register(plugin)

    def register(self, plugin: PluginSpec) -> None:
        """Register ``plugin``; a plugin with the same name is replaced in place."""

        if plugin is None:
            raise InvalidArgumentError("plugin")
        if plugin.name in self._plugins:
            self.logger.warning("Plugin %s registered twice, replacing", plugin.name)
        self._plugins[plugin.name] = plugin

    def unregister(self, name: str) -> None:
        self._plugins.pop(name, None)

    def get(self, name: str) -> PluginSpec | None:
        return self._plugins.get(name)

    def __iter__(self) -> Iterator[PluginSpec]:
        return iter(list(self._plugins.values()))

    def __len__(self) -> int:
        return len(self._plugins)

    @classmethod
    def from_settings(cls, settings: ContentSettings | None = None) -> "PluginRegistry":
        """Return a registry loaded from the configured plugin modules."""

        registry = cls()
        registry.load((settings or current_settings()).plugin_modules)
        return registry

    def spec_registry(self) -> SpecRegistry:
        """Return type code lookups declared by the registered plugins."""

        return SpecRegistry.from_plugins(self)

    def load(self, module_paths: Iterable[str], *, strict: bool = False) -> List[PluginSpec]:
        """Import ``module_paths`` and register their ``plugin_spec`` objects.

        Modules that fail to import or do not expose a ``PluginSpec`` are
        logged and skipped unless ``strict`` is set, in which case
        :class:`PluginLoadError` is raised.
        """

        loaded: List[PluginSpec] = []
        seen: set[str] = set()
        for module_path in module_paths:
            if module_path in seen:
                continue
            seen.add(module_path)
            try:
                plugin = self._load_plugin(module_path)
            except PluginLoadError:
                if strict:
                    raise
                self.logger.exception("Failed to load plugin module %s", module_path)
                continue
            self.register(plugin)
            loaded.append(plugin)
        return loaded

    def _load_plugin(self, module_path: str) -> PluginSpec:
        module = self._import(module_path)
        plugin = getattr(module, PLUGIN_SPEC_ATTRIBUTE, None)
        if not isinstance(plugin, PluginSpec):
            raise PluginLoadError(
                f"Module {module_path} does not define {PLUGIN_SPEC_ATTRIBUTE}"
            )
        return plugin

    @staticmethod
    def _import(module_path: str) -> ModuleType:
        try:
            return importlib.import_module(module_path)
        except ImportError as exc:
            raise PluginLoadError(f"Failed to import module {module_path}") from exc


__all__ = ["PLUGIN_SPEC_ATTRIBUTE", "PluginRegistry", "PluginSpec"]


# The End
