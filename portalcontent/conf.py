# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the portal content package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from threading import RLock
from typing import Callable, Mapping, Tuple


@dataclass
class ContentSettings:
    """Container for content configuration derived from environment variables."""

    locale: str = "en"
    case_insensitive_sort: bool = False
    plugin_modules: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Normalize the locale token and plugin module list."""

        self.locale = (self.locale or "").strip() or "en"
        if isinstance(self.plugin_modules, str):
            self.plugin_modules = self._split_modules(self.plugin_modules)
        else:
            self.plugin_modules = tuple(self.plugin_modules)

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "PORTALCONTENT_",
    ) -> "ContentSettings":
        """Build a settings instance from environment variables."""

        source = os.environ if env is None else env
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            locale=data.get("LOCALE") or "en",
            case_insensitive_sort=cls._to_bool(data.get("CASE_INSENSITIVE_SORT")),
            plugin_modules=cls._split_modules(data.get("PLUGINS") or ""),
        )

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _split_modules(value: str) -> Tuple[str, ...]:
        return tuple(part.strip() for part in value.split(",") if part.strip())


class SettingsManager:
    """Central storage for the active ``ContentSettings`` instance."""

    def __init__(self, initial: ContentSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial
        self._callbacks: list[Callable[[ContentSettings], None]] = []

    def configure(self, settings: ContentSettings) -> None:
        """Install a new settings instance and notify observers."""
        with self._lock:
            self._settings = settings
            for callback in list(self._callbacks):
                callback(settings)

    def current(self) -> ContentSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = ContentSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next read uses the environment."""
        with self._lock:
            self._settings = None

    def register(self, callback: Callable[[ContentSettings], None]) -> None:
        """Register a callback invoked whenever settings change."""
        with self._lock:
            self._callbacks.append(callback)

    def unregister(self, callback: Callable[[ContentSettings], None]) -> None:
        """Remove a previously registered settings change callback if present."""
        with self._lock:
            if callback in self._callbacks:
                self._callbacks.remove(callback)


_settings_manager = SettingsManager()


def configure(settings: ContentSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> ContentSettings:
    """Return the active settings instance."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop configured settings; used by tests."""
    _settings_manager.reset()


def register_settings_observer(callback: Callable[[ContentSettings], None]) -> None:
    """Subscribe to configuration changes."""
    _settings_manager.register(callback)


def unregister_settings_observer(callback: Callable[[ContentSettings], None]) -> None:
    """Unsubscribe from configuration changes previously registered."""
    _settings_manager.unregister(callback)


__all__ = [
    "ContentSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "register_settings_observer",
    "reset_settings",
    "unregister_settings_observer",
]


# The End
