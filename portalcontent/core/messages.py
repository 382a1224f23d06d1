# -*- coding: utf-8 -*-
"""
messages

Localized log messages.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Dict, Mapping

DEFAULT_LOCALE = "en"

INIT_FAILED = "init_failed"

_CATALOGS: Dict[str, Dict[str, str]] = {
    "en": {
        INIT_FAILED: "Error initializing accessible user content",
    },
    "ru": {
        INIT_FAILED: "Ошибка при инициализации доступного контента пользователя",
    },
}


class MessageCatalog:
    """Resolve message keys to text in the requested locale."""

    def __init__(self, catalogs: Mapping[str, Mapping[str, str]] | None = None) -> None:
        self._catalogs: Dict[str, Dict[str, str]] = {
            locale: dict(entries) for locale, entries in (catalogs or _CATALOGS).items()
        }

    def get(self, key: str, locale: str | None = None) -> str:
        """Return text for ``key`` falling back to English, then to ``key``."""

        for candidate in (self._normalize(locale), DEFAULT_LOCALE):
            entries = self._catalogs.get(candidate)
            if entries and key in entries:
                return entries[key]
        return key

    @staticmethod
    def _normalize(locale: str | None) -> str:
        """Reduce tokens such as ``ru-RU`` or ``ru_RU.UTF-8`` to ``ru``."""

        candidate = (locale or "").strip().lower()
        for separator in (".", "-", "_"):
            candidate = candidate.split(separator, 1)[0]
        return candidate or DEFAULT_LOCALE


messages = MessageCatalog()

__all__ = ["DEFAULT_LOCALE", "INIT_FAILED", "MessageCatalog", "messages"]


# The End
