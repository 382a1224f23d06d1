# -*- coding: utf-8 -*-
"""
choices

Choice enums describing the kinds of navigable UI objects.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from enum import Enum


class StrChoices(str, Enum):
    """String-based choices: members defined as ('value', 'Label')."""

    def __new__(cls, value: str, label: str):
        obj = str.__new__(cls, value)
        obj._value_ = value
        obj.label = label  # type: ignore[attr-defined]
        return obj

    def __str__(self) -> str:
        return str(self.value)


class BaseUiType(StrChoices):
    """Base classification of a configured UI object."""

    REPORT = ("report", "Report")
    DATA_WINDOW = ("data_window", "Data window")


ALL_BASE_UI_TYPES: frozenset[BaseUiType] = frozenset(BaseUiType)


__all__ = ["ALL_BASE_UI_TYPES", "BaseUiType", "StrChoices"]


# The End
