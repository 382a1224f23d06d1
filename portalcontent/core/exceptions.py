# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for user content aggregation.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations


class ContentError(Exception):
    """Base class for portal content exceptions."""


class InvalidArgumentError(ContentError, ValueError):
    """Raised when a required collaborator or argument is missing."""

    def __init__(self, name: str, detail: str | None = None) -> None:
        super().__init__(detail or f"Argument {name!r} is required")
        self.name = name


class AggregationError(ContentError):
    """Raised when user content could not be assembled completely."""


class RepositoryNotLoadedError(ContentError):
    """Raised when a repository snapshot is read before it was loaded."""


class PluginLoadError(ContentError):
    """Raised when a plugin module cannot provide its specification."""


__all__ = [
    "AggregationError",
    "ContentError",
    "InvalidArgumentError",
    "PluginLoadError",
    "RepositoryNotLoadedError",
]


# The End
