# -*- coding: utf-8 -*-
"""
core

Building blocks for assembling user navigation content.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .aggregator import AggregationResult, ContentAggregator
from .choices import ALL_BASE_UI_TYPES, BaseUiType
from .context import UserContext
from .entities import ContentItem, ContentSnapshot, UiObjectProperties
from .exceptions import (
    AggregationError,
    ContentError,
    InvalidArgumentError,
    PluginLoadError,
    RepositoryNotLoadedError,
)
from .plugins import PluginRegistry, PluginSpec
from .repository import (
    ConfigurationRepository,
    MemoryUiObjectRepository,
    TortoiseUiObjectRepository,
)
from .rights import FULL_RIGHTS, NO_RIGHTS, ObjectRights, RightsResolver, UserRights
from .specs import SpecRegistry, UiObjectSpec, data_window_spec, report_spec

__all__ = [
    "ALL_BASE_UI_TYPES",
    "AggregationError",
    "AggregationResult",
    "BaseUiType",
    "ConfigurationRepository",
    "ContentAggregator",
    "ContentError",
    "ContentItem",
    "ContentSnapshot",
    "FULL_RIGHTS",
    "InvalidArgumentError",
    "MemoryUiObjectRepository",
    "NO_RIGHTS",
    "ObjectRights",
    "PluginLoadError",
    "PluginRegistry",
    "PluginSpec",
    "RepositoryNotLoadedError",
    "RightsResolver",
    "SpecRegistry",
    "TortoiseUiObjectRepository",
    "UiObjectProperties",
    "UiObjectSpec",
    "UserContext",
    "UserRights",
    "data_window_spec",
    "report_spec",
]


# The End
