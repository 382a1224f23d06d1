# -*- coding: utf-8 -*-
"""
context

Per-session data the aggregator needs to know about a user.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .plugins import PluginSpec
from .rights import RightsResolver
from .specs import SpecRegistry


@dataclass(frozen=True)
class UserContext:
    """Collaborators bound to a logged-in user.

    ``None`` disables the matching content source: without ``rights`` or
    ``specs`` nothing is taken from the configuration repository, without
    ``plugins`` nothing is taken from plugins.
    """

    user_id: str | int | None = None
    rights: RightsResolver | None = None
    specs: SpecRegistry | None = None
    plugins: Iterable[PluginSpec] | None = None


__all__ = ["UserContext"]


# The End
