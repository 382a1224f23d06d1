# -*- coding: utf-8 -*-
"""
api

HTTP endpoints exposing user navigation content.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .content import (
    ContentItemSchema,
    ContentRouter,
    ContentSnapshotSchema,
    build_content_router,
)

__all__ = [
    "ContentItemSchema",
    "ContentRouter",
    "ContentSnapshotSchema",
    "build_content_router",
]


# The End
