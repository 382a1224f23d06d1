# -*- coding: utf-8 -*-
"""
models

Tortoise ORM models of the portal configuration database.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .ui_object import UiObject

__all__ = ["UiObject"]


# The End
