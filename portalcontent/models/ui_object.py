# -*- coding: utf-8 -*-
"""
ui_object

Configuration database table of reports and data windows.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from tortoise import fields
from tortoise.models import Model

from ..core.choices import BaseUiType
from ..core.entities import UiObjectProperties


class UiObject(Model):
    """Report or data window configured for the portal."""

    id = fields.IntField(primary_key=True)
    type_code = fields.CharField(max_length=100, db_index=True)
    title = fields.CharField(max_length=255, default="")
    base_type = fields.CharEnumField(BaseUiType, max_length=20, db_index=True)

    class Meta:
        table = "ui_object"
        verbose_name = "UI object"
        verbose_name_plural = "UI objects"

    def __str__(self) -> str:
        return self.title or f"{self.type_code}#{self.id}"

    def to_properties(self) -> UiObjectProperties:
        """Return an immutable snapshot of the row."""

        return UiObjectProperties(
            id=self.id,
            type_code=self.type_code,
            title=self.title or "",
            base_type=BaseUiType(self.base_type),
        )


# The End
