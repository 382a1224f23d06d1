# -*- coding: utf-8 -*-
"""
portalcontent

Navigation content accessible to web portal users.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .conf import ContentSettings, configure, current_settings
from .core import *  # noqa: F401,F403
from .core import __all__ as _core_all

__all__ = ["ContentSettings", "configure", "current_settings", *_core_all]


# The End
