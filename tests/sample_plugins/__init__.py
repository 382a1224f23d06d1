# -*- coding: utf-8 -*-
"""
sample_plugins

Plugin modules loaded by the plugin registry tests.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
