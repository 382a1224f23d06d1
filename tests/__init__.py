# -*- coding: utf-8 -*-
"""
tests

Test-suite for the portal content package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""


# The End
