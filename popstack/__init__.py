# -*- coding: utf-8 -*-
"""
PopStack
-----------------------

Provides a last-in-first-out :class:`Stack` and a driver that pushes a fixed
sequence of integers onto it and pops them back, reporting each value.
"""
# pylint: disable=wildcard-import
from .stack import *
from .driver import *

__version__ = 0.1
