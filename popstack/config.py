# -*- coding: utf-8 -*-
"""
Runtime settings read from environment variables.
"""
import logging
import os

ENV_PREFIX = "POPSTACK_"

DEFAULT_LOG_LEVEL = logging.WARNING


class LogConfig(object):

    def __init__(self, level=DEFAULT_LOG_LEVEL):
        self.level = level

    @classmethod
    def from_env(cls):
        """Create a ``LogConfig`` from the following environment variables:
        POPSTACK_LOG_LEVEL

        Unknown level names fall back to ``DEFAULT_LOG_LEVEL``.
        """
        name = os.environ.get(ENV_PREFIX + "LOG_LEVEL")
        if not name:
            return cls()
        level = logging.getLevelName(name.strip().upper())
        if not isinstance(level, int):
            return cls()
        return cls(level=level)

    def basic_config(self):
        # pylint: disable=missing-docstring
        return {"level": self.level,
                "format": "%(levelname)s:%(name)s:%(message)s"}
