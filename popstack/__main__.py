# -*- coding: utf-8 -*-
"""
Command line entry point: ``popstack`` or ``python -m popstack``.
"""
import logging
import sys

from .config import LogConfig
from .driver import run

logger = logging.getLogger(__name__)


def main():
    logging.basicConfig(**LogConfig.from_env().basic_config())
    try:
        run()
    except Exception as e:
        logger.exception(e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
