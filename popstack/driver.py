# -*- coding: utf-8 -*-
"""
Drives a :class:`~popstack.stack.Stack`: pushes a fixed sequence of values and
pops them back, handing one line per value to a message sink.
"""
import logging

from .stack import Stack

__all__ = ["run", "drain", "format_popped"]

logger = logging.getLogger(__name__)

# pushed in this order, popped in reverse
VALUES = (1, 2, 3)


def format_popped(value):
    return "Popped: {}".format(value)


def drain(stack, sink):
    """Pop every element of ``stack`` and pass the formatted line for each to
    ``sink``.

    :param stack: a :class:`~popstack.stack.Stack`, empty on return
    :param sink: callable receiving one :class:`str` per popped value
    :return: a :class:`list` of the popped values, in pop order
    """
    popped = []
    while not stack.is_empty():
        value = stack.pop()
        sink(format_popped(value))
        popped.append(value)
    logger.debug("drained %d values", len(popped))
    return popped


def run(sink=None):
    """Push ``1``, ``2`` and ``3`` onto a new stack, then drain it.

    :Example:

    >>> run()
    Popped: 3
    Popped: 2
    Popped: 1
    [3, 2, 1]

    :param sink: callable receiving each output line, defaults to :func:`print`
    """
    if sink is None:
        sink = print
    stack = Stack()
    for value in VALUES:
        stack.push(value)
    return drain(stack, sink)
