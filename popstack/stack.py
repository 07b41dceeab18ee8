# -*- coding: utf-8 -*-
"""
Provides the :class:`Stack` container and the :exc:`EmptyContainerError`
raised when removing from an empty one.
"""
import logging

__all__ = ["Stack", "EmptyContainerError"]

logger = logging.getLogger(__name__)


class EmptyContainerError(IndexError):
    """Raised by :meth:`Stack.pop` and :attr:`Stack.top` when the stack holds
    no elements."""


class Stack(list):
    """A :class:`list` with `top`, `pop`, `push` and `is_empty` to give it a
    stack-like API. The end of the list is the top of the stack.

    Only `push`, `pop` and `top` keep the LIFO order; the inherited
    :class:`list` methods such as `insert` or `remove` do not.

    :Example:

    >>> s = Stack()
    >>> s.push(1)
    >>> s.push(2)
    >>> s.pop()
    2
    >>> s.is_empty()
    False
    """
    __slots__ = ()

    @property
    def top(self):
        """Return the last element without removing it.

        :raises EmptyContainerError: if the stack is empty
        """
        if not self:
            raise EmptyContainerError("top of an empty stack")
        return self[-1]

    def push(self, value):
        """Insert ``value`` at the top of the stack."""
        list.append(self, value)
        logger.debug("push %r (size %d)", value, len(self))

    def pop(self):
        """:meth:`list.pop` without an index, raising
        :exc:`EmptyContainerError` instead of returning a default when the
        stack is empty."""
        if not self:
            raise EmptyContainerError("pop from an empty stack")
        value = list.pop(self)
        logger.debug("pop %r (size %d)", value, len(self))
        return value

    def is_empty(self):
        return len(self) == 0
