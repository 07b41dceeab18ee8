# -*- coding: utf-8 -*-
"""
Py.test fixtures providing stacks and a recording message sink.
"""
import pytest

from popstack.stack import Stack


class RecordingSink(object):
    """Message sink that keeps every line it receives."""

    def __init__(self):
        self.lines = []

    def __call__(self, line):
        self.lines.append(line)


@pytest.fixture
def stack():
    return Stack()

@pytest.fixture
def filled_stack():
    """Return a stack with 1, 2 and 3 pushed in that order."""
    s = Stack()
    for value in (1, 2, 3):
        s.push(value)
    return s

@pytest.fixture
def sink():
    return RecordingSink()

@pytest.fixture
def clean_env(monkeypatch):
    monkeypatch.delenv("POPSTACK_LOG_LEVEL", raising=False)
    return monkeypatch
