# -*- coding: utf-8 -*-
"""
Test the push-then-drain driver.
"""
from unittest import mock
import pytest

from popstack import run, drain, format_popped
from popstack.stack import Stack, EmptyContainerError


def test_format_popped():
    assert format_popped(3) == "Popped: 3"

def test_run_prints(capsys):
    assert run() == [3, 2, 1]
    out, err = capsys.readouterr()
    assert out == "Popped: 3\nPopped: 2\nPopped: 1\n"

def test_run_sink(sink):
    run(sink)
    assert sink.lines == ["Popped: 3", "Popped: 2", "Popped: 1"]

def test_drain_empties_stack(filled_stack, sink):
    assert drain(filled_stack, sink) == [3, 2, 1]
    assert filled_stack.is_empty()

def test_drain_empty_stack(stack):
    sink = mock.Mock()
    assert drain(stack, sink) == []
    assert not sink.called

def test_run_propagates_empty_error():
    """A pop on an empty stack during the run is surfaced, not swallowed"""
    with mock.patch.object(Stack, "is_empty", return_value=False):
        with pytest.raises(EmptyContainerError):
            run(mock.Mock())
