"""
Tests for ExecutionContext.
"""

import pytest

from resolvermap.context import ExecutionContext, noop_handler


def test_arg_returns_bound_value():
    ctx = ExecutionContext(source=None, args={"id": "1", "limit": 0})
    assert ctx.arg("id") == "1"
    assert ctx.arg("limit") == 0


def test_arg_missing_key():
    ctx = ExecutionContext(args={"id": "1"})
    assert ctx.arg("missing") is None


def test_arg_with_empty_or_absent_args():
    assert ExecutionContext().arg("missing") is None
    assert ExecutionContext(args={}).arg("missing") is None


def test_arg_default():
    assert ExecutionContext().arg("limit", 10) == 10
    assert ExecutionContext(args={"limit": None}).arg("limit", 10) is None


def test_context_is_immutable():
    ctx = ExecutionContext(source={"id": 1})
    with pytest.raises(AttributeError):
        ctx.source = {}  # type: ignore[misc]


def test_noop_handler():
    assert noop_handler(ExecutionContext(source={"x": 1})) is None
