from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from goshctl.core.errors import ScopeUnderflowError
from goshctl.scan.permissions import PermissionStack

_OPS = st.lists(st.sampled_from(["{", "}", "ok", "deny"]), max_size=60)


def _apply(stack: PermissionStack, ops: list[str]) -> int:
    """Apply ops, ignoring closes that would underflow; returns open brace count."""
    depth = 0
    for op in ops:
        if op == "{":
            stack.push()
            depth += 1
        elif op == "}":
            if depth == 0:
                continue
            stack.pop()
            depth -= 1
        else:
            stack.set_top(op == "ok")
    return depth


def test_new_scope_inherits_parent_value() -> None:
    stack = PermissionStack()
    assert stack.top() is False
    stack.set_top(True)
    stack.push()
    assert stack.top() is True
    assert stack.depth == 2


def test_pop_root_scope_is_an_error() -> None:
    stack = PermissionStack()
    with pytest.raises(ScopeUnderflowError) as info:
        stack.pop()
    assert info.value.kind == "scope_underflow"
    assert stack.depth == 1


@given(_OPS)
def test_depth_tracks_brace_nesting(ops: list[str]) -> None:
    stack = PermissionStack()
    nesting = _apply(stack, ops)
    assert stack.depth == nesting + 1
    assert stack.depth >= 1


@given(st.booleans(), _OPS)
def test_inner_directives_do_not_leak(outer: bool, inner_ops: list[str]) -> None:
    stack = PermissionStack()
    stack.set_top(outer)
    stack.push()
    opened = _apply(stack, inner_ops)
    for _ in range(opened):
        stack.pop()
    stack.pop()
    assert stack.top() is outer
    assert stack.depth == 1
