from __future__ import annotations

import asyncio
from pathlib import Path

import pytest

from goshctl.core.errors import ReformatError
from goshctl.execution.formatter import reformat


def _reformat(data: bytes, ctx) -> bytes:
    return asyncio.run(reformat(Path("a.go"), data, ctx))


def test_disabled_formatter_passes_through(make_ctx) -> None:
    assert _reformat(b"x  :=  1\n", make_ctx(formatter=())) == b"x  :=  1\n"


def test_formatter_output_replaces_buffer(make_ctx) -> None:
    ctx = make_ctx(formatter=("tr", "a-z", "A-Z"))
    assert _reformat(b"package p\n", ctx) == b"PACKAGE P\n"


def test_formatter_rejection_is_a_reformat_error(make_ctx) -> None:
    ctx = make_ctx(formatter=("sh", "-c", "echo 'expected }' >&2; exit 2"))
    with pytest.raises(ReformatError) as info:
        _reformat(b"package p\n", ctx)
    assert "a.go" in str(info.value)
    assert "expected }" in str(info.value)


def test_missing_formatter_is_a_reformat_error(make_ctx) -> None:
    with pytest.raises(ReformatError) as info:
        _reformat(b"package p\n", make_ctx(formatter=("definitely-not-a-formatter",)))
    assert "unavailable" in str(info.value)
