from __future__ import annotations

from pathlib import Path

import pytest

from goshctl.core.discovery import discover_files, display_path
from goshctl.core.errors import SourceIOError


def _touch(root: Path, rel: str) -> Path:
    path = root / rel
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("package p\n", encoding="utf-8")
    return path


def test_directories_expand_to_sorted_source_files(tmp_path: Path) -> None:
    _touch(tmp_path, "b.go")
    _touch(tmp_path, "a.go")
    _touch(tmp_path, "sub/c.go")
    _touch(tmp_path, "notes.txt")
    _touch(tmp_path, "vendor/v.go")
    _touch(tmp_path, "testdata/t.go")
    _touch(tmp_path, ".hidden/h.go")
    _touch(tmp_path, "_skip/s.go")
    found = discover_files(["."], [".go"], tmp_path)
    assert [display_path(p, tmp_path) for p in found] == ["a.go", "b.go", "sub/c.go"]


def test_explicit_files_keep_argument_order_without_duplicates(tmp_path: Path) -> None:
    _touch(tmp_path, "a.go")
    _touch(tmp_path, "z.tmpl")
    found = discover_files(["z.tmpl", "a.go", ".", "a.go"], [".go"], tmp_path)
    assert [display_path(p, tmp_path) for p in found] == ["z.tmpl", "a.go"]


def test_missing_argument_is_an_error(tmp_path: Path) -> None:
    with pytest.raises(SourceIOError) as info:
        discover_files(["nope.go"], [".go"], tmp_path)
    assert "nope.go" in str(info.value)
