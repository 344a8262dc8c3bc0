from __future__ import annotations

from pathlib import Path
from typing import Iterable

from .errors import SourceIOError

EXCLUDED_PARTS = {
    ".git",
    ".hg",
    ".svn",
    ".venv",
    "__pycache__",
    "node_modules",
    "testdata",
    "vendor",
}


def _excluded(rel: Path) -> bool:
    for part in rel.parts[:-1]:
        if part in EXCLUDED_PARTS or part.startswith((".", "_")):
            return True
    return False


def iter_files(root: Path, suffixes: Iterable[str]) -> list[Path]:
    wanted = set(suffixes)
    out: list[Path] = []
    for path in sorted(root.rglob("*")):
        if not path.is_file() or path.suffix not in wanted:
            continue
        if _excluded(path.relative_to(root)):
            continue
        out.append(path)
    return out


def discover_files(args: Iterable[str], suffixes: Iterable[str], cwd: Path) -> list[Path]:
    """Expand file and directory arguments into an ordered, de-duplicated file list."""
    wanted = tuple(suffixes)
    seen: set[Path] = set()
    out: list[Path] = []
    for arg in args:
        path = Path(arg)
        if not path.is_absolute():
            path = cwd / path
        if path.is_dir():
            found = iter_files(path, wanted)
        elif path.is_file():
            found = [path]
        else:
            raise SourceIOError(f"{arg}: no such file or directory")
        for item in found:
            key = item.resolve()
            if key in seen:
                continue
            seen.add(key)
            out.append(item)
    return out


def display_path(path: Path, cwd: Path) -> str:
    try:
        return str(path.relative_to(cwd))
    except ValueError:
        return str(path)
