from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.errors import ScriptError
from ..core.exit_codes import ERR_INTERNAL


@dataclass(frozen=True)
class Edit:
    start: int
    end: int
    text: bytes


def apply_edits(data: bytes, edits: Iterable[Edit]) -> bytes:
    """Splice sorted, non-overlapping edits into ``data``."""
    out = bytearray()
    cursor = 0
    for edit in edits:
        if edit.start < cursor or edit.end < edit.start or edit.end > len(data):
            raise ScriptError(
                f"edit [{edit.start}, {edit.end}) overlaps or is out of order (cursor={cursor}, size={len(data)})",
                ERR_INTERNAL,
                "internal",
            )
        out += data[cursor:edit.start]
        out += edit.text
        cursor = edit.end
    out += data[cursor:]
    return bytes(out)
