from __future__ import annotations

from ..core.errors import ScopeUnderflowError


class PermissionStack:
    """Per-scope command permission; the top entry is the innermost scope.

    A new scope starts as a copy of its parent, and only the top entry is ever
    overwritten, so a directive lasts until the end of its innermost scope.
    """

    def __init__(self, root: bool = False) -> None:
        self._entries: list[bool] = [root]

    def push(self) -> None:
        self._entries.append(self._entries[-1])

    def pop(self) -> None:
        if len(self._entries) == 1:
            raise ScopeUnderflowError("unbalanced closing brace: cannot pop the root scope")
        self._entries.pop()

    def top(self) -> bool:
        return self._entries[-1]

    def set_top(self, value: bool) -> None:
        self._entries[-1] = value

    @property
    def depth(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"PermissionStack({self._entries!r})"
