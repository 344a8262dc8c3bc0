from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from ..core.errors import ReformatError
from ..core.logging import log_event
from ..core.process import run_command

if TYPE_CHECKING:
    from ..core.context import RunContext


async def reformat(path: Path, data: bytes, ctx: RunContext) -> bytes:
    """Pipe rewritten source through the configured formatter; pass through when disabled."""
    if not ctx.formatting_enabled:
        return data
    cmd = list(ctx.formatter)
    try:
        result = await run_command(cmd, ctx.cwd, stdin=data, ctx=ctx, action="run-formatter")
    except OSError as exc:
        raise ReformatError(f"{path}: formatter {cmd[0]!r} unavailable: {exc.strerror or exc}") from exc
    if not result.ok:
        log_event(ctx, "debug", "format", "rejected", path=str(path), code=result.code)
        detail = result.stderr_tail() or f"exit status {result.code}"
        raise ReformatError(f"{path}: formatting rewritten source failed: {detail}")
    return result.stdout
