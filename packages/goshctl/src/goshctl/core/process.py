from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from .logging import log_event

if TYPE_CHECKING:
    from .context import RunContext


@dataclass(frozen=True)
class CommandResult:
    code: int
    stdout: bytes
    stderr: bytes
    duration_ms: int

    @property
    def ok(self) -> bool:
        return self.code == 0

    def stderr_tail(self, limit: int = 400) -> str:
        text = self.stderr.decode("utf-8", errors="replace").strip()
        return text[-limit:]


async def run_command(
    cmd: list[str],
    cwd: Path,
    stdin: bytes | None = None,
    ctx: RunContext | None = None,
    action: str = "run-command",
) -> CommandResult:
    """Run ``cmd`` without blocking the event loop, feeding ``stdin`` when given."""
    started = time.monotonic()
    proc = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=cwd,
        stdin=asyncio.subprocess.PIPE if stdin is not None else asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
    )
    stdout, stderr = await proc.communicate(input=stdin)
    result = CommandResult(
        code=proc.returncode if proc.returncode is not None else -1,
        stdout=stdout or b"",
        stderr=stderr or b"",
        duration_ms=int((time.monotonic() - started) * 1000),
    )
    if ctx:
        log_event(
            ctx,
            "debug",
            "process",
            action,
            command=" ".join(cmd),
            cwd=str(cwd),
            code=result.code,
            duration_ms=result.duration_ms,
        )
    return result


async def run_shell(prompt: str, cwd: Path, shell: str = "sh", ctx: RunContext | None = None) -> CommandResult:
    return await run_command([shell, "-c", prompt], cwd, ctx=ctx, action="run-shell")
