"""Per-file pipeline and the concurrent fan-out across files."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from functools import partial
from pathlib import Path
from typing import TYPE_CHECKING, Iterable

from .core.discovery import display_path
from .core.errors import ScriptError, SourceIOError, is_file_scoped
from .core.exit_codes import OK
from .core.logging import log_event
from .execution.edits import Edit, apply_edits
from .execution.executor import OrderedTasks, collect_edits, execute_request
from .execution.formatter import reformat
from .scan.scanner import scan_source
from .scan.tokens import SourceFile

if TYPE_CHECKING:
    from .core.context import RunContext


@dataclass(frozen=True)
class FileOutcome:
    path: Path
    display: str
    status: str
    edits: int = 0
    output: bytes | None = None
    error: ScriptError | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass(frozen=True)
class RunReport:
    files: list[FileOutcome]

    @property
    def first_error(self) -> ScriptError | None:
        for outcome in self.files:
            if outcome.error is not None:
                return outcome.error
        return None

    @property
    def exit_code(self) -> int:
        err = self.first_error
        return err.code if err is not None else OK


async def process_file(path: Path, ctx: RunContext) -> FileOutcome:
    display = display_path(path, ctx.cwd)
    try:
        data = path.read_bytes()
    except OSError as exc:
        raise SourceIOError(f"{display}: {exc.strerror or exc}") from exc
    source = SourceFile(path=Path(display), data=data)

    tasks: OrderedTasks[Edit] = OrderedTasks()
    try:
        for request in scan_source(source, ctx):
            tasks.append(partial(execute_request, request, ctx))
    except BaseException:
        await tasks.abort()
        raise

    edits = await collect_edits(tasks, ctx)
    rewritten = apply_edits(source.data, edits)
    output = await reformat(Path(display), rewritten, ctx)
    changed = output != source.data
    if ctx.write and changed:
        try:
            path.write_bytes(output)
        except OSError as exc:
            raise SourceIOError(f"{display}: {exc.strerror or exc}") from exc
    log_event(ctx, "debug", "engine", "file-done", path=display, edits=len(edits), changed=changed)
    return FileOutcome(
        path=path,
        display=display,
        status="ok" if changed else "unchanged",
        edits=len(edits),
        output=output,
    )


async def _guarded(path: Path, ctx: RunContext) -> FileOutcome:
    try:
        return await process_file(path, ctx)
    except ScriptError as exc:
        if not is_file_scoped(exc):
            raise
        log_event(ctx, "error", "engine", "file-failed", path=display_path(path, ctx.cwd), kind=exc.kind, error=str(exc))
        return FileOutcome(path=path, display=display_path(path, ctx.cwd), status="error", error=exc)


async def run_files(paths: Iterable[Path], ctx: RunContext) -> RunReport:
    """Process every file concurrently; a directive syntax error cancels the rest."""
    tasks = [asyncio.ensure_future(_guarded(path, ctx)) for path in paths]
    try:
        outcomes = await asyncio.gather(*tasks)
    except BaseException:
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        raise
    return RunReport(files=list(outcomes))


def run(paths: Iterable[Path], ctx: RunContext) -> RunReport:
    return asyncio.run(run_files(list(paths), ctx))
