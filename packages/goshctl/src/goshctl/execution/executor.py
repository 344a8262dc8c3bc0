from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Awaitable, Callable, Generic, TypeVar

from ..core.errors import CommandExecutionError
from ..core.logging import log_event
from ..core.process import run_shell
from ..scan.commands import CommandRequest, render_result
from .edits import Edit

if TYPE_CHECKING:
    from ..core.context import RunContext

T = TypeVar("T")


class OrderedTasks(Generic[T]):
    """Tasks started on append whose results keep append order.

    Each task owns exactly one pre-reserved slot, so no locking is needed.
    ``wait`` lets every task finish before reporting the first failure by slot.
    """

    def __init__(self) -> None:
        self._slots: list[T | None] = []
        self._tasks: list[asyncio.Task[None]] = []

    def __len__(self) -> int:
        return len(self._slots)

    def append(self, factory: Callable[[], Awaitable[T]]) -> None:
        index = len(self._slots)
        self._slots.append(None)

        async def _fill() -> None:
            self._slots[index] = await factory()

        self._tasks.append(asyncio.ensure_future(_fill()))

    async def abort(self) -> None:
        for task in self._tasks:
            task.cancel()
        await asyncio.gather(*self._tasks, return_exceptions=True)

    async def wait(self) -> tuple[list[T], list[BaseException]]:
        outcomes = await asyncio.gather(*self._tasks, return_exceptions=True)
        errors = [item for item in outcomes if isinstance(item, BaseException)]
        if errors:
            return [], errors
        return [slot for slot in self._slots if slot is not None], []


async def execute_request(request: CommandRequest, ctx: RunContext) -> Edit:
    try:
        result = await run_shell(request.prompt, ctx.cwd, shell=ctx.shell, ctx=ctx)
    except OSError as exc:
        raise CommandExecutionError(
            f"{request.position}: {ctx.shell}: {exc.strerror or exc}",
            position=str(request.position),
        ) from exc
    if not result.ok:
        detail = f"exit status {result.code}"
        tail = result.stderr_tail()
        if tail:
            detail = f"{detail}: {tail}"
        raise CommandExecutionError(f"{request.position}: {detail}", position=str(request.position))
    output = result.stdout.decode("utf-8", errors="surrogateescape")
    text = render_result(request.prompt, output)
    return Edit(request.start, request.end, text.encode("utf-8", errors="surrogateescape"))


async def collect_edits(tasks: OrderedTasks[Edit], ctx: RunContext) -> list[Edit]:
    edits, errors = await tasks.wait()
    if not errors:
        return edits
    for exc in errors:
        log_event(ctx, "error", "engine", "command-failed", error=str(exc))
    raise errors[0]
