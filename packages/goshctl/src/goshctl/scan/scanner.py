from __future__ import annotations

from typing import TYPE_CHECKING, Iterator

from ..core.errors import ScopeUnderflowError
from ..core.logging import log_event
from .commands import CommandRequest, extract_prompt
from .directives import parse_directive
from .permissions import PermissionStack
from .tokens import SourceFile, TokenKind, tokenize

if TYPE_CHECKING:
    from ..core.context import RunContext


def scan_source(source: SourceFile, ctx: RunContext, stack: PermissionStack | None = None) -> Iterator[CommandRequest]:
    """Walk the token stream and yield permitted command requests in document order.

    Requests are yielded as soon as they are found so callers can dispatch
    them while the rest of the file is still being scanned.
    """
    allowed = stack if stack is not None else PermissionStack()
    for token in tokenize(source.data):
        if token.kind is TokenKind.EOF:
            break
        if token.kind is TokenKind.BRACE_OPEN:
            allowed.push()
            continue
        if token.kind is TokenKind.BRACE_CLOSE:
            try:
                allowed.pop()
            except ScopeUnderflowError as exc:
                position = source.position(token.offset)
                raise ScopeUnderflowError(f"{position}: unbalanced closing brace") from exc
            continue

        directive = parse_directive(token, source)
        if directive is not None:
            log_event(
                ctx,
                "info",
                "directive",
                directive.kind.value,
                position=str(directive.position),
                allowed=directive.allowed,
            )
            allowed.set_top(directive.allowed)
            continue

        if not allowed.top():
            continue
        prompt = extract_prompt(token.literal)
        if prompt is None:
            continue
        position = source.position(token.offset)
        log_event(ctx, "debug", "scan", "command", position=str(position), prompt=prompt)
        yield CommandRequest(position=position, start=token.offset, end=token.end, prompt=prompt)
