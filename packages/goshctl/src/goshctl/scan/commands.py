from __future__ import annotations

from dataclasses import dataclass

from .tokens import Position

COMMAND_SIGIL = "%"
RESULT_SIGIL = "#"
_COMMAND_INFIX = f" {COMMAND_SIGIL} "


@dataclass(frozen=True)
class CommandRequest:
    position: Position
    start: int
    end: int
    prompt: str


def extract_prompt(literal: str) -> str | None:
    """Return the command on the first line of a ``// % cmd`` or ``/* % cmd`` comment."""
    body = literal[2:]
    if not body.startswith(_COMMAND_INFIX):
        return None
    first_line, newline, _ = body[len(_COMMAND_INFIX):].partition("\n")
    if literal.startswith("/*") and not newline and first_line.endswith("*/"):
        first_line = first_line[:-2]
    return first_line.strip()


def render_result(prompt: str, output: str) -> str:
    return f"/* {RESULT_SIGIL} {prompt}\n{output}*/"
