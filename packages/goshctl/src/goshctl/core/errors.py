from __future__ import annotations

from dataclasses import dataclass

from .exit_codes import ERR_DIRECTIVE, ERR_EXEC, ERR_FORMAT, ERR_INTERNAL, ERR_IO


@dataclass
class ScriptError(Exception):
    message: str
    code: int
    kind: str = "generic_error"

    def __str__(self) -> str:
        return self.message


@dataclass
class DirectiveSyntaxError(ScriptError):
    """Unknown word after the directive prefix; aborts the whole run."""

    code: int = ERR_DIRECTIVE
    kind: str = "directive_syntax"
    position: str = ""
    word: str = ""


@dataclass
class CommandExecutionError(ScriptError):
    code: int = ERR_EXEC
    kind: str = "command_execution"
    position: str = ""


@dataclass
class ReformatError(ScriptError):
    code: int = ERR_FORMAT
    kind: str = "reformat"


@dataclass
class ScopeUnderflowError(ScriptError):
    code: int = ERR_INTERNAL
    kind: str = "scope_underflow"


@dataclass
class SourceIOError(ScriptError):
    code: int = ERR_IO
    kind: str = "io"


def is_file_scoped(exc: BaseException) -> bool:
    """Errors recovered at the per-file boundary instead of aborting the run."""
    return isinstance(exc, ScriptError) and not isinstance(exc, DirectiveSyntaxError)
