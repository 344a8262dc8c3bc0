from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..core.errors import DirectiveSyntaxError
from .tokens import Position, SourceFile, Token

DIRECTIVE_PREFIX = "//gosh:"


class DirectiveKind(Enum):
    ALLOW = "ok"
    DENY = "deny"


@dataclass(frozen=True)
class Directive:
    kind: DirectiveKind
    position: Position

    @property
    def allowed(self) -> bool:
        return self.kind is DirectiveKind.ALLOW


def parse_directive(token: Token, source: SourceFile) -> Directive | None:
    """Return the directive carried by a comment token, if any.

    Raises DirectiveSyntaxError for any word other than ``ok`` or ``deny``.
    """
    if not token.literal.startswith(DIRECTIVE_PREFIX):
        return None
    word = token.literal[len(DIRECTIVE_PREFIX):].rstrip("\r")
    position = source.position(token.offset + len(DIRECTIVE_PREFIX))
    try:
        kind = DirectiveKind(word)
    except ValueError:
        raise DirectiveSyntaxError(
            f"{position}: unknown command: {word}",
            position=str(position),
            word=word,
        ) from None
    return Directive(kind=kind, position=position)
