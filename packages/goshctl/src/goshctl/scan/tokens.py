"""Minimal lexer for brace-delimited, C-family source.

Only braces and comments are surfaced; string, raw string and rune literals
are consumed so that braces or comment openers inside them are not reported.
Offsets are byte offsets into the file contents.
"""

from __future__ import annotations

import re
from bisect import bisect_right
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterator

_LEXEME_RE = re.compile(
    rb"""
    (?P<line_comment>//[^\n]*)
  | (?P<block_comment>/\*.*?(?:\*/|\Z))
  | (?P<string>"(?:[^"\\\n]|\\.)*")
  | (?P<raw_string>`[^`]*`)
  | (?P<rune>'(?:[^'\\\n]|\\.)*')
  | (?P<lbrace>\{)
  | (?P<rbrace>\})
  | (?P<other>[^/"'`{}]+|.)
    """,
    re.VERBOSE | re.DOTALL,
)


class TokenKind(Enum):
    BRACE_OPEN = "{"
    BRACE_CLOSE = "}"
    COMMENT = "comment"
    EOF = "eof"


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    offset: int
    end: int
    literal: str


@dataclass(frozen=True)
class Position:
    path: str
    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.path}:{self.line}:{self.column}"


@dataclass(frozen=True)
class SourceFile:
    path: Path
    data: bytes
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        starts.extend(m.end() for m in re.finditer(rb"\n", self.data))
        object.__setattr__(self, "_line_starts", tuple(starts))

    def position(self, offset: int) -> Position:
        index = bisect_right(self._line_starts, offset) - 1
        return Position(
            path=str(self.path),
            offset=offset,
            line=index + 1,
            column=offset - self._line_starts[index] + 1,
        )


def tokenize(data: bytes) -> Iterator[Token]:
    """Yield brace and comment tokens in document order, then one EOF token."""
    for match in _LEXEME_RE.finditer(data):
        group = match.lastgroup
        if group == "lbrace":
            yield Token(TokenKind.BRACE_OPEN, match.start(), match.end(), "{")
        elif group == "rbrace":
            yield Token(TokenKind.BRACE_CLOSE, match.start(), match.end(), "}")
        elif group in ("line_comment", "block_comment"):
            literal = match.group().decode("utf-8", errors="surrogateescape")
            yield Token(TokenKind.COMMENT, match.start(), match.end(), literal)
    yield Token(TokenKind.EOF, len(data), len(data), "")
