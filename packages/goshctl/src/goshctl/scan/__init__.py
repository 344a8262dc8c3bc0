"""Token-level scanning of source files for directives and command comments."""

from __future__ import annotations

from .commands import CommandRequest, extract_prompt
from .directives import Directive, DirectiveKind, parse_directive
from .permissions import PermissionStack
from .scanner import scan_source
from .tokens import Position, SourceFile, Token, TokenKind, tokenize

__all__ = [
    "CommandRequest",
    "Directive",
    "DirectiveKind",
    "PermissionStack",
    "Position",
    "SourceFile",
    "Token",
    "TokenKind",
    "extract_prompt",
    "parse_directive",
    "scan_source",
    "tokenize",
]
