"""--tokens dump of the lexer output."""

from __future__ import annotations

import sys
from typing import TextIO

from yatc.tokens import Token


def format_token(tok: Token) -> str:
    """One-line rendering: kind, literal, start and length."""
    return f"{tok.kind.name:<10} {tok.literal!r} @{tok.span.start}+{tok.span.length}"


def dump_tokens(tokens: list[Token], *, file: TextIO = sys.stdout) -> None:
    """Print the token stream to *file*, one token per line."""
    for tok in tokens:
        file.write(format_token(tok) + "\n")
