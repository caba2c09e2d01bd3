"""yatc (Yet Another Tiny Compiler) expression language front end."""

from __future__ import annotations

from yatc.lexer import tokenize
from yatc.parser import DEFAULT_MAX_DEPTH, parse
from yatc.tokens import Token

__version__ = "0.1.0"


def check(source: str, *, max_depth: int | None = DEFAULT_MAX_DEPTH) -> list[Token]:
    """Lex and parse yatc source, returning the token stream on success."""
    tokens = tokenize(source)
    parse(tokens, source, max_depth=max_depth)
    return tokens
