"""Token kinds, data structures, and word classification helpers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum, auto


class TokenKind(Enum):
    SYMBOL = auto()  # { } ( ) ; ,
    KEYWORD = auto()  # let if else for fn return
    OPERATOR = auto()  # + - * / = > <
    IDENTIFIER = auto()  # any word nothing else claims
    INTEGER = auto()  # 32-bit signed
    FLOAT = auto()  # 32-bit float syntax, incl. inf/nan
    STRING = auto()  # "..." including both quotes


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based code point offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range as a code point offset and length."""

    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token and the exact source text it covers."""

    kind: TokenKind
    literal: str
    span: Span


def position_at(source: str, offset: int) -> Position:
    """Return the line/column Position of a code point offset in source."""
    offset = max(0, min(offset, len(source)))
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)


_SYMBOLS = frozenset({"{", "}", "(", ")", ";", ","})
_OPERATORS = frozenset({"+", "-", "*", "/", "=", ">", "<"})
_KEYWORDS = frozenset({"let", "if", "else", "for", "fn", "return"})

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def is_blank(ch: str) -> bool:
    """Return True if ch separates words (space or newline only)."""
    return ch == " " or ch == "\n"


def is_symbol(word: str) -> bool:
    return word in _SYMBOLS


def is_operator(word: str) -> bool:
    return word in _OPERATORS


def is_keyword(word: str) -> bool:
    return word in _KEYWORDS


def is_integer(word: str) -> bool:
    """Return True if word is a decimal literal within the 32-bit signed range."""
    if _INTEGER_RE.fullmatch(word) is None:
        return False
    # Anything past 10 significant digits is out of range; skip the conversion
    if len(word.lstrip("+-").lstrip("0")) > 10:
        return False
    return _I32_MIN <= int(word) <= _I32_MAX


def is_float(word: str) -> bool:
    """Return True if word is float literal syntax.

    Out-of-range magnitudes still count; they read as infinity.
    """
    return _FLOAT_RE.fullmatch(word) is not None


def classify(word: str) -> TokenKind:
    """Classify a blank-bounded word, highest priority first."""
    if is_symbol(word):
        return TokenKind.SYMBOL
    if is_operator(word):
        return TokenKind.OPERATOR
    if is_integer(word):
        return TokenKind.INTEGER
    if is_float(word):
        return TokenKind.FLOAT
    if is_keyword(word):
        return TokenKind.KEYWORD
    return TokenKind.IDENTIFIER
