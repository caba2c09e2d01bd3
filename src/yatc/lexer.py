"""yatc lexer: converts source text into a flat token stream.

Words are bounded by blanks (space or newline): ``let a = 5 ;`` becomes five
tokens, while ``a=5`` is a single identifier. Strings, ``/`` and ``//``
comments are the only constructs recognized without surrounding blanks.
"""

from __future__ import annotations

from yatc.errors import DanglingSlashError, UnterminatedStringError
from yatc.tokens import Span, Token, TokenKind, classify, is_blank


class Lexer:
    """Tokenize yatc source text into a list of Token objects."""

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._tokens: list[Token] = []

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while not self._finished():
            ch = self._peek()

            if is_blank(ch):
                self._pos += 1
            elif ch == '"':
                self._lex_string()
            elif ch == "/":
                self._lex_slash()
            else:
                self._lex_word()

        return self._tokens

    # ------------------------------------------------------------------
    # Position helpers
    # ------------------------------------------------------------------

    def _finished(self) -> bool:
        return self._pos >= len(self._source)

    def _peek(self, offset: int = 0) -> str:
        idx = self._pos + offset
        if idx < len(self._source):
            return self._source[idx]
        return ""

    def _skip_to(self, stop: str) -> None:
        """Advance until the current character is in stop, or end of input."""
        while not self._finished() and self._peek() not in stop:
            self._pos += 1

    def _emit(self, kind: TokenKind, start: int) -> Token:
        span = Span(start, self._pos - start)
        tok = Token(kind, self._source[start : self._pos], span)
        self._tokens.append(tok)
        return tok

    # ------------------------------------------------------------------
    # Token scanners
    # ------------------------------------------------------------------

    def _lex_string(self) -> None:
        start = self._pos
        self._pos += 1  # opening quote
        self._skip_to('"')
        if self._finished():
            raise UnterminatedStringError(start, self._source)
        self._pos += 1  # closing quote
        self._emit(TokenKind.STRING, start)

    def _lex_slash(self) -> None:
        start = self._pos
        if start == len(self._source) - 1:
            raise DanglingSlashError(start, self._source)

        if self._peek(1) == "/":
            # Line comment; the newline itself is skipped as a blank
            self._skip_to("\n")
            return

        self._pos += 1
        self._emit(TokenKind.OPERATOR, start)

    def _lex_word(self) -> None:
        start = self._pos
        self._skip_to(" \n")
        word = self._source[start : self._pos]
        self._emit(classify(word), start)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list.

    Raises a LexError subclass on the first lexical error.
    """
    return Lexer(source).tokenize()
