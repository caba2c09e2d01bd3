"""yatc parser: validates a token stream against the expression grammar.

A hand-coded recursive descent parser with one token of lookahead and no
backtracking. It only judges derivability; no tree is built.

    program     ::= expression .
    expression  ::= term expression' .
    expression' ::= ("+" | "-") term expression' | e .
    term        ::= factor term' .
    term'       ::= ("*" | "/") factor term' | e .
    factor      ::= "(" expression ")" | Identifier | Integer | Float | String .
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable

from yatc.errors import (
    ExpectedFactorAfterOperatorError,
    ExpectedFactorError,
    ExpectedTermError,
    NestingTooDeepError,
    TrailingTokensError,
    UnclosedParenError,
    UnexpectedTokenError,
)
from yatc.tokens import Token, TokenKind

DEFAULT_MAX_DEPTH = 200

_OPERAND_KINDS = frozenset(
    {TokenKind.IDENTIFIER, TokenKind.INTEGER, TokenKind.FLOAT, TokenKind.STRING}
)


def _is_operator(tok: Token | None, *literals: str) -> bool:
    return tok is not None and tok.kind == TokenKind.OPERATOR and tok.literal in literals


def _is_symbol(tok: Token | None, literal: str) -> bool:
    return tok is not None and tok.kind == TokenKind.SYMBOL and tok.literal == literal


def _starts_factor(tok: Token | None) -> bool:
    return tok is not None and (tok.kind in _OPERAND_KINDS or _is_symbol(tok, "("))


class Parser:
    """Recursive descent parser for yatc token streams."""

    def __init__(
        self,
        tokens: Iterable[Token],
        source: str | None = None,
        max_depth: int | None = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._tokens: deque[Token] = deque(tokens)
        self._source = source
        self._max_depth = max_depth
        self._token: Token | None = None
        self._end = 0  # end offset of the last consumed token
        self._open: list[Token] = []  # unclosed "(" tokens, innermost last

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def _next_token(self) -> None:
        if self._token is not None:
            self._end = self._token.span.end
        self._token = self._tokens.popleft() if self._tokens else None

    def _error_offset(self) -> int | None:
        """Offset for errors raised at end of input, else None (use the token)."""
        return self._end if self._token is None else None

    # ------------------------------------------------------------------
    # Productions
    # ------------------------------------------------------------------

    # program ::= expression .
    def parse(self) -> None:
        self._next_token()
        try:
            self._parse_expression()
        except RecursionError:
            # Nesting outran the interpreter stack before any configured limit
            if not self._open:
                raise
            raise NestingTooDeepError(
                self._open[-1], len(self._open) - 1, self._source
            ) from None
        if self._token is not None:
            raise TrailingTokensError(self._token, self._source)

    # expression ::= term expression' .
    def _parse_expression(self) -> None:
        self._parse_term()
        self._parse_expression_prime()

    # expression' ::= + term expression' | - term expression' | e .
    def _parse_expression_prime(self) -> None:
        while _is_operator(self._token, "+", "-"):
            operator = self._token
            self._next_token()
            if not _starts_factor(self._token):
                raise ExpectedTermError(
                    self._token, operator, self._source, self._error_offset()
                )
            self._parse_term()

        if self._token is None or _is_symbol(self._token, ")"):
            return
        raise UnexpectedTokenError(self._token, self._source)

    # term ::= factor term' .
    def _parse_term(self) -> None:
        self._parse_factor()
        self._parse_term_prime()

    # term' ::= * factor term' | / factor term' | e .
    def _parse_term_prime(self) -> None:
        while _is_operator(self._token, "*", "/"):
            operator = self._token
            self._next_token()
            if not _starts_factor(self._token):
                raise ExpectedFactorAfterOperatorError(
                    self._token, operator, self._source, self._error_offset()
                )
            self._parse_factor()

        if (
            self._token is None
            or _is_symbol(self._token, ")")
            or _is_operator(self._token, "+", "-")
        ):
            return
        raise UnexpectedTokenError(self._token, self._source)

    # factor ::= "(" expression ")" | Ident | Integer | Float | Str .
    def _parse_factor(self) -> None:
        tok = self._token

        if _is_symbol(tok, "("):
            self._enter(tok)
            self._next_token()
            if not _starts_factor(self._token):
                raise ExpectedFactorError(self._token, self._source, self._error_offset())
            self._parse_expression()
            if not _is_symbol(self._token, ")"):
                raise UnclosedParenError(
                    self._token, tok, self._source, self._error_offset()
                )
            self._next_token()
            self._open.pop()
            return

        if tok is not None and tok.kind in _OPERAND_KINDS:
            self._next_token()
            return

        raise ExpectedFactorError(tok, self._source, self._error_offset())

    def _enter(self, paren: Token) -> None:
        self._open.append(paren)
        if self._max_depth is not None and len(self._open) > self._max_depth:
            raise NestingTooDeepError(paren, self._max_depth, self._source)


def parse(
    tokens: Iterable[Token],
    source: str | None = None,
    *,
    max_depth: int | None = DEFAULT_MAX_DEPTH,
) -> None:
    """Validate tokens as a single yatc expression.

    Returns None on success and raises a ParseError subclass on the first
    syntax error. Pass the original source to get line/column context in
    error messages.
    """
    Parser(tokens, source, max_depth).parse()
