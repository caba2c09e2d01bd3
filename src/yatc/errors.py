"""Error types with formatted source context."""

from __future__ import annotations

from yatc.tokens import Position, Token, position_at


def _snippet(
    message: str, source: str | None, offset: int, width: int, filename: str
) -> str:
    """Render a compiler-style diagnostic pointing at offset in source."""
    if source is None:
        return f"error: {message}\n --> {filename}: offset {offset}"

    pos = position_at(source, offset)
    lines = source.split("\n")
    source_line = lines[pos.line - 1] if pos.line - 1 < len(lines) else ""

    # Underline stays within the line, at least one caret
    underline_len = max(1, min(width, len(source_line) - pos.column + 1))

    pad = " " * (pos.column - 1)
    carets = "^" * underline_len

    line_num = str(pos.line)
    gutter_width = len(line_num) + 1

    blank_gutter = " " * gutter_width + "|"
    line_gutter = f"{line_num:>{gutter_width - 1}} |"

    return (
        f"error: {message}\n"
        f"{' ' * gutter_width}--> {filename}:{pos.line}:{pos.column}\n"
        f"{blank_gutter}\n"
        f"{line_gutter} {source_line}\n"
        f"{blank_gutter} {pad}{carets}"
    )


class LexError(Exception):
    """Raised on the first lexing error, with offset and source context."""

    def __init__(self, message: str, offset: int, source: str) -> None:
        self.message = message
        self.offset = offset
        self.source = source
        super().__init__(self.format())

    @property
    def position(self) -> Position:
        return position_at(self.source, self.offset)

    def format(self, filename: str = "<input>") -> str:
        return _snippet(self.message, self.source, self.offset, 1, filename)


class UnterminatedStringError(LexError):
    """A string literal was opened but the input ended before its closing quote."""

    def __init__(self, offset: int, source: str) -> None:
        super().__init__(f"unterminated string at position {offset}", offset, source)


class DanglingSlashError(LexError):
    """A lone '/' is the last character of the input."""

    def __init__(self, offset: int, source: str) -> None:
        super().__init__(f"dangling '/' at position {offset}", offset, source)


class ParseError(Exception):
    """Raised on the first syntax error, with the offending token.

    ``token`` is None when the error happened at end of input; ``offset`` then
    points just past the last consumed token.
    """

    def __init__(
        self,
        message: str,
        token: Token | None,
        source: str | None = None,
        offset: int | None = None,
    ) -> None:
        self.message = message
        self.token = token
        self.source = source
        if offset is None:
            offset = token.span.start if token is not None else 0
        self.offset = offset
        super().__init__(self.format())

    @property
    def position(self) -> Position | None:
        if self.source is None:
            return None
        return position_at(self.source, self.offset)

    def format(self, filename: str = "<input>") -> str:
        width = self.token.span.length if self.token is not None else 1
        return _snippet(self.message, self.source, self.offset, width, filename)


def _describe(token: Token | None) -> str:
    if token is None:
        return "end of input"
    return f"{token.kind.name.lower()} {token.literal!r}"


class ExpectedFactorError(ParseError):
    def __init__(
        self, token: Token | None, source: str | None = None, offset: int | None = None
    ) -> None:
        super().__init__(f"expected factor, found {_describe(token)}", token, source, offset)


class ExpectedTermError(ParseError):
    """The right-hand operand of '+' or '-' is missing."""

    def __init__(
        self,
        token: Token | None,
        operator: Token,
        source: str | None = None,
        offset: int | None = None,
    ) -> None:
        self.operator = operator
        super().__init__(
            f"expected term after '{operator.literal}', found {_describe(token)}",
            token,
            source,
            offset,
        )


class ExpectedFactorAfterOperatorError(ParseError):
    """The right-hand operand of '*' or '/' is missing."""

    def __init__(
        self,
        token: Token | None,
        operator: Token,
        source: str | None = None,
        offset: int | None = None,
    ) -> None:
        self.operator = operator
        super().__init__(
            f"expected factor after '{operator.literal}', found {_describe(token)}",
            token,
            source,
            offset,
        )


class UnclosedParenError(ParseError):
    def __init__(
        self,
        token: Token | None,
        opening: Token,
        source: str | None = None,
        offset: int | None = None,
    ) -> None:
        self.opening = opening
        super().__init__(
            f"unclosed '(' opened at position {opening.span.start}, "
            f"found {_describe(token)}",
            token,
            source,
            offset,
        )


class TrailingTokensError(ParseError):
    def __init__(self, token: Token, source: str | None = None) -> None:
        super().__init__(
            f"unexpected {_describe(token)} after complete expression", token, source
        )


class UnexpectedTokenError(ParseError):
    def __init__(self, token: Token, source: str | None = None) -> None:
        super().__init__(f"unexpected {_describe(token)}", token, source)


class NestingTooDeepError(ParseError):
    def __init__(self, token: Token, limit: int, source: str | None = None) -> None:
        self.limit = limit
        super().__init__(
            f"parentheses nested deeper than {limit} levels", token, source
        )
