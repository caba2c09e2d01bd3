"""Test error messages, position accuracy, and context snippets."""

import pytest

from yatc.errors import (
    DanglingSlashError,
    ExpectedFactorError,
    LexError,
    ParseError,
    UnterminatedStringError,
)
from yatc.lexer import tokenize
from yatc.parser import parse
from yatc.tokens import Span, Token, TokenKind


class TestLexErrorPositions:
    def test_dangling_slash_position(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("1 + 2 /")
        err = exc_info.value
        assert isinstance(err, DanglingSlashError)
        assert err.position.line == 1
        assert err.position.column == 7

    def test_error_on_second_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize('line one\n  "open')
        err = exc_info.value
        assert isinstance(err, UnterminatedStringError)
        assert err.offset == 11
        assert err.position.line == 2
        assert err.position.column == 3

    def test_message_mentions_offset(self):
        with pytest.raises(LexError, match="dangling '/' at position 2"):
            tokenize("1 /")

    def test_unterminated_message(self):
        with pytest.raises(LexError, match="unterminated string at position 0"):
            tokenize('"abc')


class TestLexErrorFormatting:
    def test_format_contains_line(self):
        with pytest.raises(LexError) as exc_info:
            tokenize('let x = "never closed')
        formatted = exc_info.value.format()
        assert 'let x = "never closed' in formatted

    def test_format_contains_carets(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("/")
        formatted = exc_info.value.format()
        assert "^" in formatted

    def test_format_contains_error_prefix(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("/")
        assert exc_info.value.format().startswith("error:")

    def test_format_contains_position(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("/")
        assert "<input>:1:1" in exc_info.value.format()

    def test_format_with_custom_filename(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("/")
        assert "expr.yatc:1:1" in exc_info.value.format("expr.yatc")

    def test_multiline_error_position(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("a\nb\nc /")
        assert "3:3" in exc_info.value.format()

    def test_caret_under_offending_column(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("12 /")
        last_line = exc_info.value.format().splitlines()[-1]
        assert last_line.endswith("   ^")

    def test_str_is_formatted(self):
        with pytest.raises(LexError) as exc_info:
            tokenize("/")
        assert str(exc_info.value) == exc_info.value.format()


class TestParseErrorContext:
    def test_without_source(self):
        with pytest.raises(ParseError) as exc_info:
            parse(tokenize("1 +"))
        err = exc_info.value
        assert err.source is None
        assert err.position is None
        assert err.format().startswith("error: expected term after '+'")

    def test_with_source(self):
        source = "1 +\n  * 2"
        with pytest.raises(ParseError) as exc_info:
            parse(tokenize(source), source)
        err = exc_info.value
        assert err.position.line == 2
        assert err.position.column == 3
        assert "* 2" in err.format()

    def test_underline_covers_token(self):
        source = "( 1 + 2 ) foo"
        with pytest.raises(ParseError) as exc_info:
            parse(tokenize(source), source)
        assert exc_info.value.format().splitlines()[-1].endswith("^^^")

    def test_end_of_input_offset(self):
        source = "( 1 + 2"
        with pytest.raises(ParseError) as exc_info:
            parse(tokenize(source), source)
        err = exc_info.value
        assert err.token is None
        assert err.offset == 7

    def test_constructed_directly(self):
        tok = Token(TokenKind.SYMBOL, ")", Span(0, 1))
        err = ExpectedFactorError(tok, ")")
        assert err.offset == 0
        assert "symbol ')'" in err.message

    def test_multiline_literal_is_escaped(self):
        source = '1 "two\nlines"'
        with pytest.raises(ParseError) as exc_info:
            parse(tokenize(source), source)
        err = exc_info.value
        assert "\n" not in err.message
        assert err.message == "unexpected string '\"two\\nlines\"'"
        assert err.format().splitlines()[0] == f"error: {err.message}"
