"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from yatc.lexer import tokenize
from yatc.parser import parse
from yatc.tokens import Token, TokenKind


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns tokens."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def parse_source():
    """Return a helper that lexes and parses source, passing source for context."""

    def _parse(source: str, **kwargs) -> None:
        return parse(tokenize(source), source, **kwargs)

    return _parse


def assert_kinds(tokens: list[Token], expected: list[TokenKind]) -> None:
    """Assert that the token kinds match the expected list."""
    actual = [t.kind for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_literals(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token literals match the expected list."""
    actual = [t.literal for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_spans_match_source(tokens: list[Token], source: str) -> None:
    """Assert every token literal is exactly the source text under its span."""
    for t in tokens:
        assert source[t.span.start : t.span.end] == t.literal, f"span mismatch for {t}"
