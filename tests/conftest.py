"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from yamllex.scanner import tokenize
from yamllex.stream import Stream
from yamllex.tokens import Token, TokenType


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and returns the token list."""

    def _lex(source: str) -> list[Token]:
        return tokenize(source)

    return _lex


@pytest.fixture
def chars():
    """Return a helper that drains a Stream into (char, offset, line, col) tuples."""

    def _chars(source: str) -> list[tuple[str, int, int, int]]:
        stream = Stream(source)
        result = []
        while (ch := stream.next()) is not None:
            pos = stream.get_position()
            result.append((ch, pos.offset, pos.line, pos.col))
        return result

    return _chars


def assert_types(tokens: list[Token], expected: list[TokenType]) -> None:
    """Assert that the token types match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_values(tokens: list[Token], expected: list[int | str | None]) -> None:
    """Assert that the token values match the expected list."""
    actual = [t.value for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"
