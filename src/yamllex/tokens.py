"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    # Indentation
    SPACES = auto()  # run of spaces starting at column 1

    # Structural (single-character)
    QUESTION_MARK = auto()  # ?
    DASH = auto()  # -
    COLON = auto()  # :
    LEFT_BRACKET = auto()  # {
    RIGHT_BRACKET = auto()  # }
    LEFT_SQ_BRACKET = auto()  # [
    RIGHT_SQ_BRACKET = auto()  # ]

    # Quote delimiters
    DOUBLE_QUOTE = auto()  # "
    SINGLE_QUOTE = auto()  # '

    # Block scalar signs
    BLOCK_LITERAL = auto()  # |
    BLOCK_FOLDED = auto()  # >

    # Content
    STRING = auto()  # free text between structural tokens

    NEWLINE = auto()  # \n, \r or \r\n


class QuoteState(Enum):
    UNQUOTED = auto()
    IN_DOUBLE = auto()
    IN_SINGLE = auto()


@dataclass(frozen=True, slots=True)
class Position:
    """Source position: 0-based UTF-8 byte offset, 1-based line and column.

    A stream that has not produced a character yet reports
    ``Position(0, 1, 0)``; column 0 never belongs to a real character.
    """

    offset: int
    line: int
    col: int

    @property
    def is_start(self) -> bool:
        return self.col == 0


START = Position(offset=0, line=1, col=0)


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexical unit and the position of its first character.

    ``value`` is the run length for SPACES, the text for STRING and None for
    everything else. ``end`` is the byte offset just past the token.
    """

    type: TokenType
    pos: Position
    value: int | str | None = None
    end: int | None = None


STRUCTURAL = {
    ":": TokenType.COLON,
    "?": TokenType.QUESTION_MARK,
    "-": TokenType.DASH,
    "{": TokenType.LEFT_BRACKET,
    "}": TokenType.RIGHT_BRACKET,
    "[": TokenType.LEFT_SQ_BRACKET,
    "]": TokenType.RIGHT_SQ_BRACKET,
}

BLOCK_SIGNS = {
    "|": TokenType.BLOCK_LITERAL,
    ">": TokenType.BLOCK_FOLDED,
}

QUOTES = {
    '"': (QuoteState.IN_DOUBLE, TokenType.DOUBLE_QUOTE),
    "'": (QuoteState.IN_SINGLE, TokenType.SINGLE_QUOTE),
}

INLINE_WS = " \t"


def utf8_width(ch: str) -> int:
    """Return the number of bytes ch occupies in UTF-8."""
    cp = ord(ch)
    if cp < 0x80:
        return 1
    if cp < 0x800:
        return 2
    if cp < 0x10000:
        return 3
    return 4


def is_disallowed(ch: str) -> bool:
    """Return True for control characters that may not appear in a document."""
    return ch not in "\t\n" and unicodedata.category(ch) == "Cc"
