"""Scanner — groups stream characters into positioned tokens."""

from __future__ import annotations

from collections.abc import Iterator

from yamllex.errors import UnrecognizedCharacterError, UnterminatedQuoteError
from yamllex.stream import Stream
from yamllex.tokens import (
    BLOCK_SIGNS,
    INLINE_WS,
    QUOTES,
    START,
    STRUCTURAL,
    Position,
    QuoteState,
    Token,
    TokenType,
    is_disallowed,
)

_CLOSING = {QuoteState.IN_DOUBLE: '"', QuoteState.IN_SINGLE: "'"}


class Scanner:
    """Tokenize source text one token at a time.

    Call :meth:`next` until it returns None, or iterate the scanner.
    Lexical errors are raised as :class:`~yamllex.errors.LexError`.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._stream = Stream(source)
        # (char, position, index past it, byte offset past it)
        self._pending: tuple[str, Position, int, int] | None = None
        self._quote = QuoteState.UNQUOTED
        self._quote_pos = START

        # Describes the character most recently returned by _read()
        self._pos = START
        self._index = 0
        self._end = 0

    def next(self) -> Token | None:
        """Return the next token, or None at end of input."""
        while True:
            ch = self._read()
            if ch is None:
                return self._finish()
            pos = self._pos

            if ch == " " and pos.col == 1:
                return self._scan_indent(pos)

            if ch == "\n":
                return self._token(TokenType.NEWLINE, pos)

            if is_disallowed(ch):
                raise UnrecognizedCharacterError(ch, pos, self._source)

            if ch in QUOTES:
                state, tt = QUOTES[ch]
                if self._quote is QuoteState.UNQUOTED:
                    self._quote = state
                    self._quote_pos = pos
                    return self._token(tt, pos)
                if self._quote is state:
                    self._quote = QuoteState.UNQUOTED
                    return self._token(tt, pos)
                return self._scan_text(pos)

            if self._quote is not QuoteState.UNQUOTED:
                return self._scan_text(pos)

            if ch in STRUCTURAL:
                return self._token(STRUCTURAL[ch], pos)

            if ch in BLOCK_SIGNS:
                return self._token(BLOCK_SIGNS[ch], pos)

            if ch in INLINE_WS:
                continue

            return self._scan_text(pos)

    def __iter__(self) -> Iterator[Token]:
        while (tok := self.next()) is not None:
            yield tok

    # ------------------------------------------------------------------
    # Character helpers
    # ------------------------------------------------------------------

    def _read(self) -> str | None:
        if self._pending is not None:
            (ch, self._pos, self._index, self._end), self._pending = self._pending, None
            return ch
        ch = self._stream.next()
        if ch is not None:
            self._pos = self._stream.get_position()
            self._index = self._stream.index
            self._end = self._stream.end_offset
        return ch

    def _unread(self, ch: str) -> None:
        self._pending = (ch, self._pos, self._index, self._end)

    def _token(self, tt: TokenType, pos: Position, value: int | str | None = None) -> Token:
        return Token(tt, pos, value, self._end)

    def _finish(self) -> None:
        if self._quote is not QuoteState.UNQUOTED:
            quote = _CLOSING[self._quote]
            self._quote = QuoteState.UNQUOTED
            raise UnterminatedQuoteError(quote, self._quote_pos, self._source)
        return None

    # ------------------------------------------------------------------
    # Multi-character tokens
    # ------------------------------------------------------------------

    def _scan_indent(self, pos: Position) -> Token:
        count = 1
        end = self._end
        while (ch := self._read()) is not None:
            if ch != " ":
                self._unread(ch)
                break
            count += 1
            end = self._end
        return Token(TokenType.SPACES, pos, count, end)

    def _scan_text(self, pos: Position) -> Token:
        """Accumulate a STRING starting at the character just read.

        Outside quotes the run stops before structural characters and quotes,
        and trailing blanks are left out. Inside quotes only the closing
        delimiter stops it and the text is kept verbatim.
        """
        closing = _CLOSING.get(self._quote)
        start = self._index - 1
        stop, end = self._index, self._end

        while (ch := self._read()) is not None:
            if ch == "\n" or is_disallowed(ch):
                self._unread(ch)
                break
            if closing is not None:
                if ch == closing:
                    self._unread(ch)
                    break
            elif ch in STRUCTURAL or ch in QUOTES:
                self._unread(ch)
                break
            if closing is not None or ch not in INLINE_WS:
                stop, end = self._index, self._end

        return Token(TokenType.STRING, pos, self._source[start:stop], end)


def tokenize(source: str) -> list[Token]:
    """Convenience function: tokenize source text and return token list."""
    return list(Scanner(source))
