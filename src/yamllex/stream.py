"""Character stream with line-ending canonicalization and position tracking."""

from __future__ import annotations

from collections.abc import Iterator

from yamllex.tokens import Position, utf8_width


class Stream:
    """Yield the characters of source text one at a time.

    ``\\r``, ``\\n`` and ``\\r\\n`` all come out as a single ``\\n``. After
    each call to :meth:`next`, :meth:`get_position` describes the character
    just produced: its UTF-8 byte offset and its 1-based line and column.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._index = 0  # next code point to read
        self._byte = 0  # UTF-8 offset of self._source[self._index]
        self._offset = 0
        self._line = 1
        self._col = 0
        self._peek: tuple[int, str] | None = None
        self._had_linebreak = False

    @property
    def index(self) -> int:
        """Code-point index just past the last character taken from the source."""
        if self._peek is not None:
            return self._index - 1
        return self._index

    @property
    def end_offset(self) -> int:
        """UTF-8 offset just past the last character taken from the source."""
        if self._peek is not None:
            return self._peek[0]
        return self._byte

    def get_position(self) -> Position:
        return Position(self._offset, self._line, self._col)

    def next(self) -> str | None:
        """Return the next logical character, or None at end of input."""
        raw = self._next_raw()
        if raw is None:
            return None

        offset, ch = raw
        self._update_pos(offset)

        if ch == "\r":
            following = self._next_raw()
            if following is not None and following[1] != "\n":
                self._peek = following
            ch = "\n"

        if ch == "\n":
            self._had_linebreak = True
        return ch

    def __iter__(self) -> Iterator[str]:
        while (ch := self.next()) is not None:
            yield ch

    def _next_raw(self) -> tuple[int, str] | None:
        if self._peek is not None:
            raw, self._peek = self._peek, None
            return raw
        if self._index >= len(self._source):
            return None
        ch = self._source[self._index]
        raw = (self._byte, ch)
        self._index += 1
        self._byte += utf8_width(ch)
        return raw

    def _update_pos(self, offset: int) -> None:
        self._offset = offset
        if self._had_linebreak:
            self._line += 1
            self._col = 1
            self._had_linebreak = False
        else:
            self._col += 1
