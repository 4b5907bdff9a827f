"""Error types with formatted source context."""

from __future__ import annotations

from yamllex.tokens import Position


class LexError(Exception):
    """Raised on the first lexing error, with position and source context."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.yaml") -> str:
        # Same line breaks as the stream: \n, \r and \r\n only
        lines = self.source.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        line_idx = self.position.line - 1
        col = self.position.col

        if 0 <= line_idx < len(lines):
            source_line = lines[line_idx]
        else:
            source_line = ""

        # Compute underline length — at least 1 char, but stay within line
        underline_len = max(1, min(2, len(source_line) - col + 1))

        pad = " " * (col - 1)
        carets = "^" * underline_len

        line_num = str(self.position.line)
        gutter_width = len(line_num) + 1

        blank_gutter = " " * gutter_width + "|"
        line_gutter = f"{line_num:>{gutter_width - 1}} |"

        return (
            f"error: {self.message}\n"
            f"{' ' * gutter_width}--> {filename}:{self.position.line}:{col}\n"
            f"{blank_gutter}\n"
            f"{line_gutter} {source_line}\n"
            f"{blank_gutter} {pad}{carets}"
        )


class UnrecognizedCharacterError(LexError):
    """A character that can never start or continue a token."""

    def __init__(self, char: str, position: Position, source: str) -> None:
        self.char = char
        super().__init__(f"unrecognized character U+{ord(char):04X}", position, source)


class UnterminatedQuoteError(LexError):
    """Input ended while a quoted span was still open."""

    def __init__(self, quote: str, position: Position, source: str) -> None:
        self.quote = quote
        super().__init__(f"unterminated quoted string (missing closing {quote})", position, source)
