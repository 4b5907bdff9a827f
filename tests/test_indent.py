"""Test indentation runs: spaces starting at column 1."""

from yamllex.scanner import Scanner
from yamllex.tokens import Position, TokenType

from .conftest import assert_types, assert_values


class TestIndent:
    def test_single_space(self, lex):
        tokens = lex(" ")
        assert_types(tokens, [TokenType.SPACES])
        assert tokens[0].value == 1

    def test_three_spaces_then_dash(self, lex):
        tokens = lex("   - a")
        assert_types(tokens, [TokenType.SPACES, TokenType.DASH, TokenType.STRING])
        assert tokens[0].value == 3
        assert tokens[0].pos == Position(0, 1, 1)
        assert tokens[0].end == 3
        assert tokens[1].pos == Position(3, 1, 4)

    def test_pushed_back_char_keeps_its_position(self, lex):
        tokens = lex("  ab")
        assert tokens[1].pos == Position(2, 1, 3)
        assert tokens[1].value == "ab"

    def test_indent_on_second_line(self, lex):
        tokens = lex("a:\n  b")
        assert_types(
            tokens,
            [
                TokenType.STRING,
                TokenType.COLON,
                TokenType.NEWLINE,
                TokenType.SPACES,
                TokenType.STRING,
            ],
        )
        assert tokens[3].pos == Position(3, 2, 1)
        assert tokens[3].value == 2

    def test_indent_then_newline(self, lex):
        tokens = lex("  \n")
        assert_types(tokens, [TokenType.SPACES, TokenType.NEWLINE])
        assert tokens[1].pos == Position(2, 1, 3)

    def test_indent_then_crlf(self, lex):
        tokens = lex(" \r\nx")
        assert_types(tokens, [TokenType.SPACES, TokenType.NEWLINE, TokenType.STRING])
        assert tokens[2].pos == Position(3, 2, 1)


class TestNoIndentMidLine:
    def test_spaces_after_token(self, lex):
        tokens = lex("-   -")
        assert_types(tokens, [TokenType.DASH, TokenType.DASH])

    def test_tab_at_line_start_is_not_indent(self, lex):
        assert_types(lex("\t-"), [TokenType.DASH])

    def test_blank_lines(self, lex):
        tokens = lex(" \n \n")
        assert_values(tokens, [1, None, 1, None])


class TestIndentInQuotes:
    def test_indent_recognized_inside_quotes(self, lex):
        tokens = lex('"a\n  b"')
        assert_types(
            tokens,
            [
                TokenType.DOUBLE_QUOTE,
                TokenType.STRING,
                TokenType.NEWLINE,
                TokenType.SPACES,
                TokenType.STRING,
                TokenType.DOUBLE_QUOTE,
            ],
        )


class TestEndOfInput:
    def test_trailing_indent(self):
        scanner = Scanner("   ")
        tok = scanner.next()
        assert tok.type == TokenType.SPACES
        assert tok.value == 3
        assert scanner.next() is None
        assert scanner.next() is None
