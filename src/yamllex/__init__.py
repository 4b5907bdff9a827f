"""yamllex: character stream and tokenizer for a YAML-like markup format."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from yamllex.tokens import Token

__version__ = "0.1.0"


def tokenize(source: str) -> list[Token]:
    """Tokenize source text and return the list of tokens."""
    from yamllex.scanner import tokenize as _tokenize

    return _tokenize(source)
