"""Human-readable token listing for debugging."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from typing import TextIO

from yamllex.tokens import Token, TokenType


def dump_tokens(tokens: Iterable[Token], *, file: TextIO = sys.stderr) -> None:
    """Print one line per token to *file*: ``line:col type [value]``."""
    for tok in tokens:
        _dump_token(tok, file)


def _dump_token(tok: Token, f: TextIO) -> None:
    where = f"{tok.pos.line}:{tok.pos.col}"
    f.write(f"{where:<8} {tok.type.name}")
    if tok.type == TokenType.STRING:
        f.write(f" {tok.value!r}")
    elif tok.type == TokenType.SPACES:
        f.write(f" ({tok.value})")
    f.write("\n")
