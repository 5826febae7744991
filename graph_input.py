"""
Tokenizer for the plain-text graph encoding.

    <nodeCount> <edgeCount>
    <a> <b> <weight>        (edgeCount lines, 1-indexed endpoints)

Turns text into rows of non-negative integers; the shape of the rows is
checked later by graph_builder.fill_graph.
"""

from __future__ import annotations

from pathlib import Path
from typing import List


class GraphInputError(ValueError):
    """Input could not be read, tokenized, or has the wrong shape."""


# Tokens are unsigned 32-bit values.
MAX_TOKEN = 2**32 - 1


def parse_token(token: str, line_no: int) -> int:
    digits = token[1:] if token.startswith("+") else token
    if not (digits.isascii() and digits.isdigit()) or int(digits) > MAX_TOKEN:
        raise GraphInputError(f"line {line_no}: invalid number {token!r}")
    return int(digits)


def parse_rows(text: str) -> List[List[int]]:
    """
    Split text into lines and each line into non-negative integers.

    Blank lines become empty rows so line numbers stay aligned with the
    source text.
    """
    return [
        [parse_token(token, line_no) for token in line.split()]
        for line_no, line in enumerate(text.splitlines(), start=1)
    ]


def read_rows(path: Path | str) -> List[List[int]]:
    """Read and tokenize an input file."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise GraphInputError(f"failed to read input file {path}: {exc}") from exc
    return parse_rows(text)
