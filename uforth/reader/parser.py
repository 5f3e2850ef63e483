"""
  uforth Reader and Lexer

- One line in, one list of instructions out
- Splits on the space character only: no quoting, no escaping, no comments
- Emits Python primitives where they exist:

    - integers -> int
    - everything else -> Symbol (including the block markers "{" and "}")
"""

from __future__ import annotations

import re
from typing import Iterator

from uforth import Instruction
from uforth.types.errors import UForthMalformedLiteral
from uforth.types.symbol import Symbol

DELIMITER = " "
# ASCII only: str.isdigit() would accept other scripts' digits
INTEGER_RE = re.compile(r"[0-9]+")


def _strip_line_terminator(line: str) -> str:
    if line.endswith("\r\n"):
        return line[:-2]
    if line.endswith("\n"):
        return line[:-1]
    return line


def lex(line: str) -> Iterator[str]:
    """Token generator: yields the non-empty space-delimited words of `line`."""
    for word in _strip_line_terminator(line).split(DELIMITER):
        if word:
            yield word


def read_token(token: str) -> Instruction:
    """Classify one raw token as an integer literal or a symbol."""
    if "0" <= token[0] <= "9":
        if not INTEGER_RE.fullmatch(token):
            raise UForthMalformedLiteral(f"Malformed integer literal {token!r}")
        return int(token)
    return Symbol(token)


def read(line: str) -> list[Instruction]:
    """Read one line of source into a fresh, caller-owned instruction list."""
    return [read_token(token) for token in lex(line)]
