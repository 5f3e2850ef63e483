from __future__ import annotations
import sys

BLOCK_BEGIN = "{"
BLOCK_END = "}"


class Symbol:
    __slots__ = ("name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self.name = sys.intern(name)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name


def is_block_begin(value: object) -> bool:
    return isinstance(value, Symbol) and value.name == BLOCK_BEGIN


def is_block_end(value: object) -> bool:
    return isinstance(value, Symbol) and value.name == BLOCK_END
