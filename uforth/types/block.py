"""Block representation: a captured, not yet executed instruction sequence."""

from __future__ import annotations

from io import StringIO
from typing import Iterable

from uforth import Instruction
from uforth.printer import format_value
from uforth.types.symbol import BLOCK_BEGIN, BLOCK_END


class Block:
    """An immutable sequence of instructions, invoked later as a unit.

    A block carries no environment. Invoking it evaluates its instructions in a
    fresh child scope of whatever environment is active at the call site
    (dynamic scoping), not the one in which the block was captured.
    """

    __slots__ = ("instructions",)

    def __init__(self, instructions: Iterable[Instruction] = ()):
        self.instructions: tuple[Instruction, ...] = tuple(instructions)

    def __len__(self) -> int:
        return len(self.instructions)

    def __iter__(self):
        return iter(self.instructions)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Block) and self.instructions == other.instructions

    def __hash__(self) -> int:
        return hash(self.instructions)

    def __str__(self) -> str:
        with StringIO() as buffer:
            buffer.write(BLOCK_BEGIN)
            buffer.write(" ")
            for insn in self.instructions:
                buffer.write(format_value(insn))
                buffer.write(" ")
            buffer.write(BLOCK_END)
            return buffer.getvalue()

    def __repr__(self) -> str:
        return f"Block({list(self.instructions)!r})"
