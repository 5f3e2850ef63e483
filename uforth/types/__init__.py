"""Runtime value and storage types for uforth."""

from uforth.types.symbol import Symbol, BLOCK_BEGIN, BLOCK_END
from uforth.types.block import Block
from uforth.types.primitive_op import PrimitiveOp
from uforth.types.environment import Environment, Scope
from uforth.types.work_stack import WorkStack
from uforth.types.tags import is_integer, is_boolean, type_name

__all__ = [
    "Symbol",
    "BLOCK_BEGIN",
    "BLOCK_END",
    "Block",
    "PrimitiveOp",
    "Environment",
    "Scope",
    "WorkStack",
    "is_integer",
    "is_boolean",
    "type_name",
]
