"""Runtime type tests for stack values.

Integers and booleans are plain Python ``int`` and ``bool``. Because ``bool``
is a subclass of ``int`` every tag test here checks for ``bool`` first.
"""

from __future__ import annotations

from uforth import Value


def is_integer(value: Value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def is_boolean(value: Value) -> bool:
    return isinstance(value, bool)


def type_name(value: Value) -> str:
    """Name of the runtime variant of `value`, used in error messages."""
    if is_boolean(value):
        return "boolean"
    if is_integer(value):
        return "integer"
    # Symbol, Block, PrimitiveOp
    return type(value).__name__.lower()
