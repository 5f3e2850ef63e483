"""Textual rendering of runtime values and of the WorkStack."""

from __future__ import annotations

from typing import Iterable

from uforth import Value

TRUE_TEXT = "true"
FALSE_TEXT = "false"


def format_value(value: Value) -> str:
    # str(True) would be "True"
    if isinstance(value, bool):
        return TRUE_TEXT if value else FALSE_TEXT
    # int, Symbol, Block and PrimitiveOp render through __str__
    return str(value)


def format_stack(stack: Iterable[Value]) -> list[str]:
    """Render every value of `stack`, in the stack's iteration order (top-first)."""
    return [format_value(v) for v in stack]
