from __future__ import annotations

from typing import Callable, TYPE_CHECKING

if TYPE_CHECKING:
    from uforth.evaluation.context import EvalContext

# Handler signature: (ctx, evaluate_fn) -> None
PrimitiveHandler = Callable[["EvalContext", Callable[..., None]], None]


class PrimitiveOp:
    """A built-in operation bound by name in the root environment."""

    __slots__ = ("name", "handler")

    def __init__(self, name: str, handler: PrimitiveHandler):
        self.name = name
        self.handler = handler

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrimitiveOp) and self.name == other.name

    def __hash__(self) -> int:
        return hash(("primitive", self.name))

    def __repr__(self):
        return f"PrimitiveOp({self.name!r})"

    def __str__(self):
        return self.name
