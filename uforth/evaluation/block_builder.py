"""Block capture: turns the raw instructions accumulated on the stack into a Block."""

from __future__ import annotations

import logging
from collections import deque

from uforth import EvaluatorFn, Instruction
from uforth.evaluation.context import EvalContext
from uforth.types.block import Block
from uforth.types.errors import UForthUnterminatedBlock
from uforth.types.symbol import is_block_begin, is_block_end
from uforth.types.work_stack import WorkStack

logger = logging.getLogger(__name__)


def _matching_begin(stack: WorkStack) -> int:
    """Depth of the `{` that matches a `}` about to be executed.

    Raw `}` found on the way belong to nested blocks and raise the balance;
    raw `{` lower it.
    """
    balance = 1
    for depth, insn in enumerate(stack):
        if is_block_end(insn):
            balance += 1
        elif is_block_begin(insn):
            balance -= 1
            if balance == 0:
                return depth
    raise UForthUnterminatedBlock("Reached the bottom of the stack looking for '{'")


def capture_block(ctx: EvalContext, evaluate_fn: EvaluatorFn | None = None) -> None:
    """Handler of `}`: pop back to the matching `{` and push the captured Block."""
    count = _matching_begin(ctx.stack)
    captured: deque[Instruction] = deque()
    for _ in range(count):
        # popping reverses order; prepend to restore source order
        captured.appendleft(ctx.stack.pop())
    ctx.stack.pop()  # the matching "{"

    block = Block(captured)
    logger.debug("captured %s", block)
    ctx.stack.push(block)
