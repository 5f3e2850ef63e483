"""Core evaluator for the uforth interpreter.

Implements the main instruction loop with its execute/accumulate mode switch
and the per-variant dispatch used to evaluate a single runtime value.
"""

from __future__ import annotations

import logging
from typing import Iterable

from uforth import Instruction, Value
from uforth.evaluation.context import EvalContext
from uforth.types.block import Block
from uforth.types.environment import UNBOUND
from uforth.types.errors import UForthTypeMismatch, UForthUnterminatedBlock
from uforth.types.primitive_op import PrimitiveOp
from uforth.types.symbol import Symbol, is_block_begin, is_block_end

logger = logging.getLogger(__name__)


def evaluate(instructions: Iterable[Instruction], ctx: EvalContext) -> None:
    """
    Main loop: execute each instruction, or push it raw while inside `{ ... }`.

    The nesting depth is updated before the mode is chosen, so an opening `{`
    is always accumulated and the `}` that closes the outermost block is
    always executed (it captures the accumulated instructions into a Block).
    """
    depth = 0
    for insn in instructions:
        if is_block_begin(insn):
            depth += 1
        elif is_block_end(insn):
            depth -= 1
            if depth < 0:
                raise UForthUnterminatedBlock("Unbalanced '}' without a matching '{'")

        if depth > 0:
            ctx.stack.push(insn)
        else:
            evaluate_value(insn, ctx)

    if depth != 0:
        raise UForthUnterminatedBlock(f"{depth} block(s) left open at end of input")


def evaluate_value(value: Value, ctx: EvalContext) -> None:
    """Evaluate one runtime value against the stack and environment."""
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("eval %r (stack depth %d, scope %d)", value, len(ctx.stack), ctx.env.current)

    match value:
        case bool() | int():
            ctx.stack.push(value)
        case Symbol():
            bound = ctx.env.get(value.name)
            if bound is UNBOUND:
                # Unbound symbols are inert: they stand for themselves
                ctx.stack.push(value)
            else:
                evaluate_value(bound, ctx)
        case Block():
            invoke_block(value, ctx)
        case PrimitiveOp():
            value.handler(ctx, evaluate_value)
        case _:
            raise UForthTypeMismatch(f"Cannot evaluate {value!r}")


def invoke_block(block: Block, ctx: EvalContext) -> None:
    """Run `block` in a fresh child scope of the current (caller's) scope."""
    with ctx.env.child_scope():
        evaluate(block.instructions, ctx)
