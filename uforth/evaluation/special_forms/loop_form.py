"""The `loop` control operation.

Non-termination check: a loop body runs in a child scope that is discarded
when it returns, so the body cannot change the environment it loops in. The
next iteration therefore depends only on the stack. If the stack after one
body invocation equals the stack after the previous one, the loop has reached
a fixed point and will never see `false`.
"""

from __future__ import annotations

import logging

from uforth import EvaluatorFn, Value
from uforth.evaluation.context import EvalContext
from uforth.types.block import Block
from uforth.types.errors import (
    UForthNonTerminatingLoop,
    UForthTypeMismatch,
    UForthUnboundOperationMisuse,
)
from uforth.types.tags import is_boolean, type_name
from uforth.types.work_stack import WorkStack

logger = logging.getLogger(__name__)


def _stack_state(stack: WorkStack) -> tuple[tuple[type, Value], ...]:
    # tag every value: 1 == True in Python but not here
    return tuple((type(v), v) for v in stack)


def loop_form(ctx: EvalContext, evaluate_fn: EvaluatorFn) -> None:
    """`... { body } loop`: invoke body while the top of the stack is true.

    Each `true` is popped before the body runs; the first `false` is popped
    and ends the loop. The body must push the next boolean itself.
    """
    ctx.stack.require(1, "loop")
    body = ctx.stack.peek()
    if not isinstance(body, Block):
        raise UForthUnboundOperationMisuse(f"loop requires a block, got {type_name(body)}")
    ctx.stack.pop()

    previous = None
    previous_length = -1
    iterations = 0
    while True:
        ctx.stack.require(1, "loop")
        flag = ctx.stack.peek()
        if not is_boolean(flag):
            raise UForthTypeMismatch(f"loop requires a boolean on top, got {type_name(flag)}")
        ctx.stack.pop()
        if not flag:
            break

        evaluate_fn(body, ctx)
        iterations += 1

        if ctx.loop_cycle_check:
            # a fixed point needs equal lengths; only then compare contents
            length = len(ctx.stack)
            if length != previous_length:
                previous = None
            else:
                state = _stack_state(ctx.stack)
                if state == previous:
                    raise UForthNonTerminatingLoop(
                        f"loop body {body} repeats the same stack forever "
                        f"(detected after {iterations} iterations)"
                    )
                previous = state
            previous_length = length

    logger.debug("loop finished after %d iterations", iterations)
