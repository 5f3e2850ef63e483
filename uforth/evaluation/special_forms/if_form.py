from uforth import EvaluatorFn
from uforth.evaluation.context import EvalContext
from uforth.types.block import Block
from uforth.types.errors import UForthTypeMismatch, UForthUnboundOperationMisuse
from uforth.types.tags import is_boolean, type_name


def if_form(ctx: EvalContext, evaluate_fn: EvaluatorFn) -> None:
    """`cond { then } { else } if`: invoke the block selected by cond.

    Pops else (top), then, cond. Nothing is popped unless all three check out.
    """
    ctx.stack.require(3, "if")
    else_block, then_block, cond = ctx.stack.peek(0), ctx.stack.peek(1), ctx.stack.peek(2)

    if not is_boolean(cond):
        raise UForthTypeMismatch(f"if requires a boolean condition, got {type_name(cond)}")
    for branch in (then_block, else_block):
        if not isinstance(branch, Block):
            raise UForthUnboundOperationMisuse(f"if requires block branches, got {type_name(branch)}")

    for _ in range(3):
        ctx.stack.pop()
    evaluate_fn(then_block if cond else else_block, ctx)
