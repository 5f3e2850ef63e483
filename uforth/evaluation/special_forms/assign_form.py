import logging

from uforth import EvaluatorFn
from uforth.evaluation.context import EvalContext
from uforth.printer import format_value

logger = logging.getLogger(__name__)


def assign_form(ctx: EvalContext, evaluate_fn: EvaluatorFn) -> None:
    """`value name =`: bind name in the innermost scope, first write wins.

    The name is whatever value sits on top, keyed by its rendering, so an
    unbound symbol binds its own text.
    """
    ctx.stack.require(2, "=")
    name = ctx.stack.pop()
    value = ctx.stack.pop()

    key = format_value(name)
    if not ctx.env.define(key, value):
        logger.debug("%s already bound in scope %d; ignoring rebind", key, ctx.env.current)
