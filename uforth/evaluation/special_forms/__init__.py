"""Registry of control operations for the uforth evaluator.

These primitives need more than a fixed-arity pure function: they capture
blocks, bind names or invoke blocks, so each gets the evaluation function
passed in alongside the context.
"""

from uforth.types.symbol import BLOCK_END
from uforth.evaluation.block_builder import capture_block
from uforth.evaluation.special_forms.assign_form import assign_form
from uforth.evaluation.special_forms.if_form import if_form
from uforth.evaluation.special_forms.loop_form import loop_form

SPECIAL_FORMS = {
    BLOCK_END: capture_block,
    "=": assign_form,
    "if": if_form,
    "loop": loop_form,
}
