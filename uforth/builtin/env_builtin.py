"""Built-in operations for the uforth root environment.

Arithmetic, comparison and stack manipulation are described by a single
dispatch table mapping operator name -> (operand checks, pure function,
result constructor). One generic handler validates depth and operand tags,
computes the result, and only then touches the stack. Control operations that
need the evaluator live in uforth.evaluation.special_forms and are registered
alongside.
"""
from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Any, Callable, Optional

from uforth import EvaluatorFn, Value
from uforth.evaluation.context import EvalContext
from uforth.evaluation.special_forms import SPECIAL_FORMS
from uforth.types.environment import Environment
from uforth.types.errors import UForthDivisionByZero, UForthTypeMismatch
from uforth.types.primitive_op import PrimitiveOp
from uforth.types.tags import is_integer, type_name

OperandCheck = Optional[Callable[[Value], bool]]

INTEGER: OperandCheck = is_integer
ANY: OperandCheck = None


@dataclass(frozen=True)
class OperatorSpec:
    name: str
    operands: tuple[OperandCheck, ...]  # bottom-first, as written in source
    fn: Callable[..., Any]
    result: Callable[[Any], tuple[Value, ...]]

    @property
    def arity(self) -> int:
        return len(self.operands)


# -------------------------------
# Result constructors
# -------------------------------
def integer_result(r: Any) -> tuple[Value, ...]:
    return (int(r),)


def boolean_result(r: Any) -> tuple[Value, ...]:
    return (bool(r),)


def values_result(r: Any) -> tuple[Value, ...]:
    """Push each value of the returned tuple, bottom-first."""
    return tuple(r)


# -------------------------------
# Arithmetic
# -------------------------------
def divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise UForthDivisionByZero(f"Division by zero: {a} / {b}")
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


def remainder(a: int, b: int) -> int:
    """Remainder with the sign of the dividend, so a == b * (a / b) + a % b."""
    if b == 0:
        raise UForthDivisionByZero(f"Division by zero: {a} % {b}")
    return a - b * divide(a, b)


def power(a: int, b: int) -> int:
    """a raised to b, truncated toward zero. Exact for any magnitude."""
    if b >= 0:
        return a ** b
    if a == 0:
        raise UForthDivisionByZero(f"Division by zero: {a} ^ {b}")
    # |1 / a**-b| < 1 unless |a| == 1, so the truncated result is 0, 1 or -1
    if a == 1:
        return 1
    if a == -1:
        return -1 if (-b) % 2 else 1
    return 0


OPERATORS: dict[str, OperatorSpec] = {
    spec.name: spec
    for spec in (
        OperatorSpec("+", (INTEGER, INTEGER), operator.add, integer_result),
        OperatorSpec("-", (INTEGER, INTEGER), operator.sub, integer_result),
        OperatorSpec("*", (INTEGER, INTEGER), operator.mul, integer_result),
        OperatorSpec("/", (INTEGER, INTEGER), divide, integer_result),
        OperatorSpec("%", (INTEGER, INTEGER), remainder, integer_result),
        OperatorSpec("^", (INTEGER, INTEGER), power, integer_result),
        OperatorSpec("~", (INTEGER,), operator.neg, integer_result),
        # Comparison
        OperatorSpec("<", (INTEGER, INTEGER), operator.lt, boolean_result),
        OperatorSpec("<=", (INTEGER, INTEGER), operator.le, boolean_result),
        OperatorSpec(">", (INTEGER, INTEGER), operator.gt, boolean_result),
        OperatorSpec(">=", (INTEGER, INTEGER), operator.ge, boolean_result),
        OperatorSpec("==", (INTEGER, INTEGER), operator.eq, boolean_result),
        OperatorSpec("!=", (INTEGER, INTEGER), operator.ne, boolean_result),
        # Stack manipulation
        OperatorSpec("dup", (INTEGER,), lambda a: (a, a), values_result),
        OperatorSpec("swap", (ANY, ANY), lambda a, b: (b, a), values_result),
        OperatorSpec("_", (ANY,), lambda a: (), values_result),
        # Boolean literals
        OperatorSpec("true", (), lambda: True, boolean_result),
        OperatorSpec("false", (), lambda: False, boolean_result),
    )
}


def apply_operator(spec: OperatorSpec, ctx: EvalContext) -> None:
    """Run one table-driven operator against the stack."""
    stack = ctx.stack
    stack.require(spec.arity, spec.name)
    args = [stack.peek(spec.arity - 1 - i) for i in range(spec.arity)]
    for position, (arg, check) in enumerate(zip(args, spec.operands), start=1):
        if check is not None and not check(arg):
            raise UForthTypeMismatch(
                f"{spec.name} operand {position} must be an integer, got {type_name(arg)} {arg}"
            )

    results = spec.result(spec.fn(*args))
    for _ in range(spec.arity):
        stack.pop()
    for value in results:
        stack.push(value)


def operator_primitive(spec: OperatorSpec) -> PrimitiveOp:
    def handler(ctx: EvalContext, evaluate_fn: EvaluatorFn) -> None:
        apply_operator(spec, ctx)

    return PrimitiveOp(spec.name, handler)


def primitives() -> dict[str, PrimitiveOp]:
    """The full primitive library, keyed by operator text."""
    table = {name: operator_primitive(spec) for name, spec in OPERATORS.items()}
    table.update({name: PrimitiveOp(name, fn) for name, fn in SPECIAL_FORMS.items()})
    return table


def register(env: Environment) -> None:
    """Register all builtin operations into the given environment."""
    env.update(primitives())
