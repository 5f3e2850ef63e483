# Core type aliases for uforth's data model.
# Runtime values use plain Python types where one fits (int, bool) and small
# classes where none does (Symbol, Block, PrimitiveOp). There is no wrapper
# class around integers or booleans.
#
# Naming guidance:
# - Instruction: use in reader/evaluator code for a parsed, not yet executed item.
# - Value:       use in stack/environment code for anything a stack slot can hold.
# Both aliases resolve to `Any`; every Instruction is also a Value.

from typing import Any, Callable

__version__ = "0.3.0"

# Runtime value alias
Value = Any
# Parsed instruction alias (Integer, Symbol, or a captured Block)
Instruction = Value

# Evaluator function type handed to control operations
EvaluatorFn = Callable[..., None]
