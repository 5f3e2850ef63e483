from __future__ import annotations

from dataclasses import dataclass, field

from uforth.types.environment import Environment
from uforth.types.work_stack import WorkStack


@dataclass
class EvalContext:
    """Everything an evaluation step may read or mutate, passed explicitly."""

    stack: WorkStack = field(default_factory=WorkStack)
    env: Environment = field(default_factory=Environment)
    loop_cycle_check: bool = True
