from __future__ import annotations

import logging
from typing import Iterable

from uforth.builtin.env_builtin import register
from uforth.config import Config
from uforth.evaluation.context import EvalContext
from uforth.evaluation.evaluator import evaluate
from uforth.printer import format_stack
from uforth.reader.parser import read
from uforth.types.environment import Environment
from uforth.types.errors import UForthError, UForthRecursionError
from uforth.types.work_stack import WorkStack

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating uforth lines.
    Maintains one WorkStack and one root Environment across calls.
    """

    def __init__(self, config: Config | None = None):
        self.config: Config = config or Config()
        self.env: Environment = Environment()
        register(self.env)
        self._pristine_env = self.env.snapshot()
        self.stack: WorkStack = WorkStack()
        self.ctx = EvalContext(
            stack=self.stack,
            env=self.env,
            loop_cycle_check=self.config.loop_cycle_check,
        )

    def eval(self, line: str) -> WorkStack:
        """Evaluate one line of source against the session stack.

        If evaluation fails or is interrupted, the stack and environment are put
        back exactly as they were before the line and the error is re-raised.
        """
        stack_before = self.stack.snapshot()
        env_before = self.env.snapshot()
        try:
            evaluate(read(line), self.ctx)
        except UForthError as e:
            self._rollback(stack_before, env_before, e)
            raise
        except RecursionError as e:
            err = UForthRecursionError("Block invocations nested too deeply")
            self._rollback(stack_before, env_before, err)
            raise err from e
        except KeyboardInterrupt as e:
            self._rollback(stack_before, env_before, e)
            raise
        return self.stack

    def _rollback(self, stack_before, env_before, error: BaseException) -> None:
        logger.debug("rolling back line after %s: %s", type(error).__name__, error)
        self.stack.restore(stack_before)
        self.env.restore(env_before)

    def eval_lines(self, lines: Iterable[str]) -> WorkStack:
        for line in lines:
            self.eval(line)
        return self.stack

    def render(self) -> list[str]:
        """The stack top-first, one rendered value per entry."""
        return format_stack(self.stack)

    def reset(self) -> None:
        """Drop every stack value and user binding."""
        self.stack.clear()
        self.env.restore(self._pristine_env)
