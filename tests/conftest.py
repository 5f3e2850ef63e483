import pytest

from uforth.builtin.env_builtin import register
from uforth.evaluation.context import EvalContext
from uforth.interpreter import Interpreter
from uforth.types.environment import Environment


@pytest.fixture
def interp():
    """Fresh interpreter session with the primitive library loaded."""
    return Interpreter()


@pytest.fixture
def ctx():
    """Bare evaluation context over an environment with builtins registered."""
    env = Environment()
    register(env)
    return EvalContext(env=env)


@pytest.fixture
def run(interp):
    """Evaluate a line in the `interp` session and return the stack top-first."""
    return lambda line: interp.eval(line).to_list()
