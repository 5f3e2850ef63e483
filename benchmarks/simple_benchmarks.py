from contextlib import ExitStack
from timeit import timeit

from uforth.config import Config
from uforth.evaluation.evaluator import evaluate
from uforth.interpreter import Interpreter
from uforth.reader.parser import read
from uforth.types.environment import Environment


def time_line(code: str, rounds: int, loop_cycle_check: bool = True) -> float:
    """Time evaluation of an already-read line. Reads once, then repeatedly
    evaluates the same instruction list against a fresh stack.
    """
    itp = Interpreter(Config(loop_cycle_check=loop_cycle_check))
    insns = read(code)

    def once():
        itp.stack.clear()
        evaluate(insns, itp.ctx)

    # Warmup
    once()
    # Timed
    return timeit(once, number=rounds)


def time_read(code: str, rounds: int) -> float:
    return timeit(lambda: read(code), number=rounds)


# Environment micro-benchmark: lookup through a deep scope chain

def bench_lookup_chain(n_scopes: int = 1000, n_lookups: int = 10000) -> float:
    env = Environment()
    env.define("answer", 42)
    with ExitStack() as scopes:
        for _ in range(n_scopes):
            scopes.enter_context(env.child_scope())
        # Warmup
        for _ in range(1000):
            env.lookup("answer")
        # Timed
        return timeit(lambda: env.lookup("answer"), number=n_lookups)


COUNTDOWN_CODE = "500 true { 1 - dup 0 > } loop"

# Sum 1..N with per-iteration bindings (one child scope per body invocation)
SUM_CODE = "0 500 true { n = acc = acc n + n 1 - dup 0 > } loop"

NESTED_BLOCKS_CODE = "{ 1 { 2 { 3 { 4 } } } } f = f"

CONDITIONAL_CODE = "3 4 < { 1 2 + } { 3 4 + } if"


def _print_pair(name: str, code: str, rounds: int) -> None:
    checked = time_line(code, rounds)
    unchecked = time_line(code, rounds, loop_cycle_check=False)
    print(f"Benchmark: {name}")
    print(f"  loop check on: {checked:.6f}s  |  off: {unchecked:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: scope chain lookup (1000 scopes deep)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    print("Benchmark: reader")
    print(f"  time: {time_read(SUM_CODE, 20000):.6f}s")

    _print_pair("countdown loop 500", COUNTDOWN_CODE, rounds=200)
    _print_pair("sum 1..500 with bindings", SUM_CODE, rounds=100)
    _print_pair("nested block capture", NESTED_BLOCKS_CODE, rounds=5000)
    _print_pair("conditional", CONDITIONAL_CODE, rounds=20000)
