"""Command line front end for uforth.

With an expression argument, evaluate it once and print the stack; without
one, read lines interactively until end of input.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import Optional, Sequence, TextIO

from uforth import __version__
from uforth.config import Config, load_config
from uforth.interpreter import Interpreter
from uforth.types.errors import UForthError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="uforth",
        description="A small stack-based, Forth-like language.",
    )
    parser.add_argument("expression", nargs="?", help="Evaluate this line once and exit.")
    parser.add_argument("--prompt", help="Prompt shown before each interactive line.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log evaluation at DEBUG level.")
    parser.add_argument(
        "--no-loop-check",
        action="store_true",
        help="Do not stop loops whose body repeats the same stack forever.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def print_stack(interp: Interpreter, out: TextIO) -> None:
    for text in interp.render():
        print(text, file=out)


def run_once(interp: Interpreter, expression: str, out: TextIO, err: TextIO) -> int:
    try:
        interp.eval(expression)
    except UForthError as e:
        print(f"error: {e}", file=err)
        return 1
    except KeyboardInterrupt:
        print("error: interrupted", file=err)
        return 1
    print_stack(interp, out)
    return 0


def repl(interp: Interpreter, prompt: str, inp: TextIO, out: TextIO, err: TextIO) -> int:
    interactive = inp is sys.stdin and sys.stdin.isatty()
    if interactive:
        try:
            import readline  # noqa: F401  (line editing for input())
        except ImportError:
            pass

    while True:
        try:
            if interactive:
                line = input(prompt)
            else:
                out.write(prompt)
                out.flush()
                line = inp.readline()
                if not line:
                    raise EOFError
        except (EOFError, KeyboardInterrupt):
            print(file=out)
            return 0

        try:
            interp.eval(line)
        except UForthError as e:
            # the failed line was rolled back; keep the session going
            print(f"error: {e}", file=err)
            continue
        except KeyboardInterrupt:
            # e.g. a loop the cycle check cannot prove endless; also rolled back
            print("error: interrupted", file=err)
            continue
        print_stack(interp, out)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config: Config = load_config()
    if args.prompt is not None:
        config = replace(config, prompt=args.prompt)
    if args.verbose:
        config = replace(config, log_level=logging.DEBUG)
    if args.no_loop_check:
        config = replace(config, loop_cycle_check=False)

    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")
    logger.debug("starting with %s", config)

    interp = Interpreter(config)
    if args.expression is not None:
        return run_once(interp, args.expression, sys.stdout, sys.stderr)
    return repl(interp, config.prompt, sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
