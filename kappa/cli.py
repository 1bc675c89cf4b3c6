"""Command line entry point: a line-oriented read-eval-print loop.

    kappa                    start the REPL (bootstrap file loaded first)
    kappa -e "(+ 1 2)"       evaluate one input unit and print the result
    kappa program.clj        evaluate a file as one input unit

Inside the REPL, `:exit` quits and `:load` evaluates the bootstrap file again.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from kappa import __version__
from kappa.config import get_prelude_path, get_prompt
from kappa.interpreter import Interpreter

log = logging.getLogger(__name__)

EXIT_COMMAND = ":exit"
LOAD_COMMAND = ":load"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="kappa", description="Kappa Lisp interpreter")
    parser.add_argument("file", nargs="?", type=Path, help="source file to evaluate as one unit")
    parser.add_argument("-e", "--eval", dest="code", help="evaluate CODE, print the result and exit")
    parser.add_argument(
        "--prelude",
        type=Path,
        default=None,
        help="bootstrap file evaluated before any input (default: $KAPPA_PRELUDE_PATH or the bundled core.clj)",
    )
    parser.add_argument("--no-prelude", action="store_true", help="start with an empty environment")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _eval_and_print(interp: Interpreter, code: str, out: TextIO) -> None:
    try:
        print(interp.render(code), file=out)
    except RecursionError:
        log.error("evaluation exceeded the maximum recursion depth")


def repl(
    interp: Interpreter,
    prelude: Path,
    stdin: TextIO | None = None,
    out: TextIO | None = None,
) -> int:
    stdin = stdin if stdin is not None else sys.stdin
    out = out if out is not None else sys.stdout
    prompt = get_prompt()
    while True:
        out.write(prompt)
        out.flush()
        line = stdin.readline()
        if not line:
            out.write("\n")
            print("Bye!", file=out)
            return 0
        line = line.rstrip("\n").rstrip("\r")

        if line == EXIT_COMMAND:
            print("Bye!", file=out)
            return 0
        if line == LOAD_COMMAND:
            try:
                line = prelude.read_text(encoding="utf-8")
            except OSError as e:
                log.error("cannot read %s: %s", prelude, e)
                continue
        if not line.strip():
            continue

        _eval_and_print(interp, line, out)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    prelude_path = args.prelude if args.prelude is not None else get_prelude_path()
    try:
        interp = Interpreter(prelude=None if args.no_prelude else prelude_path)
    except FileNotFoundError:
        log.error("bootstrap file not found: %s", prelude_path)
        return 1

    if args.code is not None:
        _eval_and_print(interp, args.code, sys.stdout)
        return 0
    if args.file is not None:
        try:
            code = args.file.read_text(encoding="utf-8")
        except OSError as e:
            log.error("cannot read %s: %s", args.file, e)
            return 1
        _eval_and_print(interp, code, sys.stdout)
        return 0
    return repl(interp, prelude_path)


if __name__ == "__main__":
    sys.exit(main())
