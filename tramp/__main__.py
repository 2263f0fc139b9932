from __future__ import annotations

import argparse
import logging
import sys

from tramp.config import get_log_level, get_recursion_limit
from tramp.interpreter import Interpreter
from tramp.printer import to_string
from tramp.repl import run_repl
from tramp.types.errors import TrampError

logger = logging.getLogger("tramp")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tramp",
        description="A small Scheme-like interpreter with proper tail calls.",
    )
    parser.add_argument("files", nargs="*", help="source files to evaluate in order")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate one expression and print its value")
    parser.add_argument("-i", "--interactive", action="store_true",
                        help="start the read loop after evaluating files")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")

    limit = get_recursion_limit()
    if limit is not None:
        logger.debug("setting recursion limit to %d", limit)
        sys.setrecursionlimit(limit)

    try:
        interp = Interpreter()
        for path in args.files:
            logger.debug("loading %s", path)
            interp.load(path)
        if args.expr is not None:
            result = interp.eval(args.expr)
            if result is not None:
                print(to_string(result))
    except (TrampError, OSError, UnicodeDecodeError) as ex:
        print(f"error: {ex}", file=sys.stderr)
        return 1

    if args.interactive or (not args.files and args.expr is None):
        run_repl(interp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
