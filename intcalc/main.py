"""Command-line calculator: parses one integer expression, draws its tree and
prints the result.

    intcalc "1 + 2 * 3"
    intcalc --format prefix --no-eval "-(4 - 2) / 2"
"""

import argparse
import logging
import sys
from typing import NoReturn, Optional

from intcalc.calc import Failure, calculate
from intcalc.errors import UsageError
from intcalc.render import render_prefix, render_result, render_tree

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ERROR = 1
EXIT_USAGE = 2


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(f"{message}\n{self.format_usage().rstrip()}")


def build_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="intcalc", description="Parse and evaluate an integer arithmetic expression.")
    parser.add_argument("expression", help="expression to evaluate, e.g. '(1 + 2) * 3'")
    parser.add_argument(
        "--format", choices=["tree", "prefix"], default="tree", help="how to print the syntax tree (default: tree)"
    )
    parser.add_argument("--no-eval", action="store_true", help="only print the syntax tree")
    parser.add_argument("--no-color", action="store_true", help="disable colored tree output")
    parser.add_argument("-v", "--verbose", action="store_true", help="log tokens and evaluation steps to stderr")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    try:
        args = build_arg_parser().parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        return EXIT_USAGE

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    result = calculate(args.expression, evaluate_result=not args.no_eval)
    if isinstance(result, Failure):
        logger.debug("%s for %r", result.kind, args.expression)
        print(result.error, file=sys.stderr)
        return EXIT_ERROR

    if args.format == "prefix":
        lines = render_prefix(result.expression)
    else:
        lines = render_tree(result.expression, color=not args.no_color)
    print("\n".join(lines))
    if result.value is not None:
        print(render_result(result.value))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
