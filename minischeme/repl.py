"""Line-oriented read-eval-print loop and command line entry point."""

from __future__ import annotations
import argparse
import logging
import sys
from typing import Callable, TextIO

from minischeme import __version__
from minischeme.config import get_log_level, get_prompt, get_quit_command, parse_log_level
from minischeme.interpreter import eval_and_print

logger = logging.getLogger(__name__)


def run_repl(
    read_line: Callable[[], str],
    out: TextIO,
    prompt: str | None = None,
    quit_command: str | None = None,
) -> None:
    """Prompt, read and evaluate lines until the quit command or end of input."""
    prompt = get_prompt() if prompt is None else prompt
    quit_command = get_quit_command() if quit_command is None else quit_command
    while True:
        out.write(prompt)
        out.flush()
        try:
            line = read_line()
        except EOFError:
            out.write("\n")
            break
        if line.strip() == quit_command:
            break
        eval_and_print(line, out)
    logger.debug("REPL finished")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minischeme",
        description="Evaluate minischeme expressions.",
    )
    parser.add_argument(
        "-e", "--eval",
        dest="expressions",
        action="append",
        default=[],
        metavar="EXPR",
        help="evaluate EXPR, print the result and exit (repeatable)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="logging level (default: $MINISCHEME_LOG_LEVEL or WARNING)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    level = get_log_level() if args.log_level is None else parse_log_level(args.log_level)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.expressions:
        for expr in args.expressions:
            eval_and_print(expr, sys.stdout)
        return 0

    run_repl(input, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
