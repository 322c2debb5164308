"""Read-eval entry points shared by the REPL and test harnesses.

Each call is independent: there is no environment to carry between
expressions, so these are plain functions rather than an Interpreter object.
"""

from __future__ import annotations
import logging
import sys
from typing import TextIO

from minischeme import LispValue
from minischeme.evaluation.evaluator import evaluate
from minischeme.printer import show
from minischeme.reader.parser import read_expr
from minischeme.types.errors import SchemeError, SchemeRuntimeError

logger = logging.getLogger(__name__)


def read_eval(source: str) -> LispValue:
    """Parse the first expression in ``source`` and evaluate it."""
    expr = read_expr(source)
    result = evaluate(expr)
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Evaluated %s -> %s", show(expr), show(result))
    return result


def eval_string(source: str) -> str:
    """Evaluate ``source`` and render the value, or the error message.

    Rendering recurses once per nesting level, so a value the evaluator
    accepted can still be too deep to print; that is reported like any
    other runtime error.
    """
    try:
        try:
            return show(read_eval(source))
        except SchemeError as e:
            logger.debug("Trapped %s", type(e).__name__)
            return str(e)
    except RecursionError:
        logger.debug("Trapped RecursionError while rendering")
        return str(SchemeRuntimeError("Maximum recursion depth exceeded"))


def eval_and_print(source: str, out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(eval_string(source) + "\n")
