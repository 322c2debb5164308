"""Core evaluator for the minischeme interpreter.

Stateless and purely recursive: a form evaluates to a value or raises a
SchemeError. Dispatch order is self-evaluating literals, special forms,
primitive application, and finally rejection as a bad special form.
"""

from __future__ import annotations

from minischeme import SExpression, LispValue
from minischeme.evaluation.apply import apply
from minischeme.evaluation.special_forms import SPECIAL_FORMS
from minischeme.types.errors import SchemeBadFormError, SchemeRuntimeError
from minischeme.types.symbol import Symbol
from minischeme.types.values import is_number


def evaluate(expr: SExpression) -> LispValue:
    """
    Evaluate a form, reporting stack exhaustion on deeply nested input as a
    SchemeRuntimeError instead of letting RecursionError escape.
    """
    try:
        return evaluate0(expr)
    except RecursionError:
        raise SchemeRuntimeError("Maximum recursion depth exceeded") from None


def evaluate0(expr: SExpression) -> LispValue:
    # --- Self-evaluating: strings, integers, booleans ---
    if isinstance(expr, (str, bool)) or is_number(expr):
        return expr

    match expr:
        case [Symbol() as head, *tail_args] if isinstance(expr, list):
            form = SPECIAL_FORMS.get(head)
            if form is not None and form.accepts(tail_args):
                return form.handler(tail_args, evaluate0)

            # Arguments left to right; the first failure propagates
            args = [evaluate0(arg) for arg in tail_args]
            return apply(head, args)

    raise SchemeBadFormError("Unrecognized special form", expr)
