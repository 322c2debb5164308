"""Special form: cond.

(cond (test expr) ... (else expr))

Clauses are tried in order. Each test must evaluate to a boolean; the first
true test selects its expression. ``else`` is honoured only as the test of
the final clause. Clauses after the selected one are never inspected.
"""

from minischeme import SExpression, LispValue, EvaluatorFn
from minischeme.builtin.unpack import unpack_bool
from minischeme.types.errors import SchemeArityError, SchemeRuntimeError
from minischeme.types.symbol import Symbol

ELSE = Symbol("else")


def cond_form(tail: list[SExpression], evaluate_fn: EvaluatorFn) -> LispValue:
    last_index = len(tail) - 1
    for i, clause in enumerate(tail):
        if not isinstance(clause, list):
            raise SchemeArityError(2, [clause])
        if len(clause) != 2:
            raise SchemeArityError(2, clause)
        test, expr = clause

        if test == ELSE and i == last_index:
            return evaluate_fn(expr)

        if unpack_bool(evaluate_fn(test)):
            return evaluate_fn(expr)

    raise SchemeRuntimeError("Not viable alternative in cond")
