from minischeme import EvaluatorFn
from minischeme import SExpression, LispValue
from minischeme.types.errors import SchemeTypeError


def if_form(tail: list[SExpression], evaluate_fn: EvaluatorFn) -> LispValue:
    pred, conseq, alt = tail

    result = evaluate_fn(pred)
    # Only #t and #f select a branch; there is no general truthiness
    if result is False:
        return evaluate_fn(alt)
    if result is True:
        return evaluate_fn(conseq)
    # The error reports the predicate expression, not its value
    raise SchemeTypeError("bool", pred)
