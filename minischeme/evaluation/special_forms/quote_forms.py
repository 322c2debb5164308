from minischeme import SExpression, LispValue, EvaluatorFn


def quote_form(tail: list[SExpression], evaluate_fn: EvaluatorFn) -> LispValue:
    # (quote x) -> x, unevaluated
    return tail[0]
