"""Registry of special forms for the minischeme evaluator.

Maps Symbols to handlers that implement non-standard evaluation rules. A form
is recognised only when its operand count matches; otherwise the evaluator
treats it as an ordinary application (which then fails, since no primitive
carries these names).
"""

from typing import Callable, NamedTuple, Optional

from minischeme.types.symbol import Symbol
from minischeme.evaluation.special_forms.quote_forms import quote_form
from minischeme.evaluation.special_forms.if_form import if_form
from minischeme.evaluation.special_forms.cond_form import cond_form


class SpecialForm(NamedTuple):
    handler: Callable
    operands: Optional[int] = None  # None: any number

    def accepts(self, tail: list) -> bool:
        return self.operands is None or len(tail) == self.operands


SPECIAL_FORMS = {
    Symbol("quote"): SpecialForm(quote_form, 1),
    Symbol("if"): SpecialForm(if_form, 3),
    Symbol("cond"): SpecialForm(cond_form),
}
