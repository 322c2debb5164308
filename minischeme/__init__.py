# Core type aliases for minischeme's data model.
# Plain Python types represent both parsed forms and evaluated values:
#
#   Atom       -> Symbol            String  -> str
#   Number     -> int               Char    -> Char
#   Float      -> float             Bool    -> bool
#   Ratio      -> fractions.Fraction
#   Complex    -> complex
#   List       -> list              DottedList -> (list_part, tail) tuple
#   Vector     -> Vector
#
# bool is a subclass of int in Python, so every Number check must rule out
# bool first (see minischeme.types.values).
#
# Naming guidance:
# - SExpression: use in reader/special-form code to denote syntactic forms.
# - LispValue:  use in evaluator/primitive code to denote evaluated values.

from typing import Any, Callable

LispValue = Any
SExpression = LispValue

# Evaluator function type handed to special forms
EvaluatorFn = Callable[[SExpression], LispValue]

# Primitive procedure type: evaluated arguments in, value out
PrimitiveFn = Callable[[list], LispValue]

__version__ = "0.1.0"
