"""Application of primitive procedures by name."""

from minischeme import LispValue
from minischeme.builtin.primitives import PRIMITIVES
from minischeme.types.errors import SchemeNotFunctionError
from minischeme.types.symbol import Symbol


def apply(func: Symbol, args: list[LispValue]) -> LispValue:
    """Call the primitive named by ``func`` with already-evaluated args."""
    fn = PRIMITIVES.get(func.name)
    if fn is None:
        raise SchemeNotFunctionError("Unrecognized primitive function args", func.name)
    return fn(args)
