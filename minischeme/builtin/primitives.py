"""Primitive procedures of the minischeme core.

Every primitive takes the list of already-evaluated arguments and returns a
value or raises a SchemeError subclass. PRIMITIVES is the read-only
name -> procedure table the evaluator dispatches through.
"""
from __future__ import annotations
import operator
from types import MappingProxyType
from typing import Callable, Mapping

from minischeme import LispValue, PrimitiveFn
from minischeme.builtin.equality import eqv, equal
from minischeme.builtin.unpack import unpack_bool, unpack_num, unpack_str
from minischeme.types.errors import (
    SchemeArityError,
    SchemeRuntimeError,
    SchemeTypeError,
)
from minischeme.types.symbol import Symbol
from minischeme.types.values import is_dotted, is_number


# -------------------------------
# Arithmetic
# -------------------------------
def _check_divisor(d: int) -> int:
    if d == 0:
        raise SchemeRuntimeError("Division by zero")
    return d


def floor_div(n: int, d: int) -> int:
    return n // _check_divisor(d)


def floor_mod(n: int, d: int) -> int:
    return n % _check_divisor(d)


def trunc_quot(n: int, d: int) -> int:
    q = abs(n) // abs(_check_divisor(d))
    return q if (n < 0) == (d < 0) else -q


def trunc_rem(n: int, d: int) -> int:
    return n - d * trunc_quot(n, d)


def numeric_binop(op: Callable[[int, int], int]) -> PrimitiveFn:
    """Left fold of op over two or more integer-coerced arguments."""

    def fold(args: list[LispValue]) -> int:
        if len(args) < 2:
            raise SchemeArityError(2, args)
        operands = [unpack_num(a) for a in args]
        result = operands[0]
        for x in operands[1:]:
            result = op(result, x)
        return result

    return fold


# -------------------------------
# Comparison
# -------------------------------
def bool_binop(unpacker: Callable, op: Callable) -> PrimitiveFn:
    """Exactly two arguments, both unpacked with the same unpacker."""

    def compare(args: list[LispValue]) -> bool:
        if len(args) != 2:
            raise SchemeArityError(2, args)
        left = unpacker(args[0])
        right = unpacker(args[1])
        return bool(op(left, right))

    return compare


def num_bool_binop(op: Callable) -> PrimitiveFn:
    return bool_binop(unpack_num, op)


def str_bool_binop(op: Callable) -> PrimitiveFn:
    return bool_binop(unpack_str, op)


def bool_bool_binop(op: Callable) -> PrimitiveFn:
    return bool_binop(unpack_bool, op)


# -------------------------------
# Predicates and conversions
# -------------------------------
def unary_op(fn: Callable[[LispValue], LispValue]) -> PrimitiveFn:
    def apply_unary(args: list[LispValue]) -> LispValue:
        if len(args) != 1:
            raise SchemeArityError(1, args)
        return fn(args[0])

    return apply_unary


def symbol_test(v: LispValue) -> bool:
    return isinstance(v, Symbol)


def string_test(v: LispValue) -> bool:
    return isinstance(v, str)


def number_test(v: LispValue) -> bool:
    return is_number(v)


def bool_test(v: LispValue) -> bool:
    return isinstance(v, bool)


def list_test(v: LispValue) -> bool:
    return isinstance(v, list) or is_dotted(v)


def symbol_to_string(v: LispValue) -> str:
    # Non-symbols map to "" rather than raising
    return v.name if isinstance(v, Symbol) else ""


def string_to_symbol(v: LispValue) -> Symbol:
    return Symbol(v) if isinstance(v, str) else Symbol("")


# -------------------------------
# Strings
# -------------------------------
def string_length(args: list[LispValue]) -> int:
    if len(args) != 1:
        raise SchemeArityError(1, args)
    s = args[0]
    if not isinstance(s, str):
        raise SchemeTypeError("string", s)
    return len(s)


def string_ref(args: list[LispValue]) -> str:
    if len(args) != 2:
        raise SchemeArityError(2, args)
    s, k = args
    if not isinstance(s, str):
        raise SchemeTypeError("string", s)
    if not is_number(k):
        raise SchemeTypeError("number", k)
    if k < 0 or k >= len(s):
        raise SchemeRuntimeError("Out of bound error")
    return s[k]


# -------------------------------
# Pairs
# -------------------------------
def car(args: list[LispValue]) -> LispValue:
    if len(args) != 1:
        raise SchemeArityError(1, args)
    v = args[0]
    if isinstance(v, list) and v:
        return v[0]
    if is_dotted(v) and v[0]:
        return v[0][0]
    raise SchemeTypeError("pair", v)


def cdr(args: list[LispValue]) -> LispValue:
    if len(args) != 1:
        raise SchemeArityError(1, args)
    v = args[0]
    if isinstance(v, list) and v:
        return v[1:]
    if is_dotted(v) and v[0]:
        head, tail = v
        if len(head) == 1:
            return tail
        return head[1:], tail
    raise SchemeTypeError("pair", v)


def cons(args: list[LispValue]) -> LispValue:
    if len(args) != 2:
        raise SchemeArityError(2, args)
    x, rest = args
    if isinstance(rest, list):
        return [x] + rest
    if is_dotted(rest):
        head, tail = rest
        return [x] + head, tail
    return [x], rest


# -------------------------------
# Registration
# -------------------------------
PRIMITIVES: Mapping[str, PrimitiveFn] = MappingProxyType({
    "+": numeric_binop(operator.add),
    "-": numeric_binop(operator.sub),
    "*": numeric_binop(operator.mul),
    "/": numeric_binop(floor_div),
    "mod": numeric_binop(floor_mod),
    "quotient": numeric_binop(trunc_quot),
    "remainder": numeric_binop(trunc_rem),
    "=": num_bool_binop(operator.eq),
    "<": num_bool_binop(operator.lt),
    ">": num_bool_binop(operator.gt),
    "/=": num_bool_binop(operator.ne),
    ">=": num_bool_binop(operator.ge),
    "<=": num_bool_binop(operator.le),
    "&&": bool_bool_binop(lambda a, b: a and b),
    "||": bool_bool_binop(lambda a, b: a or b),
    "string=?": str_bool_binop(operator.eq),
    "string<?": str_bool_binop(operator.lt),
    "string>?": str_bool_binop(operator.gt),
    "string<=?": str_bool_binop(operator.le),
    "string>=?": str_bool_binop(operator.ge),
    "string-length": string_length,
    "string-ref": string_ref,
    "symbol?": unary_op(symbol_test),
    "string?": unary_op(string_test),
    "number?": unary_op(number_test),
    "bool?": unary_op(bool_test),
    "list?": unary_op(list_test),
    "symbol->string": unary_op(symbol_to_string),
    "string->symbol": unary_op(string_to_symbol),
    "car": car,
    "cdr": cdr,
    "cons": cons,
    "eq?": eqv,
    "eqv?": eqv,
    "equal?": equal,
})
