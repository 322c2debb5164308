"""Equality primitives.

- eq? / eqv?: strict. Operands must share a variant; scalars compare by value,
  lists and vectors element-wise, dotted lists as the list of their head
  followed by their tail. Any cross-variant pair is simply false.
- equal?: weak. True when any unpacker (number, string, boolean) accepts both
  operands with agreeing results, or when eqv? holds. Lists and dotted lists
  recurse with equal? itself.
"""

from __future__ import annotations
from typing import Callable

from minischeme import LispValue
from minischeme.builtin.unpack import UNPACKERS
from minischeme.types.errors import SchemeArityError, SchemeError
from minischeme.types.values import is_dotted, variant_of

_SCALAR_VARIANTS = frozenset(
    {"bool", "number", "float", "ratio", "complex", "string", "char", "atom"}
)


def _as_list(dotted: tuple) -> list[LispValue]:
    head, tail = dotted
    return list(head) + [tail]


def _pairwise(eq_fn: Callable, xs, ys) -> bool:
    """Length check then element-wise comparison; an error counts as unequal."""
    if len(xs) != len(ys):
        return False
    for x, y in zip(xs, ys):
        try:
            if eq_fn([x, y]) is not True:
                return False
        except SchemeError:
            return False
    return True


def eqv(args: list[LispValue]) -> bool:
    if len(args) != 2:
        raise SchemeArityError(2, args)
    a, b = args
    kind = variant_of(a)
    if kind is None or kind != variant_of(b):
        return False
    if kind in _SCALAR_VARIANTS:
        return a == b
    if kind == "dotted-list":
        return eqv([_as_list(a), _as_list(b)])
    # list or vector
    return _pairwise(eqv, a, b)


def _unpack_equals(a: LispValue, b: LispValue, unpacker: Callable) -> bool:
    try:
        return unpacker(a) == unpacker(b)
    except SchemeError:
        return False


def equal(args: list[LispValue]) -> bool:
    if len(args) != 2:
        raise SchemeArityError(2, args)
    a, b = args
    if isinstance(a, list) and isinstance(b, list):
        return _pairwise(equal, a, b)
    if is_dotted(a) and is_dotted(b):
        return equal([_as_list(a), _as_list(b)])
    primitive_equals = any([_unpack_equals(a, b, unpacker) for unpacker in UNPACKERS])
    return primitive_equals or eqv([a, b])
