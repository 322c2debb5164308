"""Coercions from values to native Python operands.

Each unpacker returns the native operand or raises SchemeTypeError naming the
expected type. The numeric and string unpackers are deliberately lenient:
strings holding a leading integer count as numbers, and numbers and booleans
stringify.
"""

from __future__ import annotations
import re

from minischeme import LispValue
from minischeme.types.errors import SchemeTypeError
from minischeme.types.values import is_bool, is_number

# Leading integer literal, remainder ignored: " 12abc" -> 12
_LEADING_INT_RE = re.compile(r"\s*(-?[0-9]+)")
# A fraction or exponent after the digits makes the literal non-integral
_FRACTIONAL_TAIL_RE = re.compile(r"\.[0-9]|[eE][-+]?[0-9]")


def unpack_num(value: LispValue) -> int:
    if is_number(value):
        return value
    if isinstance(value, str):
        m = _LEADING_INT_RE.match(value)
        if m is None or _FRACTIONAL_TAIL_RE.match(value, m.end()):
            raise SchemeTypeError("number", value)
        return int(m.group(1))
    if isinstance(value, list) and len(value) == 1:
        return unpack_num(value[0])
    raise SchemeTypeError("number", value)


def unpack_str(value: LispValue) -> str:
    if isinstance(value, str):
        return value
    if is_bool(value):
        return "True" if value else "False"
    if is_number(value):
        return str(value)
    raise SchemeTypeError("string", value)


def unpack_bool(value: LispValue) -> bool:
    if is_bool(value):
        return value
    raise SchemeTypeError("boolean", value)


UNPACKERS = (unpack_num, unpack_str, unpack_bool)
