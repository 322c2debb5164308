"""Variant tests for the plain-Python value representation.

``bool`` subclasses ``int`` and a dotted list is a bare 2-tuple, so the
checks below are the single place that knows how to tell the variants apart.
"""

from __future__ import annotations
from fractions import Fraction

from minischeme import LispValue
from minischeme.types.char import Char
from minischeme.types.symbol import Symbol
from minischeme.types.vector import Vector


def is_bool(v: LispValue) -> bool:
    return isinstance(v, bool)


def is_number(v: LispValue) -> bool:
    return isinstance(v, int) and not isinstance(v, bool)


def is_float(v: LispValue) -> bool:
    return isinstance(v, float)


def is_ratio(v: LispValue) -> bool:
    return isinstance(v, Fraction)


def is_complex(v: LispValue) -> bool:
    return isinstance(v, complex)


def is_string(v: LispValue) -> bool:
    return isinstance(v, str)


def is_char(v: LispValue) -> bool:
    return isinstance(v, Char)


def is_symbol(v: LispValue) -> bool:
    return isinstance(v, Symbol)


def is_list(v: LispValue) -> bool:
    return isinstance(v, list)


def is_dotted(v: LispValue) -> bool:
    return isinstance(v, tuple) and len(v) == 2 and isinstance(v[0], list)


def is_vector(v: LispValue) -> bool:
    return isinstance(v, Vector)


_VARIANTS = (
    ("bool", is_bool),
    ("number", is_number),
    ("float", is_float),
    ("ratio", is_ratio),
    ("complex", is_complex),
    ("string", is_string),
    ("char", is_char),
    ("atom", is_symbol),
    ("list", is_list),
    ("dotted-list", is_dotted),
    ("vector", is_vector),
)


def variant_of(v: LispValue) -> str | None:
    """Return the variant tag of a value, or None for foreign Python objects."""
    for tag, test in _VARIANTS:
        if test(v):
            return tag
    return None
