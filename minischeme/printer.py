"""Textual rendering of values.

``show`` is the inverse of the reader for atoms, integers, strings without
escapes, booleans, characters and list structure, so rendered output can be
fed back through ``read_expr``.
"""

from __future__ import annotations
from fractions import Fraction
from typing import Iterable

from minischeme import LispValue
from minischeme.types.char import Char
from minischeme.types.symbol import Symbol
from minischeme.types.vector import Vector
from minischeme.types.values import is_dotted

CHAR_NAMES: dict[str, str] = {
    " ": "space",
    "\n": "newline",
}


def _show_complex(z: complex) -> str:
    imag = repr(z.imag)
    if not imag.startswith("-"):
        imag = "+" + imag
    return f"{z.real!r}{imag}i"


def show(value: LispValue) -> str:
    if isinstance(value, Symbol):
        return value.name
    # bool before int: True is an int as far as isinstance is concerned
    if isinstance(value, bool):
        return "#t" if value else "#f"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, Fraction):
        return f"{value.numerator}/{value.denominator}"
    if isinstance(value, complex):
        return _show_complex(value)
    if isinstance(value, str):
        return f'"{value}"'
    if isinstance(value, Char):
        return "#\\" + CHAR_NAMES.get(value.value, value.value)
    if isinstance(value, list):
        return f"({show_many(value)})"
    if is_dotted(value):
        head, tail = value
        parts = [show(x) for x in head] + [".", show(tail)]
        return f"({' '.join(parts)})"
    if isinstance(value, Vector):
        return f"#({show_many(value)})"
    return repr(value)


def show_many(values: Iterable[LispValue]) -> str:
    """Render values separated by single spaces."""
    return " ".join(show(v) for v in values)
