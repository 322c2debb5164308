"""
  Lisp Reader: lexer and parser

- Lazy lexing: tokens are produced only as the parser asks for them, so
  trailing input after the first expression is never inspected.
- Whitespace is a token. Elements of a list must be separated by at least one
  whitespace character and none may follow '(' or precede ')'.
- Emits plain Python values:

    - symbols -> Symbol
    - integers (decimal, #d #b #o #x) -> int
    - floats -> float
    - ratios -> fractions.Fraction
    - complex -> complex
    - strings -> str
    - characters -> Char
    - #t / #f -> bool
    - lists -> list
    - dotted lists -> (list_part, tail)
    - vectors -> Vector
    - quote forms -> [Symbol("quote"), expr], etc.
"""

from __future__ import annotations

import re
from fractions import Fraction
from typing import Iterator, Optional

from minischeme import SExpression
from minischeme.types.char import Char
from minischeme.types.errors import SchemeSyntaxError
from minischeme.types.symbol import Symbol
from minischeme.types.vector import Vector

_LETTER = r"[^\W\d_]"
_SYMBOL_CHARS = r"[!$%&|*+\-/:<=>?@^_~]"
_REAL = r"[0-9]+(?:\.[0-9]+)?"

TOKEN_RE = re.compile(
    r"(?P<space>\s+)"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<vector>#\()"  # vector literal
    r"|(?P<quote>['`,])"  # quote, quasiquote, unquote
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # escapes are checked by the parser
    rf"|(?P<char>#\\{_LETTER}*)"  # #\a, #\space, #\newline
    r"|(?P<bool>#[tf])"
    r"|(?P<radix>#[dbox][0-9A-Za-z]*)"  # digits checked against the radix
    rf"|(?P<complex>{_REAL}\+{_REAL}i)"
    r"|(?P<float>[0-9]+\.[0-9]+)"
    r"|(?P<ratio>[0-9]+/[0-9]+)"
    r"|(?P<integer>[0-9]+)"
    rf"|(?P<symbol>(?:{_LETTER}|{_SYMBOL_CHARS})(?:{_LETTER}|[0-9]|{_SYMBOL_CHARS})*)"
    r"|(?P<dot>\.)"
    r"|(?P<error>.)",
    re.DOTALL,
)

QUOTE_FORMS: dict[str, Symbol] = {
    "'": Symbol("quote"),
    "`": Symbol("quasiquote"),
    ",": Symbol("unquote"),
}

NAMED_CHARS: dict[str, str] = {
    "space": " ",
    "newline": "\n",
}

STRING_ESCAPES: dict[str, str] = {
    "\\": "\\",
    '"': '"',
    "n": "\n",
    "r": "\r",
    "t": "\t",
}

RADIX_DIGITS: dict[str, tuple[int, str]] = {
    "d": (10, "0123456789"),
    "b": (2, "01"),
    "o": (8, "01234567"),
    "x": (16, "0123456789abcdefABCDEF"),
}


def lex(source: str) -> Iterator[tuple[str, str]]:
    """Token generator: yields (token_type, token_value) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        m = TOKEN_RE.match(source, pos)
        yield m.lastgroup, m.group(m.lastgroup)
        pos = m.end()


def _describe(tok_type: Optional[str], tok_val: Optional[str]) -> str:
    if tok_type is None:
        return "unexpected end of input"
    if tok_type == "error" and tok_val == '"':
        return "unterminated string literal"
    return f"unexpected {tok_val!r}"


class TokenStream:
    def __init__(self, token_iter: Iterator[tuple[str, str]], name: str = "lisp"):
        self.tokens = iter(token_iter)
        self.buffer: list[tuple[str, str]] = []
        self.name = name
        self.line = 1
        self.column = 1

    def peek(self) -> tuple[Optional[str], Optional[str]]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str]]:
        tok = self.buffer.pop(0) if self.buffer else next(self.tokens, (None, None))
        if tok[1]:
            lines = tok[1].count("\n")
            if lines:
                self.line += lines
                self.column = len(tok[1]) - tok[1].rfind("\n")
            else:
                self.column += len(tok[1])
        return tok

    def error(self, message: str) -> SchemeSyntaxError:
        return SchemeSyntaxError(
            f'"{self.name}" (line {self.line}, column {self.column}): {message}'
        )

    def expect(self, expected: str, description: str) -> None:
        tok_type, tok_val = self.peek()
        if tok_type != expected:
            raise self.error(f"{_describe(tok_type, tok_val)}, expecting {description}")
        self.advance()

    def parse_expr(self) -> SExpression:
        tok_type, tok_val = self.peek()

        if tok_type == "symbol":
            self.advance()
            return Symbol(tok_val)

        if tok_type == "integer":
            value = self._to_int(tok_val, 10)
            self.advance()
            return value

        if tok_type == "float":
            self.advance()
            return float(tok_val)

        if tok_type == "ratio":
            num, denom = (self._to_int(part, 10) for part in tok_val.split("/"))
            if denom == 0:
                raise self.error(f"zero denominator in ratio {tok_val!r}")
            self.advance()
            return Fraction(num, denom)

        if tok_type == "complex":
            self.advance()
            real, imag = tok_val[:-1].split("+")
            return complex(float(real), float(imag))

        if tok_type == "radix":
            value = self._parse_radix(tok_val)
            self.advance()
            return value

        if tok_type == "bool":
            self.advance()
            return tok_val == "#t"

        if tok_type == "char":
            value = self._parse_char(tok_val)
            self.advance()
            return value

        if tok_type == "string":
            value = self._parse_string(tok_val)
            self.advance()
            return value

        # 'x -> (quote x), `x -> (quasiquote x), ,x -> (unquote x)
        if tok_type == "quote":
            self.advance()
            expr = self.parse_expr()
            return [QUOTE_FORMS[tok_val], expr]

        if tok_type == "lparen":
            self.advance()
            return self._parse_sequence(allow_dotted=True)

        if tok_type == "vector":
            self.advance()
            return Vector(self._parse_sequence(allow_dotted=False))

        raise self.error(_describe(tok_type, tok_val))

    def _parse_sequence(self, allow_dotted: bool) -> SExpression:
        """Read elements up to the closing ')' (the opening token is consumed)."""
        items: list[SExpression] = []
        if self.peek()[0] == "rparen":
            self.advance()
            return items
        if allow_dotted and self.peek()[0] == "dot":
            return self._parse_dotted_tail(items)

        while True:
            items.append(self.parse_expr())
            tok_type, tok_val = self.peek()
            if tok_type == "rparen":
                self.advance()
                return items
            if tok_type != "space":
                raise self.error(f"{_describe(tok_type, tok_val)}, expecting space or ')'")
            self.advance()
            if allow_dotted and self.peek()[0] == "dot":
                return self._parse_dotted_tail(items)

    def _parse_dotted_tail(self, items: list[SExpression]) -> tuple:
        self.advance()  # consume '.'
        self.expect("space", "space after '.'")
        tail = self.parse_expr()
        self.expect("rparen", "')' after dotted tail")
        return items, tail

    def _parse_radix(self, tok_val: str) -> int:
        base, alphabet = RADIX_DIGITS[tok_val[1]]
        digits = tok_val[2:]
        if not digits:
            raise self.error(f"missing digits after {tok_val[:2]!r}")
        bad = [c for c in digits if c not in alphabet]
        if bad:
            raise self.error(f"invalid digit {bad[0]!r} in {tok_val!r}")
        return self._to_int(digits, base)

    def _to_int(self, digits: str, base: int) -> int:
        try:
            return int(digits, base)
        except ValueError as e:
            # int() refuses decimal strings beyond sys.get_int_max_str_digits()
            raise self.error(str(e)) from None

    def _parse_char(self, tok_val: str) -> Char:
        name = tok_val[2:]  # strip off "#\"
        if name.lower() in NAMED_CHARS:
            return Char(NAMED_CHARS[name.lower()])
        if len(name) == 1:
            return Char(name)
        if not name:
            raise self.error("expecting letter after '#\\'")
        raise self.error(f"unknown character name {name!r}")

    def _parse_string(self, tok_val: str) -> str:
        body = tok_val[1:-1]
        out: list[str] = []
        i = 0
        while i < len(body):
            c = body[i]
            if c == "\\":
                esc = body[i + 1]
                if esc not in STRING_ESCAPES:
                    raise self.error(f"invalid escape sequence '\\{esc}' in string")
                out.append(STRING_ESCAPES[esc])
                i += 2
            else:
                out.append(c)
                i += 1
        return "".join(out)


def read_expr(source: str) -> SExpression:
    """Parse the first expression of ``source``.

    Raises SchemeSyntaxError on the first syntactic defect. Input nested
    deeper than the Python stack allows is reported the same way.
    """
    stream = TokenStream(lex(source))
    try:
        return stream.parse_expr()
    except RecursionError:
        raise SchemeSyntaxError("maximum nesting depth exceeded") from None
