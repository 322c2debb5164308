import pytest
from fractions import Fraction
from hypothesis import given, strategies as st

from minischeme.reader.parser import lex, read_expr, TokenStream
from minischeme.types.char import Char
from minischeme.types.errors import SchemeSyntaxError
from minischeme.types.symbol import Symbol
from minischeme.types.vector import Vector


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("-5", [("symbol", "-5")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b)", [("lparen", "("), ("symbol", "a"), ("space", " "), ("symbol", "b"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        ("#b1010", [("radix", "#b1010")]),
        ("1.5 3/4 1+2i", [("float", "1.5"), ("space", " "), ("ratio", "3/4"), ("space", " "), ("complex", "1+2i")]),
        ("#t #\\a", [("bool", "#t"), ("space", " "), ("char", "#\\a")]),
        ("#(1)", [("vector", "#("), ("integer", "1"), ("rparen", ")")]),
        ("(a . b)", [("lparen", "("), ("symbol", "a"), ("space", " "), ("dot", "."),
                     ("space", " "), ("symbol", "b"), ("rparen", ")")]),
        ("`x ,y", [("quote", "`"), ("symbol", "x"), ("space", " "), ("quote", ","), ("symbol", "y")]),
        ("#z", [("error", "#"), ("symbol", "z")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("abc", Symbol("abc")),
        ("+", Symbol("+")),
        ("string->symbol", Symbol("string->symbol")),
        ("a1", Symbol("a1")),
        ("-5", Symbol("-5")),
        ("123", 123),
        ("#d42", 42),
        ("#b1010", 10),
        ("#o17", 15),
        ("#xFF", 255),
        ("#xff", 255),
        ("3.14", 3.14),
        ("3/4", Fraction(3, 4)),
        ("6/8", Fraction(3, 4)),
        ("1+2i", complex(1, 2)),
        ("1.5+0.5i", complex(1.5, 0.5)),
        ('"hello"', "hello"),
        ('"a\\nb"', "a\nb"),
        ('"tab\\there"', "tab\there"),
        ('"cr\\r"', "cr\r"),
        ('"q\\"x"', 'q"x'),
        ('"\\\\"', "\\"),
        ('"multi\nline"', "multi\nline"),
        ("#t", True),
        ("#f", False),
        ("#\\a", Char("a")),
        ("#\\A", Char("A")),
        ("#\\space", Char(" ")),
        ("#\\SPACE", Char(" ")),
        ("#\\Newline", Char("\n")),
        ("'a", [Symbol("quote"), Symbol("a")]),
        ("`a", [Symbol("quasiquote"), Symbol("a")]),
        (",a", [Symbol("unquote"), Symbol("a")]),
        ("''a", [Symbol("quote"), [Symbol("quote"), Symbol("a")]]),
        ("()", []),
        ("(a b c)", [Symbol("a"), Symbol("b"), Symbol("c")]),
        ("(a  b)", [Symbol("a"), Symbol("b")]),
        ("(a\n\tb)", [Symbol("a"), Symbol("b")]),
        ("(a . b)", ([Symbol("a")], Symbol("b"))),
        ("(a b . c)", ([Symbol("a"), Symbol("b")], Symbol("c"))),
        ("(. b)", ([], Symbol("b"))),
        ("(1 (2 3) . 4)", ([1, [2, 3]], 4)),
        ("'(1 . 2)", [Symbol("quote"), ([1], 2)]),
        ("#(1 2 3)", Vector([1, 2, 3])),
        ("#()", Vector()),
        ("#(1 #(2))", Vector([1, Vector([2])])),
    ]
)
def test_parser(source, expected):
    assert read_expr(source) == expected


def test_booleans_are_not_numbers():
    assert read_expr("#t") is True
    assert read_expr("#f") is False
    assert type(read_expr("1")) is int


def test_nested_lists():
    expected = [[Symbol("a"), Symbol("b")], [Symbol("c"), [Symbol("d")]]]
    assert read_expr("((a b) (c (d)))") == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        ("1 2", 1),
        ("(a) b", [Symbol("a")]),
        ("12abc", 12),
        ("#true", True),
        ("1 )))", 1),
        ("a \"unterminated", Symbol("a")),
    ]
)
def test_trailing_input_is_ignored(source, expected):
    assert read_expr(source) == expected


@pytest.mark.parametrize(
    "source",
    [
        "",             # empty input
        " 1",           # leading whitespace
        "( a)",         # whitespace after '('
        "(a )",         # whitespace before ')'
        "(a",           # unclosed list
        ")",
        ".",
        "(a . b c)",    # more than one tail expression
        "(a .b)",       # no space after '.'
        "(a . b )",
        "(a. b)",
        "(1+ 2)",
        "#(1 . 2)",     # vectors have no dotted form
        "' a",          # quote sugar takes the next expression directly
        '"abc',         # unterminated string
        '"a\\qb"',      # unknown escape
        "#\\",
        "#\\ab",
        "#\\1",
        "#b102",
        "#b",
        "#o8",
        "#xg",
        "#d",
        "#z",
        "1/0",
    ]
)
def test_parse_failures(source):
    with pytest.raises(SchemeSyntaxError):
        read_expr(source)


def test_failure_reports_position():
    with pytest.raises(SchemeSyntaxError) as exc:
        read_expr("(a )")
    assert '"lisp" (line 1, column 4)' in exc.value.message


def test_failure_position_tracks_lines():
    with pytest.raises(SchemeSyntaxError) as exc:
        read_expr("(a\n )")
    assert "(line 2, column 2)" in exc.value.message


def test_unterminated_string_message():
    with pytest.raises(SchemeSyntaxError) as exc:
        read_expr('"abc')
    assert "unterminated string literal" in exc.value.message


def test_deep_nesting_is_a_syntax_error():
    with pytest.raises(SchemeSyntaxError):
        read_expr("(" * 100_000)


def test_token_stream_only_pulls_what_it_needs():
    pulled = []

    def tokens():
        for tok in lex("(a) (b"):
            pulled.append(tok)
            yield tok

    stream = TokenStream(tokens())
    assert stream.parse_expr() == [Symbol("a")]
    assert len(pulled) <= 4


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.text(max_size=40))
def test_reader_never_crashes(source):
    try:
        read_expr(source)
    except SchemeSyntaxError:
        pass


@given(st.integers(min_value=0))
def test_integer_literal_round_trip(n):
    assert read_expr(str(n)) == n


@given(st.integers(min_value=0), st.sampled_from([("#b", "b"), ("#o", "o"), ("#x", "x")]))
def test_radix_literals(n, prefix):
    tag, fmt = prefix
    assert read_expr(tag + format(n, fmt)) == n
