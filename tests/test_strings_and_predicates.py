import pytest

from minischeme.builtin.primitives import PRIMITIVES
from minischeme.types.errors import SchemeArityError, SchemeRuntimeError, SchemeTypeError
from minischeme.types.symbol import Symbol


# -------------------------------
# string-length / string-ref
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ('(string-length "hello")', 5),
        ('(string-length "")', 0),
        ('(string-ref "hello" 1)', "e"),
        ('(string-ref "hello" 0)', "h"),
        ('(string-ref "hello" 4)', "o"),
    ]
)
def test_string_operations(run, source, expected):
    assert run(source) == expected


@pytest.mark.parametrize(
    "source,error",
    [
        ("(string-length 5)", SchemeTypeError("string", 5)),
        ('(string-length "a" "b")', SchemeArityError(1, ["a", "b"])),
        ("(string-length)", SchemeArityError(1, [])),
        ('(string-ref "hello" 5)', SchemeRuntimeError("Out of bound error")),
        ('(string-ref "hello" (- 0 1))', SchemeRuntimeError("Out of bound error")),
        ('(string-ref "" 0)', SchemeRuntimeError("Out of bound error")),
        ('(string-ref "hello" "1")', SchemeTypeError("number", "1")),
        ("(string-ref 5 1)", SchemeTypeError("string", 5)),
        ('(string-ref "a")', SchemeArityError(2, ["a"])),
        ('(string-ref "a" 0 0)', SchemeArityError(2, ["a", 0, 0])),
    ]
)
def test_string_operation_errors(run, source, error):
    with pytest.raises(type(error)) as exc:
        run(source)
    assert exc.value == error


# -------------------------------
# Type predicates
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(symbol? 'a)", True),
        ('(symbol? "a")', False),
        ('(string? "a")', True),
        ("(string? 'a)", False),
        ("(number? 1)", True),
        ("(number? #t)", False),
        ('(number? "1")', False),
        ("(number? '1.5)", False),
        ("(bool? #f)", True),
        ("(bool? 0)", False),
        ("(list? '(1 2))", True),
        ("(list? '(1 . 2))", True),
        ("(list? '())", True),
        ("(list? 1)", False),
        ("(list? '#(1))", False),
    ]
)
def test_type_predicates(run, source, expected):
    assert run(source) is expected


@pytest.mark.parametrize("name", ["symbol?", "string?", "number?", "bool?", "list?"])
def test_type_predicate_arity(name):
    fn = PRIMITIVES[name]
    with pytest.raises(SchemeArityError) as exc:
        fn([])
    assert exc.value == SchemeArityError(1, [])
    with pytest.raises(SchemeArityError):
        fn([1, 2])


# -------------------------------
# Symbol / string conversion
# -------------------------------
@pytest.mark.parametrize(
    "source,expected",
    [
        ("(symbol->string 'abc)", "abc"),
        ('(string->symbol "abc")', Symbol("abc")),
        ("(symbol->string 1)", ""),          # permissive fallback
        ("(string->symbol 1)", Symbol("")),  # permissive fallback
        ("(string->symbol (symbol->string 'x))", Symbol("x")),
    ]
)
def test_symbol_string_conversion(run, source, expected):
    assert run(source) == expected


def test_symbol_string_conversion_arity(run):
    with pytest.raises(SchemeArityError):
        run("(symbol->string 'a 'b)")


def test_primitive_table_is_read_only():
    with pytest.raises(TypeError):
        PRIMITIVES["car"] = None
