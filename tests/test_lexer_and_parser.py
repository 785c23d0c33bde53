import pytest
from hypothesis import given, strategies as st

from theta.errors import ThetaIncompleteInput, ThetaSyntaxError
from theta.reader.parser import TokenStream, lex, read
from theta.types.symbol import Symbol


# Convert nested list to Lisp source string
def _to_lisp_source(expr):
    if isinstance(expr, list):
        return f"({' '.join(_to_lisp_source(e) for e in expr)})"
    return str(expr)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("a", [("symbol", "a")]),
        ("'a", [("quote", "'"), ("symbol", "a")]),
        ("(a b c)", [("lparen", "("), ("symbol", "a"), ("symbol", "b"), ("symbol", "c"), ("rparen", ")")]),
        ('"hello"', [("string", '"hello"')]),
        (" ; comment\n a b", [("symbol", "a"), ("symbol", "b")]),
        ("(f)", [("lparen", "("), ("symbol", "f"), ("rparen", ")")]),
    ]
)
def test_lexer_basic(source, expected):
    tokens = list(lex(source))
    assert tokens == expected


@pytest.mark.parametrize(
    "source, expected",
    [
        ("123", 123),
        ("-45", -45),
        ("3.14", 3.14),
        ("#t", True),
        ("#f", False),
        ("inf", Symbol("inf")),
        ("set!", Symbol("set!")),
        ("'a",  [Symbol('quote'), Symbol('a')]),
        ("(a b c)", [Symbol('a'), Symbol('b'), Symbol('c')]),
        ("()", []),
        ('"hello"', "hello"),
        ('"a \\"b\\"\\n"', 'a "b"\n'),
        ('"line one\nline two"', "line one\nline two"),
    ]
)
def test_parser(source, expected):
    stream = TokenStream(lex(source))
    result = list(stream.parse_all())
    assert result[0] == expected
    assert type(result[0]) is type(expected)


def test_nested_lists():
    assert read("((a b) (c d)) x") == [
        [[Symbol('a'), Symbol('b')], [Symbol('c'), Symbol('d')]],
        Symbol('x'),
    ]


def test_parse_expr_returns_none_at_end():
    stream = TokenStream(lex("   ; only a comment"))
    assert stream.parse_expr() is None


@pytest.mark.parametrize("source", ["(a b", ")", "'", '"unterminated', '"bad \\x escape"'])
def test_reader_errors(source):
    with pytest.raises(ThetaSyntaxError):
        read(source)


@pytest.mark.parametrize("source", ["(define (f x)", "'", '"open string', "((a) (b"])
def test_incomplete_input(source):
    with pytest.raises(ThetaIncompleteInput):
        read(source)


symbols = st.from_regex(r"[a-z][a-z0-9\-!?*]{0,8}", fullmatch=True).map(Symbol)
trees = st.recursive(
    st.one_of(st.integers(), symbols),
    lambda children: st.lists(children, max_size=4),
    max_leaves=20,
)


@given(trees)
def test_printed_trees_read_back(tree):
    assert read(_to_lisp_source(tree)) == [tree]
