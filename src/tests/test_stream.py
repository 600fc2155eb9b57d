import pytest
from jsonpath_rfc9535 import JSONPathSyntaxError, lex
from jsonpath_rfc9535.stream import TokenStream
from jsonpath_rfc9535.tokens import Kind


def test_peek_and_next():
    stream = TokenStream(lex("$.a"))
    assert stream.peek().kind == Kind.root
    assert stream.peek().kind == Kind.root
    assert stream.next().kind == Kind.root
    assert stream.next().kind == Kind.dot
    assert stream.next().value == "a"
    assert stream.peek().kind == Kind.eoi


def test_eoi_repeats():
    tokens = lex("$")
    stream = TokenStream(tokens)
    stream.next()
    for _ in range(3):
        assert stream.next() is tokens[-1]
        assert stream.peek() is tokens[-1]


def test_expect():
    stream = TokenStream(lex("$.a"))
    stream.expect(Kind.root)
    with pytest.raises(JSONPathSyntaxError) as excinfo:
        stream.expect(Kind.name)
    assert excinfo.value.token.kind == Kind.root
    # expect() doesn't consume anything
    assert stream.peek().kind == Kind.root


def test_expect_at_end():
    stream = TokenStream(lex("$"))
    stream.next()
    with pytest.raises(JSONPathSyntaxError, match="end of query"):
        stream.expect(Kind.close_square)


def test_expect_not():
    stream = TokenStream(lex("$.a"))
    stream.expect_not(Kind.dot, "no dots")
    stream.next()
    with pytest.raises(JSONPathSyntaxError, match="no dots"):
        stream.expect_not(Kind.dot, "no dots")


def test_requires_eoi():
    with pytest.raises(ValueError):
        TokenStream(lex("$")[:-1])
