# BSD 2-Clause License
#
# Copyright (c) 2023, Matt Chaput
#
# Redistribution and use in source and binary forms, with or without
# modification, are permitted provided that the following conditions are met:
#
# 1. Redistributions of source code must retain the above copyright notice, this
#    list of conditions and the following disclaimer.
#
# 2. Redistributions in binary form must reproduce the above copyright notice,
#    this list of conditions and the following disclaimer in the documentation
#    and/or other materials provided with the distribution.
#
# THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
# AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
# IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
# DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
# FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
# DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
# SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
# CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
# OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
# OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.

from __future__ import annotations
import re
from typing import Callable, Optional, Pattern, Union

from .exceptions import JSONPathSyntaxError
from .tokens import Kind, Span, Token

__all__ = ("Lexer", "lex")


LexerFn = Callable[[str, int], Optional[tuple[Token, int]]]

# RFC 9535 name-first and name-char
name_first = "A-Za-z_\\u0080-\\ud7ff\\ue000-\\U0010ffff"
name_expr = re.compile(f"[{name_first}][{name_first}0-9]*")
blank_expr = re.compile(r"[ \t\n\r]+")
number_expr = re.compile(r"-?\d+(?P<frac>[.]\d+)?(?P<exp>[eE][+-]?\d+)?")


def error_token(query: str, pos: int) -> Token:
    return Token(Kind.error, query[pos:pos + 1], Span(pos, pos + 1), query)


def lex_number(query: str, pos: int) -> Optional[tuple[Token, int]]:
    m = number_expr.match(query, pos)
    if not m:
        return None
    kind = Kind.float if m.group("frac") or m.group("exp") else Kind.int
    return Token(kind, m.group(), Span(pos, m.end()), query), m.end()


def lex_string_literal(query: str, pos: int) -> Optional[tuple[Token, int]]:
    quote_char = query[pos]
    if quote_char not in "'\"":
        return None

    kind = (Kind.single_quote_string if quote_char == "'"
            else Kind.double_quote_string)
    start_pos = pos
    pos += 1
    while pos < len(query):
        char = query[pos]
        if char == quote_char:
            # The token value is the raw, undecoded body of the literal
            return (Token(kind, query[start_pos + 1:pos],
                          Span(start_pos, pos + 1), query), pos + 1)
        elif char == "\\":
            pos += 2
        else:
            pos += 1

    raise JSONPathSyntaxError("unclosed string literal",
                              token=error_token(query, start_pos))


token_exprs: dict[Kind, Union[str, Pattern, LexerFn]] = {
    # The order is significant! For strings that share a prefix, the longer
    # should come first
    Kind.double_dot: "..",
    Kind.dot: ".",
    Kind.root: "$",
    Kind.current: "@",
    Kind.wild: "*",
    Kind.open_square: "[",
    Kind.close_square: "]",
    Kind.comma: ",",
    Kind.colon: ":",
    Kind.filter: "?",
    Kind.open_paren: "(",
    Kind.close_paren: ")",
    Kind.and_: "&&",
    Kind.or_: "||",
    Kind.not_eq: "!=",
    Kind.not_: "!",
    Kind.equals: "==",
    Kind.less_than_eq: "<=",
    Kind.less_than: "<",
    Kind.greater_than_eq: ">=",
    Kind.greater_than: ">",
    Kind.int: lex_number,
    Kind.double_quote_string: lex_string_literal,
    Kind.function: re.compile(r"([a-z][a-z0-9_]*)(?=\()"),
    Kind.true: re.compile(f"(true)(?![{name_first}0-9])"),
    Kind.false: re.compile(f"(false)(?![{name_first}0-9])"),
    Kind.null: re.compile(f"(null)(?![{name_first}0-9])"),
}


class Lexer:
    """Turns a query string into a list of tokens ending with an
    end-of-input token.
    """

    def __init__(self, exprs: dict[Kind, Union[str, Pattern, LexerFn]] = None):
        self.exprs = token_exprs if exprs is None else exprs

    def lex_token(self, query: str, pos: int
                  ) -> Optional[tuple[Token, int]]:
        for kind, expr in self.exprs.items():
            if isinstance(expr, str):
                if query.startswith(expr, pos):
                    return (Token(kind, expr, Span(pos, pos + len(expr)),
                                  query), pos + len(expr))
            elif callable(expr):
                result = expr(query, pos)
                if result:
                    return result
            elif m := expr.match(query, pos):
                token = Token(kind, m.group(1), Span(pos, m.end()), query)
                return token, m.end()
        return None

    def lex_shorthand(self, query: str, pos: int, after: Token
                      ) -> Optional[tuple[Token, int]]:
        # A member name or wildcard follows a dot immediately, with no blank
        # space in between. After `..` it may also be a bracketed selection
        if m := name_expr.match(query, pos):
            token = Token(Kind.name, m.group(), Span(pos, m.end()), query)
            return token, m.end()
        if query.startswith("*", pos):
            return Token(Kind.wild, "*", Span(pos, pos + 1), query), pos + 1
        if after.kind == Kind.double_dot and query.startswith("[", pos):
            return None
        raise JSONPathSyntaxError(
            f"expected a name or '*' after {after.value!r}",
            token=error_token(query, pos)
        )

    def tokenize(self, query: str) -> list[Token]:
        if not query:
            raise JSONPathSyntaxError("empty query")
        if blank_expr.match(query):
            raise JSONPathSyntaxError("unexpected leading whitespace",
                                      token=error_token(query, 0))

        pos = 0
        tokens: list[Token] = []
        while pos < len(query):
            if m := blank_expr.match(query, pos):
                if m.end() == len(query):
                    raise JSONPathSyntaxError("unexpected trailing whitespace",
                                              token=error_token(query, pos))
                pos = m.end()

            result = self.lex_token(query, pos)
            if not result:
                raise JSONPathSyntaxError(f"unexpected {query[pos]!r}",
                                          token=error_token(query, pos))
            token, pos = result
            tokens.append(token)

            if token.kind in (Kind.dot, Kind.double_dot):
                result = self.lex_shorthand(query, pos, token)
                if result:
                    token, pos = result
                    tokens.append(token)

        tokens.append(Token(Kind.eoi, "", Span(pos, pos), query))
        return tokens


def lex(query: str) -> list[Token]:
    return Lexer().tokenize(query)
