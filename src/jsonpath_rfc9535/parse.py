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
import enum
import re
from typing import TYPE_CHECKING, Optional, Sequence

from .exceptions import (JSONPathIndexError, JSONPathNameError,
                         JSONPathSyntaxError, JSONPathTypeError)
from .filter import (AndExpression, ComparisonExpression, Expression,
                     FunctionCall, Literal, NotExpression, OrExpression,
                     RelativeQuery, RootQuery)
from .function_extensions import ExpressionType
from .path import JSONPath
from .segments import ChildSegment, RecursiveDescentSegment, Segment
from .selectors import (FilterSelector, IndexSelector, NameSelector, Selector,
                        SliceSelector, WildcardSelector)
from .stream import TokenStream
from .tokens import Kind, Token

if TYPE_CHECKING:
    from .environment import JSONPathEnvironment

__all__ = ("Parser",)


class Precedence(enum.IntEnum):
    lowest = 1
    logical_or = 3
    logical_and = 4
    relational = 5
    prefix = 7


precedences: dict[Kind, Precedence] = {
    Kind.or_: Precedence.logical_or,
    Kind.and_: Precedence.logical_and,
    Kind.equals: Precedence.relational,
    Kind.not_eq: Precedence.relational,
    Kind.less_than: Precedence.relational,
    Kind.less_than_eq: Precedence.relational,
    Kind.greater_than: Precedence.relational,
    Kind.greater_than_eq: Precedence.relational,
}

comparison_operators: dict[Kind, str] = {
    Kind.equals: "==",
    Kind.not_eq: "!=",
    Kind.less_than: "<",
    Kind.less_than_eq: "<=",
    Kind.greater_than: ">",
    Kind.greater_than_eq: ">=",
}

string_kinds = (Kind.single_quote_string, Kind.double_quote_string)

simple_escapes: dict[str, str] = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "/": "/",
    "\\": "\\",
}

hex4_expr = re.compile(r"[0-9a-fA-F]{4}")
leading_zero_expr = re.compile(r"-?0\d")


class Parser:
    """Recursive descent parser turning a token sequence into a list of
    segments.

    Filter expressions are parsed by precedence climbing and checked
    against the function extensions registered with the environment, so
    badly typed function calls fail here rather than during a search.
    """

    def __init__(self, env: JSONPathEnvironment):
        self.env = env

    def parse(self, tokens: Sequence[Token]) -> list[Segment]:
        stream = TokenStream(tokens)
        stream.expect(Kind.root)
        stream.next()
        segments = self.parse_query(stream)

        token = stream.peek()
        if token.kind != Kind.eoi:
            raise JSONPathSyntaxError(f"unexpected {token.value!r}",
                                      token=token)
        return segments

    def parse_query(self, stream: TokenStream) -> list[Segment]:
        segments: list[Segment] = []

        while True:
            kind = stream.peek().kind
            if kind == Kind.double_dot:
                token = stream.next()
                selectors = self.parse_selectors(stream)
                segment_type = RecursiveDescentSegment
            elif kind == Kind.dot:
                token = stream.next()
                selectors = self.parse_selectors(stream)
                segment_type = ChildSegment
            elif kind == Kind.open_square:
                token = stream.peek()
                selectors = self.parse_selectors(stream)
                segment_type = ChildSegment
            else:
                break

            if not selectors:
                raise JSONPathSyntaxError(
                    f"expected a selector after {token.value!r}", token=token
                )
            segments.append(segment_type(token, tuple(selectors)))

        return segments

    def parse_selectors(self, stream: TokenStream) -> list[Selector]:
        kind = stream.peek().kind
        if kind == Kind.name:
            token = stream.next()
            return [NameSelector(token, token.value)]
        elif kind == Kind.wild:
            return [WildcardSelector(stream.next())]
        elif kind == Kind.open_square:
            return self.parse_bracketed_selection(stream)
        return []

    def parse_bracketed_selection(self, stream: TokenStream
                                  ) -> list[Selector]:
        stream.expect(Kind.open_square)
        segment_token = stream.next()

        selectors: list[Selector] = []
        while True:
            token = stream.peek()
            kind = token.kind
            if kind == Kind.close_square:
                break
            elif kind == Kind.int:
                selectors.append(self.parse_index_or_slice(stream))
            elif kind in string_kinds:
                stream.next()
                selectors.append(
                    NameSelector(token, self.decode_string_literal(token))
                )
            elif kind == Kind.colon:
                selectors.append(self.parse_slice_selector(stream))
            elif kind == Kind.wild:
                selectors.append(WildcardSelector(stream.next()))
            elif kind == Kind.filter:
                selectors.append(self.parse_filter_selector(stream))
            elif kind == Kind.eoi:
                raise JSONPathSyntaxError("unexpected end of query",
                                          token=token)
            else:
                raise JSONPathSyntaxError(
                    f"unexpected {token.value!r} in bracketed selection",
                    token=token
                )

            kind = stream.peek().kind
            if kind == Kind.eoi:
                raise JSONPathSyntaxError("unexpected end of selector list",
                                          token=stream.peek())
            elif kind == Kind.close_square:
                break
            stream.expect(Kind.comma)
            stream.next()
            stream.expect_not(Kind.close_square, "unexpected trailing comma")

        if not selectors:
            raise JSONPathSyntaxError("empty bracketed segment",
                                      token=segment_token)
        stream.next()
        return selectors

    def parse_index_or_slice(self, stream: TokenStream) -> Selector:
        token = stream.next()
        index = self.parse_i_json_int(token)
        if stream.peek().kind != Kind.colon:
            return IndexSelector(token, index)

        stream.next()
        return self.parse_slice_rest(stream, token, index)

    def parse_slice_selector(self, stream: TokenStream) -> SliceSelector:
        stream.expect(Kind.colon)
        token = stream.next()
        return self.parse_slice_rest(stream, token, None)

    def parse_slice_rest(self, stream: TokenStream, token: Token,
                         start: Optional[int]) -> SliceSelector:
        # Called after the first colon
        stop = None
        step = None
        if stream.peek().kind == Kind.int:
            stop = self.parse_i_json_int(stream.next())
        if stream.peek().kind == Kind.colon:
            stream.next()
            if stream.peek().kind == Kind.int:
                step = self.parse_i_json_int(stream.next())
        return SliceSelector(token, start, stop, step)

    def parse_i_json_int(self, token: Token) -> int:
        value = token.value
        if len(value) > 1 and value.startswith(("0", "-0")):
            raise JSONPathSyntaxError(f"invalid index {value!r}", token=token)

        number = int(value)
        if not self.env.min_int_index <= number <= self.env.max_int_index:
            raise JSONPathIndexError(f"index {value} is out of range",
                                     token=token)
        return number

    def decode_string_literal(self, token: Token) -> str:
        quote = "'" if token.kind == Kind.single_quote_string else '"'
        value = token.value
        out: list[str] = []
        i = 0
        while i < len(value):
            char = value[i]
            if char == "\\":
                i += 1
                escape = value[i:i + 1]
                if escape in simple_escapes:
                    out.append(simple_escapes[escape])
                elif escape == quote:
                    out.append(quote)
                elif escape == "u":
                    char, i = self.decode_unicode_escape(token, value, i)
                    out.append(char)
                else:
                    raise JSONPathSyntaxError(
                        f"invalid escape sequence '\\{escape}'", token=token
                    )
            elif ord(char) < 0x20:
                raise JSONPathSyntaxError(
                    f"invalid character {char!r} in string literal",
                    token=token
                )
            else:
                out.append(char)
            i += 1
        return "".join(out)

    def decode_unicode_escape(self, token: Token, value: str, pos: int
                              ) -> tuple[str, int]:
        # pos is at the "u" of a \uXXXX escape. Returns the decoded character
        # and the position of the last character consumed
        m = hex4_expr.match(value, pos + 1)
        if not m:
            raise JSONPathSyntaxError("invalid \\u escape", token=token)
        code = int(m.group(), 16)
        pos = m.end() - 1

        if 0xDC00 <= code <= 0xDFFF:
            raise JSONPathSyntaxError("unexpected low surrogate", token=token)
        if 0xD800 <= code <= 0xDBFF:
            low = None
            if value.startswith("\\u", pos + 1):
                low = hex4_expr.match(value, pos + 3)
            if not low or not 0xDC00 <= int(low.group(), 16) <= 0xDFFF:
                raise JSONPathSyntaxError("unpaired high surrogate",
                                          token=token)
            code = (0x10000 + ((code - 0xD800) << 10) +
                    (int(low.group(), 16) - 0xDC00))
            pos = low.end() - 1

        return chr(code), pos

    # Filter expressions

    def parse_filter_selector(self, stream: TokenStream) -> FilterSelector:
        stream.expect(Kind.filter)
        token = stream.next()
        expr = self.parse_filter_expression(stream)
        self.check_test(expr)
        return FilterSelector(token, expr, self.env)

    def parse_filter_expression(self, stream: TokenStream,
                                precedence: int = Precedence.lowest
                                ) -> Expression:
        grouped = stream.peek().kind == Kind.open_paren
        left = self.parse_prefix(stream)

        while True:
            kind = stream.peek().kind
            if precedence >= precedences.get(kind, 0):
                break

            token = stream.next()
            if kind in comparison_operators and grouped:
                raise JSONPathSyntaxError(
                    "parenthesized expression is not comparable", token=token
                )
            left = self.parse_infix(stream, left, token)
            grouped = False

        return left

    def parse_prefix(self, stream: TokenStream) -> Expression:
        token = stream.next()
        kind = token.kind

        if kind in string_kinds:
            return Literal(token, self.decode_string_literal(token))
        elif kind == Kind.int:
            self.check_number(token)
            return Literal(token, int(token.value))
        elif kind == Kind.float:
            self.check_number(token)
            return Literal(token, float(token.value))
        elif kind == Kind.true:
            return Literal(token, True)
        elif kind == Kind.false:
            return Literal(token, False)
        elif kind == Kind.null:
            return Literal(token, None)
        elif kind == Kind.not_:
            expr = self.parse_filter_expression(stream, Precedence.prefix)
            self.check_test(expr)
            return NotExpression(token, expr)
        elif kind == Kind.open_paren:
            expr = self.parse_filter_expression(stream)
            stream.expect(Kind.close_paren)
            stream.next()
            self.check_test(expr)
            return expr
        elif kind == Kind.root:
            return RootQuery(token, JSONPath(self.env,
                                             self.parse_query(stream)))
        elif kind == Kind.current:
            return RelativeQuery(token, JSONPath(self.env,
                                                 self.parse_query(stream)))
        elif kind == Kind.function:
            return self.parse_function_call(stream, token)
        elif kind == Kind.eoi:
            raise JSONPathSyntaxError("unexpected end of filter expression",
                                      token=token)
        raise JSONPathSyntaxError(
            f"unexpected {token.value!r} in filter expression", token=token
        )

    def parse_infix(self, stream: TokenStream, left: Expression,
                    token: Token) -> Expression:
        if token.kind in comparison_operators:
            if stream.peek().kind == Kind.open_paren:
                raise JSONPathSyntaxError(
                    "parenthesized expression is not comparable",
                    token=stream.peek()
                )
            right = self.parse_filter_expression(stream,
                                                 precedences[token.kind])
            self.check_comparable(left)
            self.check_comparable(right)
            return ComparisonExpression(token, left,
                                        comparison_operators[token.kind],
                                        right)

        right = self.parse_filter_expression(stream, precedences[token.kind])
        self.check_test(left)
        self.check_test(right)
        if token.kind == Kind.and_:
            return AndExpression(token, left, right)
        return OrExpression(token, left, right)

    def parse_function_call(self, stream: TokenStream, token: Token
                            ) -> FunctionCall:
        stream.expect(Kind.open_paren)
        stream.next()

        args: list[Expression] = []
        while stream.peek().kind != Kind.close_paren:
            args.append(self.parse_filter_expression(stream))
            if stream.peek().kind != Kind.close_paren:
                stream.expect(Kind.comma)
                stream.next()
                stream.expect_not(Kind.close_paren,
                                  "unexpected trailing comma")
        stream.next()

        return self.check_function(FunctionCall(token, token.value,
                                                tuple(args)))

    def check_number(self, token: Token) -> None:
        if leading_zero_expr.match(token.value):
            raise JSONPathSyntaxError(f"invalid number {token.value!r}",
                                      token=token)

    # Static checks

    def return_type(self, call: FunctionCall) -> ExpressionType:
        return self.env.function_extensions[call.name].return_type

    def check_test(self, expr: Expression) -> None:
        # Raises an exception if the expression can't be used where a
        # logical result is expected
        if isinstance(expr, Literal):
            raise JSONPathSyntaxError(
                "filter expression literals must be compared",
                token=expr.token
            )
        if (isinstance(expr, FunctionCall) and
                self.return_type(expr) == ExpressionType.value):
            raise JSONPathTypeError(
                f"result of {expr.name}() must be compared", token=expr.token
            )

    def check_comparable(self, expr: Expression) -> None:
        if isinstance(expr, Literal):
            return
        if isinstance(expr, (RelativeQuery, RootQuery)):
            if not expr.path.singular_query():
                raise JSONPathSyntaxError(
                    "non-singular query is not comparable", token=expr.token
                )
            return
        if isinstance(expr, FunctionCall):
            if self.return_type(expr) != ExpressionType.value:
                raise JSONPathTypeError(
                    f"result of {expr.name}() is not comparable",
                    token=expr.token
                )
            return
        raise JSONPathSyntaxError("expected a literal, singular query or "
                                  "function call", token=expr.token)

    def check_function(self, call: FunctionCall) -> FunctionCall:
        func = self.env.function_extensions.get(call.name)
        if func is None:
            raise JSONPathNameError(f"function {call.name!r} is not defined",
                                    token=call.token)

        if len(call.args) != len(func.arg_types):
            raise JSONPathTypeError(
                f"{call.name}() takes {len(func.arg_types)} argument(s), "
                f"{len(call.args)} given", token=call.token
            )

        for i, (arg, arg_type) in enumerate(zip(call.args, func.arg_types)):
            if not self.accepts(arg_type, arg):
                raise JSONPathTypeError(
                    f"{call.name}() argument {i + 1} must be of "
                    f"{arg_type.name.capitalize()}Type", token=call.token
                )
        return call

    def accepts(self, arg_type: ExpressionType, arg: Expression) -> bool:
        if isinstance(arg, FunctionCall):
            returns = self.return_type(arg)
        else:
            returns = None
        query = isinstance(arg, (RelativeQuery, RootQuery))

        if arg_type == ExpressionType.value:
            return (isinstance(arg, Literal) or
                    (query and arg.path.singular_query()) or
                    returns == ExpressionType.value)
        elif arg_type == ExpressionType.logical:
            return (query or
                    isinstance(arg, (NotExpression, AndExpression,
                                     OrExpression, ComparisonExpression)) or
                    returns in (ExpressionType.logical, ExpressionType.nodes))
        return query or returns == ExpressionType.nodes
