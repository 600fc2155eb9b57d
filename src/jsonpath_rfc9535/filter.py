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
import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, NamedTuple, Union

from .function_extensions import ExpressionType
from .node import NOTHING, JsonValue, NodeList, ValueKind, value_kind
from .tokens import Token

if TYPE_CHECKING:
    from .environment import JSONPathEnvironment
    from .path import JSONPath

__all__ = (
    "Expression", "Literal", "NotExpression", "AndExpression", "OrExpression",
    "ComparisonExpression", "RelativeQuery", "RootQuery", "FunctionCall",
    "FilterContext", "evaluate", "evaluate_logical", "compare",
)


class FilterContext(NamedTuple):
    env: JSONPathEnvironment
    current: JsonValue
    root: JsonValue


@dataclass(frozen=True)
class Literal:
    token: Token
    value: JsonValue

    def __str__(self):
        return json.dumps(self.value)


@dataclass(frozen=True)
class NotExpression:
    token: Token
    expression: Expression

    def __str__(self):
        return f"!{self.expression}"


@dataclass(frozen=True)
class AndExpression:
    token: Token
    left: Expression
    right: Expression

    def __str__(self):
        return f"({self.left} && {self.right})"


@dataclass(frozen=True)
class OrExpression:
    token: Token
    left: Expression
    right: Expression

    def __str__(self):
        return f"({self.left} || {self.right})"


@dataclass(frozen=True)
class ComparisonExpression:
    token: Token
    left: Expression
    op: str
    right: Expression

    def __str__(self):
        return f"{self.left} {self.op} {self.right}"


@dataclass(frozen=True)
class RelativeQuery:
    token: Token
    path: JSONPath

    def __str__(self):
        return "@" + str(self.path)[1:]


@dataclass(frozen=True)
class RootQuery:
    token: Token
    path: JSONPath

    def __str__(self):
        return str(self.path)


@dataclass(frozen=True)
class FunctionCall:
    token: Token
    name: str
    args: tuple[Expression, ...] = field(default=())

    def __str__(self):
        return f"{self.name}({', '.join(str(arg) for arg in self.args)})"


Expression = Union[
    Literal, NotExpression, AndExpression, OrExpression, ComparisonExpression,
    RelativeQuery, RootQuery, FunctionCall
]
Query = (RelativeQuery, RootQuery)


def values_equal(left: Any, right: Any) -> bool:
    if left is NOTHING or right is NOTHING:
        return left is right

    kind = value_kind(left)
    if kind != value_kind(right):
        return False
    if kind == ValueKind.sequence:
        return (len(left) == len(right) and
                all(values_equal(a, b) for a, b in zip(left, right)))
    if kind == ValueKind.mapping:
        return (left.keys() == right.keys() and
                all(values_equal(v, right[k]) for k, v in left.items()))
    return left == right


def values_less(left: Any, right: Any) -> bool:
    kind = value_kind(left)
    if kind != value_kind(right):
        return False
    if kind in (ValueKind.number, ValueKind.string):
        return left < right
    return False


comparison_ops: dict[str, Callable[[Any, Any], bool]] = {
    "==": values_equal,
    "!=": lambda a, b: not values_equal(a, b),
    "<": values_less,
    "<=": lambda a, b: values_less(a, b) or values_equal(a, b),
    ">": lambda a, b: values_less(b, a),
    ">=": lambda a, b: values_less(b, a) or values_equal(a, b),
}


def compare(left: Any, op: str, right: Any) -> bool:
    return comparison_ops[op](left, right)


def _eval_literal(expr: Literal, context: FilterContext) -> JsonValue:
    return expr.value


def _eval_not(expr: NotExpression, context: FilterContext) -> bool:
    return not evaluate_logical(expr.expression, context)


def _eval_and(expr: AndExpression, context: FilterContext) -> bool:
    return (evaluate_logical(expr.left, context) and
            evaluate_logical(expr.right, context))


def _eval_or(expr: OrExpression, context: FilterContext) -> bool:
    return (evaluate_logical(expr.left, context) or
            evaluate_logical(expr.right, context))


def _eval_comparison(expr: ComparisonExpression, context: FilterContext
                     ) -> bool:
    left = evaluate_value(expr.left, context)
    right = evaluate_value(expr.right, context)
    return compare(left, expr.op, right)


def _eval_relative(expr: RelativeQuery, context: FilterContext) -> NodeList:
    return expr.path.find(context.current, context.root)


def _eval_root(expr: RootQuery, context: FilterContext) -> NodeList:
    return expr.path.find(context.root)


def _eval_call(expr: FunctionCall, context: FilterContext) -> Any:
    func = context.env.function_extensions[expr.name]
    args = []
    for arg, arg_type in zip(expr.args, func.arg_types):
        if arg_type == ExpressionType.value:
            args.append(evaluate_value(arg, context))
        elif arg_type == ExpressionType.logical:
            args.append(evaluate_logical(arg, context))
        else:
            args.append(evaluate(arg, context))
    return func(*args)


_evaluators: dict[type, Callable[[Any, FilterContext], Any]] = {
    Literal: _eval_literal,
    NotExpression: _eval_not,
    AndExpression: _eval_and,
    OrExpression: _eval_or,
    ComparisonExpression: _eval_comparison,
    RelativeQuery: _eval_relative,
    RootQuery: _eval_root,
    FunctionCall: _eval_call,
}


def evaluate(expression: Expression, context: FilterContext) -> Any:
    return _evaluators[type(expression)](expression, context)


def evaluate_value(expression: Expression, context: FilterContext) -> Any:
    # A singular query used as a value is the value of its only node, or
    # NOTHING if it selected nothing
    result = evaluate(expression, context)
    if isinstance(expression, Query):
        return result[0].value if len(result) == 1 else NOTHING
    return result


def evaluate_logical(expression: Expression, context: FilterContext) -> bool:
    # Queries and functions returning nodes are existence tests. Function
    # results in a test position are read by truthiness
    result = evaluate(expression, context)
    if isinstance(result, NodeList) or isinstance(expression, FunctionCall):
        return bool(result)
    return result is True
