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
from typing import NamedTuple

__all__ = ("Kind", "Span", "Token")


class Kind(enum.Enum):
    eoi = enum.auto()
    error = enum.auto()
    root = enum.auto()  # $
    current = enum.auto()  # @
    name = enum.auto()  # name
    dot = enum.auto()  # .
    double_dot = enum.auto()  # ..
    wild = enum.auto()  # *
    open_square = enum.auto()  # [
    close_square = enum.auto()  # ]
    comma = enum.auto()  # ,
    colon = enum.auto()  # :
    filter = enum.auto()  # ?
    open_paren = enum.auto()  # (
    close_paren = enum.auto()  # )
    int = enum.auto()  # 1
    float = enum.auto()  # 1.5e3
    double_quote_string = enum.auto()  # "string"
    single_quote_string = enum.auto()  # 'string'
    true = enum.auto()  # true
    false = enum.auto()  # false
    null = enum.auto()  # null
    function = enum.auto()  # name(
    and_ = enum.auto()  # &&
    or_ = enum.auto()  # ||
    not_ = enum.auto()  # !
    equals = enum.auto()  # ==
    not_eq = enum.auto()  # !=
    less_than = enum.auto()  # <
    less_than_eq = enum.auto()  # <=
    greater_than = enum.auto()  # >
    greater_than_eq = enum.auto()  # >=


class Span(NamedTuple):
    start: int
    stop: int


class Token(NamedTuple):
    kind: Kind
    value: str
    span: Span
    query: str = ""

    # The span and query text are diagnostic only, so two tokens with the
    # same kind and value compare equal wherever they came from

    def __eq__(self, other):
        return (isinstance(other, Token) and self.kind == other.kind and
                self.value == other.value)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.kind, self.value))

    def __repr__(self):
        return f"Token({self.kind.name}, {self.value!r}, {self.span.start})"

    def position(self) -> tuple[int, int]:
        # One-based line and column of the start of this token
        before = self.query[:self.span.start]
        line = before.count("\n") + 1
        column = self.span.start - (before.rfind("\n") + 1) + 1
        return line, column
