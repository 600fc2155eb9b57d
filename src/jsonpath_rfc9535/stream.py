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
from typing import Sequence

from .exceptions import JSONPathSyntaxError
from .tokens import Kind, Token

__all__ = ("TokenStream",)


class TokenStream:
    # Single token lookahead over a token sequence. Once the real tokens are
    # used up, peek() and next() keep returning the end-of-input token

    def __init__(self, tokens: Sequence[Token]):
        if not tokens or tokens[-1].kind != Kind.eoi:
            raise ValueError("token sequence must end with an eoi token")
        self.tokens = tokens
        self.pos = 0
        self.eoi = tokens[-1]

    def __repr__(self):
        return f"<{type(self).__name__} at {self.peek()!r}>"

    def peek(self) -> Token:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return self.eoi

    def next(self) -> Token:
        token = self.peek()
        if self.pos < len(self.tokens):
            self.pos += 1
        return token

    def expect(self, kind: Kind) -> None:
        token = self.peek()
        if token.kind != kind:
            if token.kind == Kind.eoi:
                found = "end of query"
            else:
                found = repr(token.value)
            raise JSONPathSyntaxError(f"expected {kind.name}, found {found}",
                                      token=token)

    def expect_not(self, kind: Kind, message: str) -> None:
        token = self.peek()
        if token.kind == kind:
            raise JSONPathSyntaxError(message, token=token)
