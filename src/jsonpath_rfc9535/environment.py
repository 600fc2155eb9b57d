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
import logging
from typing import Iterable, Optional

from . import function_extensions
from .function_extensions import FilterFunction
from .lex import Lexer
from .node import JSONPathNode, JsonValue, NodeList
from .parse import Parser
from .path import JSONPath

__all__ = ("JSONPathEnvironment",)

logger = logging.getLogger(__name__)


class JSONPathEnvironment:
    """Configuration for compiling and running JSONPath queries.

    An environment owns the function extensions available to filter
    expressions. Subclass it and override ``setup_function_extensions`` to
    add or remove functions, or register them after construction::

        env = JSONPathEnvironment()
        env.function_extensions["upper"] = MyUpperFunction()

    Class attributes select the lexer and parser and the range of integers
    allowed as indexes and slice bounds.
    """

    lexer_class: type[Lexer] = Lexer
    parser_class: type[Parser] = Parser

    # I-JSON limits for integers used as indexes and slice bounds
    max_int_index = (2 ** 53) - 1
    min_int_index = -(2 ** 53) + 1

    def __init__(self, *,
                 function_extensions: Optional[
                     dict[str, FilterFunction]] = None,
                 regex_cache_size: int = 128,
                 raise_regex_errors: bool = False):
        self.regex_cache_size = regex_cache_size
        self.raise_regex_errors = raise_regex_errors
        self.lexer = self.lexer_class()
        self.parser = self.parser_class(self)

        self.function_extensions: dict[str, FilterFunction] = {}
        if function_extensions is None:
            self.setup_function_extensions()
        else:
            self.function_extensions.update(function_extensions)

    def setup_function_extensions(self) -> None:
        self.function_extensions["length"] = function_extensions.Length()
        self.function_extensions["count"] = function_extensions.Count()
        self.function_extensions["value"] = function_extensions.Value()
        self.function_extensions["match"] = function_extensions.Match(
            cache_size=self.regex_cache_size,
            raise_errors=self.raise_regex_errors,
        )
        self.function_extensions["search"] = function_extensions.Search(
            cache_size=self.regex_cache_size,
            raise_errors=self.raise_regex_errors,
        )

    def compile(self, query: str) -> JSONPath:
        """Parse a query string into a reusable ``JSONPath``.

        Raises ``JSONPathSyntaxError`` for malformed queries,
        ``JSONPathTypeError`` or ``JSONPathNameError`` for badly typed or
        unknown function calls, and ``JSONPathIndexError`` for index values
        outside the I-JSON range.
        """

        tokens = self.lexer.tokenize(query)
        path = JSONPath(self, self.parser.parse(tokens))
        logger.debug("Compiled %r -> %s", query, path)
        return path

    def finditer(self, query: str, data: JsonValue
                 ) -> Iterable[JSONPathNode]:
        return self.compile(query).finditer(data)

    def find(self, query: str, data: JsonValue) -> NodeList:
        return self.compile(query).find(data)
