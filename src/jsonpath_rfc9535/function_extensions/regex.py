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
import re
from typing import Pattern

from ..lru_cache import LRUCache
from ..node import JsonValue
from .filter_function import ExpressionType, FilterFunction
from .iregexp import map_iregexp

__all__ = ("AbstractRegexFunction", "Match", "Search")

logger = logging.getLogger(__name__)


class AbstractRegexFunction(FilterFunction):
    # Base for functions that test a string against an I-Regexp pattern.
    # Compiled patterns are kept in an LRU cache owned by the instance

    arg_types = (ExpressionType.value, ExpressionType.value)
    return_type = ExpressionType.logical

    def __init__(self, cache_size: int = 128, raise_errors: bool = False):
        self.cache = LRUCache(capacity=cache_size)
        self.raise_errors = raise_errors

    def compile(self, pattern: str) -> Pattern:
        compiled = self.cache.get(pattern)
        if compiled is None:
            compiled = re.compile(map_iregexp(pattern))
            self.cache.put(pattern, compiled)
        return compiled

    def test(self, compiled: Pattern, value: str) -> bool:
        raise NotImplementedError

    def __call__(self, value: JsonValue, pattern: JsonValue) -> bool:
        if not isinstance(value, str) or not isinstance(pattern, str):
            return False

        try:
            compiled = self.compile(pattern)
        except re.error:
            if self.raise_errors:
                raise
            logger.debug("%s: can't compile pattern %r", type(self).__name__,
                         pattern)
            return False

        return self.test(compiled, value)


class Match(AbstractRegexFunction):
    # The whole value must match the pattern
    def test(self, compiled: Pattern, value: str) -> bool:
        return compiled.fullmatch(value) is not None


class Search(AbstractRegexFunction):
    # Some substring of the value must match the pattern
    def test(self, compiled: Pattern, value: str) -> bool:
        return compiled.search(value) is not None
