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

from .environment import JSONPathEnvironment
from .exceptions import (JSONPathError, JSONPathIndexError, JSONPathNameError,
                         JSONPathSyntaxError, JSONPathTypeError)
from .function_extensions import ExpressionType, FilterFunction
from .lex import lex
from .lru_cache import LRUCache
from .node import (NOTHING, JSONPathNode, JsonValue, NodeList,
                   normalized_path)
from .path import JSONPath

__all__ = (
    "JSONPathEnvironment", "JSONPath", "JSONPathNode", "NodeList",
    "JsonValue", "JSONPathError", "JSONPathSyntaxError", "JSONPathTypeError",
    "JSONPathNameError", "JSONPathIndexError", "ExpressionType",
    "FilterFunction", "LRUCache", "NOTHING", "normalized_path", "lex",
    "DEFAULT_ENV", "compile", "find", "finditer",
)

__version__ = "0.1.0"


DEFAULT_ENV = JSONPathEnvironment()
compile = DEFAULT_ENV.compile
find = DEFAULT_ENV.find
finditer = DEFAULT_ENV.finditer
