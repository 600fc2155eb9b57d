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
from typing import Any, NamedTuple, Union

__all__ = (
    "JsonValue", "ValueKind", "value_kind", "JSONPathNode", "NodeList",
    "normalized_path", "normalized_name", "Nothing", "NOTHING",
)


JsonValue = Union[
    int, float, str, bool, list["JsonValue"], tuple, dict[str, "JsonValue"],
    None
]
Location = tuple[Union[str, int], ...]


class ValueKind(enum.Enum):
    mapping = enum.auto()
    sequence = enum.auto()
    string = enum.auto()
    number = enum.auto()
    boolean = enum.auto()
    null = enum.auto()
    other = enum.auto()


def value_kind(value: Any) -> ValueKind:
    # Strings are scalars here even though Python can index them, and bool
    # must be checked before int since it is a subclass
    if isinstance(value, dict):
        return ValueKind.mapping
    elif isinstance(value, (list, tuple)):
        return ValueKind.sequence
    elif isinstance(value, str):
        return ValueKind.string
    elif isinstance(value, bool):
        return ValueKind.boolean
    elif isinstance(value, (int, float)):
        return ValueKind.number
    elif value is None:
        return ValueKind.null
    return ValueKind.other


_escapes = {
    "\\": "\\\\",
    "'": "\\'",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def normalized_name(name: str) -> str:
    out = []
    for char in name:
        if char in _escapes:
            out.append(_escapes[char])
        elif ord(char) < 0x20:
            out.append(f"\\u{ord(char):04x}")
        else:
            out.append(char)
    return "'" + "".join(out) + "'"


def normalized_path(location: Location) -> str:
    parts = ["$"]
    for step in location:
        if isinstance(step, str):
            parts.append(f"[{normalized_name(step)}]")
        else:
            parts.append(f"[{step}]")
    return "".join(parts)


class JSONPathNode(NamedTuple):
    value: JsonValue
    location: Location
    root: JsonValue

    def __repr__(self):
        return f"JSONPathNode({self.value!r}, {self.path()!r})"

    def new_child(self, value: JsonValue, key: Union[str, int]
                  ) -> JSONPathNode:
        return JSONPathNode(value, self.location + (key,), self.root)

    def path(self) -> str:
        return normalized_path(self.location)


class NodeList(list):
    def values(self) -> list[JsonValue]:
        return [node.value for node in self]

    def paths(self) -> list[str]:
        return [node.path() for node in self]

    def empty(self) -> bool:
        return not self

    def __str__(self):
        return f"NodeList{super().__str__()}"


class Nothing:
    # The absence of a value, e.g. the result of a singular query that
    # selected no node. Distinct from JSON null

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "NOTHING"

    def __bool__(self):
        return False


NOTHING = Nothing()
