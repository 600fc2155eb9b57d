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
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Optional, Union

from .filter import Expression, FilterContext, evaluate_logical
from .node import JSONPathNode, ValueKind, normalized_name, value_kind
from .tokens import Token

if TYPE_CHECKING:
    from .environment import JSONPathEnvironment

__all__ = (
    "Selector", "NameSelector", "IndexSelector", "WildcardSelector",
    "SliceSelector", "FilterSelector", "resolve", "slice_indices",
)


@dataclass(frozen=True)
class NameSelector:
    token: Token
    name: str

    singular = True

    def __str__(self):
        return normalized_name(self.name)


@dataclass(frozen=True)
class IndexSelector:
    token: Token
    index: int

    singular = True

    def __str__(self):
        return str(self.index)


@dataclass(frozen=True)
class WildcardSelector:
    token: Token

    singular = False

    def __str__(self):
        return "*"


@dataclass(frozen=True)
class SliceSelector:
    token: Token
    start: Optional[int] = None
    stop: Optional[int] = None
    step: Optional[int] = None

    singular = False

    def __str__(self):
        start = "" if self.start is None else self.start
        stop = "" if self.stop is None else self.stop
        step = 1 if self.step is None else self.step
        return f"{start}:{stop}:{step}"


@dataclass(frozen=True)
class FilterSelector:
    token: Token
    expression: Expression
    env: JSONPathEnvironment = field(default=None, compare=False, repr=False)

    singular = False

    def __str__(self):
        return f"?{self.expression}"


Selector = Union[
    NameSelector, IndexSelector, WildcardSelector, SliceSelector,
    FilterSelector
]


def _resolve_name(selector: NameSelector, node: JSONPathNode
                  ) -> list[JSONPathNode]:
    value = node.value
    if value_kind(value) == ValueKind.mapping and selector.name in value:
        return [node.new_child(value[selector.name], selector.name)]
    return []


def _resolve_index(selector: IndexSelector, node: JSONPathNode
                   ) -> list[JSONPathNode]:
    value = node.value
    if value_kind(value) != ValueKind.sequence:
        return []

    length = len(value)
    index = selector.index
    if index < 0 and -index <= length:
        index += length
    if 0 <= index < length:
        return [node.new_child(value[index], index)]
    return []


def _resolve_wildcard(selector: WildcardSelector, node: JSONPathNode
                      ) -> list[JSONPathNode]:
    value = node.value
    kind = value_kind(value)
    if kind == ValueKind.mapping:
        return [node.new_child(v, k) for k, v in value.items()]
    elif kind == ValueKind.sequence:
        return [node.new_child(v, i) for i, v in enumerate(value)]
    return []


def _clamp(index: int, length: int, step: int) -> int:
    # Bounds from RFC 9535 section 2.3.4.2.2
    if step > 0:
        return min(max(index, 0), length)
    return min(max(index, -1), length - 1)


def slice_indices(length: int, start: Optional[int], stop: Optional[int],
                  step: Optional[int]) -> range:
    # Normalize and clamp slice bounds for a sequence of the given length
    step = 1 if step is None else step
    if length == 0 or step == 0:
        return range(0)

    if start is None:
        start = length - 1 if step < 0 else 0
    else:
        start = _clamp(start + length if start < 0 else start, length, step)

    if stop is None:
        stop = -1 if step < 0 else length
    else:
        stop = _clamp(stop + length if stop < 0 else stop, length, step)

    return range(start, stop, step)


def _resolve_slice(selector: SliceSelector, node: JSONPathNode
                   ) -> list[JSONPathNode]:
    value = node.value
    if value_kind(value) != ValueKind.sequence:
        return []

    indices = slice_indices(len(value), selector.start, selector.stop,
                            selector.step)
    return [node.new_child(value[i], i) for i in indices]


def _resolve_filter(selector: FilterSelector, node: JSONPathNode
                    ) -> list[JSONPathNode]:
    value = node.value
    kind = value_kind(value)
    if kind == ValueKind.mapping:
        items = value.items()
    elif kind == ValueKind.sequence:
        items = enumerate(value)
    else:
        return []

    nodes = []
    for key, item in items:
        context = FilterContext(selector.env, item, node.root)
        if evaluate_logical(selector.expression, context):
            nodes.append(node.new_child(item, key))
    return nodes


_resolvers: dict[type, Callable[[Selector, JSONPathNode],
                                list[JSONPathNode]]] = {
    NameSelector: _resolve_name,
    IndexSelector: _resolve_index,
    WildcardSelector: _resolve_wildcard,
    SliceSelector: _resolve_slice,
    FilterSelector: _resolve_filter,
}


def resolve(selector: Selector, node: JSONPathNode) -> list[JSONPathNode]:
    return _resolvers[type(selector)](selector, node)
